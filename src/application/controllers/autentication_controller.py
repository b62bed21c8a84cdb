# autentication_controller.py
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from infrastructure.database import get_db
from domain.exceptions import InvalidToken
from domain.models.response_models import ApiResponse
from domain.models.user_models import RegisterRequest, LoginRequest, AuthResponse, TokenPayload
from application.use_cases.autentication_use_cases import AuthenticationUseCases
from application.use_cases.security import http_bearer

router = APIRouter(prefix="/api/autenticacao", tags=["autenticacao"])

@router.post("/registrar", response_model=ApiResponse[AuthResponse])
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    uc = AuthenticationUseCases(db)
    data = uc.register_user(payload).unwrap()
    return ApiResponse.ok(data, "Usuário registrado com sucesso")

@router.post("/login", response_model=ApiResponse[AuthResponse])
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    uc = AuthenticationUseCases(db)
    data = uc.login(username=payload.username, password=payload.password).unwrap()
    return ApiResponse.ok(data, "Login realizado com sucesso")

@router.get("/verificar-token", response_model=ApiResponse[TokenPayload])
def verify_token(credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer)):
    if credentials is None:
        raise InvalidToken("Token não informado")
    payload = AuthenticationUseCases.verify_token(credentials.credentials).unwrap()
    return ApiResponse.ok(payload, "Token válido")
