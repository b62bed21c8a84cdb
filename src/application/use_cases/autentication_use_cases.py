import logging
from sqlalchemy.orm import Session
from infrastructure import settings
from adapters.repository.autentication_repository import AuthenticationRepository
from application.use_cases.security import create_access_token, decode_token
from domain.entities.user_classes import UserEntity, RoleType, DEFAULT_ROLE, parse_role
from domain.entities.user_entity import User
from domain.exceptions import AccountInactive, DuplicateError, InvalidCredentials, InvalidToken, ValidationError
from domain.models.user_models import AuthResponse, RegisterRequest, TokenPayload
from domain.value_objects.email import Email
from domain.value_objects.result import Result

logger = logging.getLogger(__name__)

USERNAME_REQUIRED = "Nome de usuário é obrigatório"

def to_user_entity(user: User) -> UserEntity:
    return UserEntity(
        id=user.id,
        username=user.username,
        email=user.email,
        full_name=user.full_name,
        role=RoleType(user.role),
        is_active=user.is_active,
        created_at=user.created_at,
        last_login_at=user.last_login_at,
    )

class AuthenticationUseCases:
    """Application business rules for auth."""

    def __init__(self, db: Session):
        self.repo = AuthenticationRepository(db)

    def register_user(self, payload: RegisterRequest) -> Result[AuthResponse]:
        email = Email.create(payload.email)
        if email.is_failure:
            return Result.failure(email.error)

        username = payload.username.strip()
        full_name = payload.full_name.strip()
        if not username:
            return Result.failure(ValidationError(USERNAME_REQUIRED))
        if not full_name:
            return Result.failure(ValidationError("Nome completo é obrigatório"))

        if self.repo.username_or_email_taken(username, email.value.address):
            return Result.failure(DuplicateError("Usuário ou email já cadastrado"))

        role = self._resolve_role(payload.role)
        try:
            user = self.repo.create_user(
                username=username,
                email=email.value.address,
                password=payload.password,
                full_name=full_name,
                role=role,
            )
        except DuplicateError as exc:
            return Result.failure(exc)

        logger.info("Usuário %s registrado com sucesso com perfil %s", user.username, role.value)
        return Result.success(self._auth_response(to_user_entity(user)))

    def login(self, *, username: str, password: str) -> Result[AuthResponse]:
        username = username.strip()
        if not username:
            return Result.failure(ValidationError(USERNAME_REQUIRED))

        user = self.repo.verify_credentials(username=username, password=password)
        if not user:
            logger.warning("Tentativa de login falhada para usuário %s", username)
            return Result.failure(InvalidCredentials())

        if not user.is_active:
            logger.warning("Login recusado para usuário inativo %s", username)
            return Result.failure(AccountInactive())

        user = self.repo.touch_last_login(user)
        logger.info("Usuário %s logado com sucesso", user.username)
        return Result.success(self._auth_response(to_user_entity(user)))

    @staticmethod
    def verify_token(token: str) -> Result[TokenPayload]:
        try:
            return Result.success(decode_token(token))
        except InvalidToken as exc:
            return Result.failure(exc)

    def _resolve_role(self, raw: str | None) -> RoleType:
        requested = parse_role(raw)
        if requested is None:
            return DEFAULT_ROLE
        if requested is not DEFAULT_ROLE and not settings.ALLOW_SELF_ROLE_ASSIGNMENT:
            logger.warning("Perfil %s solicitado no cadastro foi ignorado", requested.value)
            return DEFAULT_ROLE
        return requested

    @staticmethod
    def _auth_response(user: UserEntity) -> AuthResponse:
        token, expires_at = create_access_token(user=user)
        return AuthResponse(
            user_id=user.id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            role=user.role,
            token=token,
            token_expiration=expires_at,
        )
