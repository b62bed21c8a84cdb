from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from infrastructure.database import get_db
from domain.models.response_models import ApiResponse
from domain.models.user_models import UserRead, UserStatusUpdate
from application.use_cases.user_use_cases import UserUseCases
from typing import List
from application.use_cases.security import require_roles
from application.utils.utils import check_id
from domain.entities.user_classes import UserEntity, RoleType

router = APIRouter(prefix="/api/usuarios", tags=["usuarios"])

@router.get("", response_model=ApiResponse[List[UserRead]])
def find_all_users(
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_roles(RoleType.admin)),
):
    use_case = UserUseCases(db)
    return ApiResponse.ok(use_case.find_all_users().unwrap(), "Usuários listados com sucesso")

@router.get("/{user_id}", response_model=ApiResponse[UserRead])
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_roles(RoleType.admin)),
):
    check_id(user_id)
    use_case = UserUseCases(db)
    return ApiResponse.ok(use_case.get_user_by_id(user_id).unwrap(), "Usuário retornado com sucesso")

@router.patch("/{user_id}/status", response_model=ApiResponse[UserRead])
def change_user_status(
    user_id: int,
    payload: UserStatusUpdate,
    db: Session = Depends(get_db),
    current: UserEntity = Depends(require_roles(RoleType.admin)),
):
    """
    Atualiza o status (ativo/inativo) de um usuário.
    Corpo esperado: {"is_active": true/false}
    """
    check_id(user_id)
    use_case = UserUseCases(db)
    user = use_case.change_user_status(user_id=user_id, is_active=payload.is_active).unwrap()
    return ApiResponse.ok(user, "Status do usuário atualizado com sucesso")
