import logging
from typing import List
from sqlalchemy.orm import Session
from adapters.repository.user_repository import UserRepository
from domain.exceptions import NotFound
from domain.models.user_models import UserRead
from domain.value_objects.result import Result

logger = logging.getLogger(__name__)

class UserUseCases:
    def __init__(self, db: Session):
        self.repo = UserRepository(db)

    def find_all_users(self) -> Result[List[UserRead]]:
        return Result.success([UserRead.model_validate(u) for u in self.repo.get_all()])

    def get_user_by_id(self, user_id: int) -> Result[UserRead]:
        user = self.repo.get_by_id(user_id)
        if not user:
            return Result.failure(NotFound("Usuário não encontrado"))
        return Result.success(UserRead.model_validate(user))

    def change_user_status(self, user_id: int, is_active: bool) -> Result[UserRead]:
        user = self.repo.get_by_id(user_id)
        if not user:
            return Result.failure(NotFound("Usuário não encontrado"))

        updated = self.repo.update_status(user, is_active)
        logger.info("Usuário %s %s", updated.username, "ativado" if is_active else "desativado")
        return Result.success(UserRead.model_validate(updated))
