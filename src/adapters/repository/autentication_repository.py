# autentication_repository.py
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from domain.entities.user_entity import User as UserORM, utcnow
from domain.entities.user_classes import RoleType
from domain.exceptions import DuplicateError
from adapters.repository.user_repository import UserRepository
from application.use_cases.security import hash_password, verify_password, DUMMY_PASSWORD_HASH

logger = logging.getLogger(__name__)

class AuthenticationRepository:
    """Data access for users/auth (SQLAlchemy implementation)."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    # Queries
    def get_user_by_username(self, username: str) -> Optional[UserORM]:
        return self.users.get_by_username(username)

    def username_or_email_taken(self, username: str, email: str) -> bool:
        return self.users.exists_username_or_email(username, email)

    # Commands
    def create_user(self, *, username: str, email: str, password: str, full_name: str, role: RoleType) -> UserORM:
        user = UserORM(
            username=username,
            email=email,
            full_name=full_name,
            password_hash=hash_password(password),
            role=role,
            is_active=True,
            created_at=utcnow(),
        )
        try:
            return self.users.create(user)
        except IntegrityError:
            # registro concorrente com o mesmo username/email
            self.users.rollback()
            logger.info("Conflito de unicidade ao registrar %s", username)
            raise DuplicateError("Usuário ou email já cadastrado")

    def verify_credentials(self, *, username: str, password: str) -> Optional[UserORM]:
        user = self.get_user_by_username(username)
        if not user:
            verify_password(password, DUMMY_PASSWORD_HASH)
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def touch_last_login(self, user: UserORM) -> UserORM:
        return self.users.update_last_login(user, utcnow())
