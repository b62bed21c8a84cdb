from datetime import datetime
from sqlalchemy import or_, select
from sqlalchemy.orm import Session
from domain.entities.user_entity import User
from adapters.repository.generic_repository import GenericRepository

class UserRepository(GenericRepository[User]):
    model = User

    def __init__(self, db: Session):
        super().__init__(db)

    def get_by_username(self, username: str) -> User | None:
        query = select(User).where(User.username == username)
        return self.db.execute(query).scalars().first()

    def get_by_email(self, email: str) -> User | None:
        query = select(User).where(User.email == email)
        return self.db.execute(query).scalars().first()

    def exists_username_or_email(self, username: str, email: str) -> bool:
        query = select(User.id).where(or_(User.username == username, User.email == email))
        return self.db.execute(query).first() is not None

    def update_last_login(self, user: User, when: datetime) -> User:
        user.last_login_at = when
        return self.update(user)

    def update_status(self, user: User, is_active: bool) -> User:
        user.is_active = is_active
        return self.update(user)
