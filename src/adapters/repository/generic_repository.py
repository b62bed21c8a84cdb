from typing import Generic, List, Type, TypeVar
from sqlalchemy import func, select
from sqlalchemy.orm import Session

T = TypeVar("T")

class GenericRepository(Generic[T]):
    """CRUD por id, listagem paginada e contagem para uma entidade ORM.

    Repositórios específicos herdam desta classe e acrescentam consultas
    próprias. Cada comando faz commit ao final.
    """

    model: Type[T]

    def __init__(self, db: Session, model: Type[T] | None = None):
        self.db = db
        if model is not None:
            self.model = model

    # Queries
    def get_by_id(self, entity_id: int) -> T | None:
        return self.db.get(self.model, entity_id)

    def get_all(self, *filters) -> List[T]:
        query = select(self.model).where(*filters).order_by(self.model.id)
        return list(self.db.execute(query).scalars().all())

    def get_paged(self, page_number: int, page_size: int, *filters) -> List[T]:
        query = (
            select(self.model)
            .where(*filters)
            .order_by(self.model.id)
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        return list(self.db.execute(query).scalars().all())

    def count(self, *filters) -> int:
        query = select(func.count()).select_from(self.model).where(*filters)
        return self.db.execute(query).scalar_one()

    # Commands
    def create(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> bool:
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.commit()
        return True

    def rollback(self) -> None:
        self.db.rollback()
