import logging
from typing import Any, List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from adapters.repository.department_repository import DepartmentRepository
from application.utils.utils import normalize_paging, total_pages
from domain.entities.department_entity import Department
from domain.exceptions import DuplicateError, NotFound, ValidationError
from domain.models.department_models import DepartmentCreate, DepartmentPatch, DepartmentRead, DepartmentUpdate
from domain.models.response_models import PagedData
from domain.value_objects.result import Result

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Departamento não encontrado"

class DepartmentUseCases:

    def __init__(self, db: Session):
        self.repo = DepartmentRepository(db)

    def list_all(self) -> Result[List[DepartmentRead]]:
        return Result.success([DepartmentRead.model_validate(d) for d in self.repo.get_all()])

    def get_by_id(self, department_id: int) -> Result[DepartmentRead]:
        department = self.repo.get_by_id(department_id)
        if department is None:
            return Result.failure(NotFound(NOT_FOUND_MESSAGE))
        return Result.success(DepartmentRead.model_validate(department))

    def get_paged(self, page_number: int, page_size: int) -> Result[PagedData[DepartmentRead]]:
        page_number, page_size = normalize_paging(page_number, page_size)
        items = self.repo.get_paged(page_number, page_size)
        count = self.repo.count()
        return Result.success(PagedData[DepartmentRead](
            data=[DepartmentRead.model_validate(d) for d in items],
            page_number=page_number,
            page_size=page_size,
            total_count=count,
            total_pages=total_pages(count, page_size),
        ))

    def create(self, payload: DepartmentCreate) -> Result[DepartmentRead]:
        checked = self._validate(payload.model_dump())
        if checked.is_failure:
            return checked
        return self._save(Department(**checked.value), "criado")

    def update(self, department_id: int, payload: DepartmentUpdate) -> Result[DepartmentRead]:
        return self._apply(department_id, payload.model_dump(), "atualizado")

    def patch(self, department_id: int, payload: DepartmentPatch) -> Result[DepartmentRead]:
        return self._apply(department_id, payload.model_dump(exclude_unset=True), "atualizado parcialmente")

    def delete(self, department_id: int) -> Result[None]:
        department = self.repo.get_by_id(department_id)
        if department is None:
            return Result.failure(NotFound(NOT_FOUND_MESSAGE))
        if self.repo.count_employees(department_id) > 0:
            return Result.failure(ValidationError("Departamento possui funcionários vinculados"))
        self.repo.delete(department_id)
        logger.info("Departamento %s removido", department_id)
        return Result.success()

    def _apply(self, department_id: int, fields: dict[str, Any], action: str) -> Result[DepartmentRead]:
        department = self.repo.get_by_id(department_id)
        if department is None:
            return Result.failure(NotFound(NOT_FOUND_MESSAGE))

        checked = self._validate(fields, current_id=department_id)
        if checked.is_failure:
            return checked

        for field, value in checked.value.items():
            setattr(department, field, value)
        return self._save(department, action)

    def _validate(self, fields: dict[str, Any], current_id: int | None = None) -> Result[dict[str, Any]]:
        values = dict(fields)
        for field in ("name", "is_active"):
            if field in values and values[field] is None:
                return Result.failure(ValidationError(f"Campo '{field}' não pode ser nulo"))

        if "name" in values:
            values["name"] = values["name"].strip()
            if not values["name"]:
                return Result.failure(ValidationError("Nome do departamento é obrigatório"))
            other = self.repo.get_by_name(values["name"])
            if other is not None and other.id != current_id:
                return Result.failure(DuplicateError("Departamento já cadastrado"))

        return Result.success(values)

    def _save(self, department: Department, action: str) -> Result[DepartmentRead]:
        try:
            saved = self.repo.update(department)
        except IntegrityError:
            self.repo.rollback()
            return Result.failure(DuplicateError("Departamento já cadastrado"))
        logger.info("Departamento %s %s", saved.id, action)
        return Result.success(DepartmentRead.model_validate(saved))
