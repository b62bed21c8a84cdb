import logging
from typing import Any, List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from adapters.repository.department_repository import DepartmentRepository
from adapters.repository.employee_repository import EmployeeRepository
from application.utils.utils import normalize_paging, total_pages
from domain.entities.employee_entity import Employee
from domain.exceptions import DuplicateError, NotFound, ValidationError
from domain.models.employee_models import EmployeeCreate, EmployeePatch, EmployeeRead, EmployeeUpdate
from domain.models.response_models import PagedData
from domain.value_objects.cpf import CPF
from domain.value_objects.email import Email
from domain.value_objects.result import Result

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Funcionário não encontrado"

# campos que um PATCH não pode anular
REQUIRED_FIELDS = {
    "name", "position", "cpf", "email", "hire_date",
    "department_id", "salary", "seniority_level", "is_active",
}

BLANK_MESSAGES = {
    "name": "Nome do funcionário é obrigatório",
    "position": "Cargo é obrigatório",
}

def to_employee_read(employee: Employee) -> EmployeeRead:
    read = EmployeeRead.model_validate(employee)
    cpf = CPF.create(employee.cpf)
    if cpf.is_success:
        read = read.model_copy(update={"cpf": cpf.value.formatted()})
    return read

class EmployeeUseCases:

    def __init__(self, db: Session):
        self.repo = EmployeeRepository(db)
        self.department_repo = DepartmentRepository(db)

    def list_all(self) -> Result[List[EmployeeRead]]:
        return Result.success([to_employee_read(e) for e in self.repo.get_all()])

    def get_by_id(self, employee_id: int) -> Result[EmployeeRead]:
        employee = self.repo.get_by_id(employee_id)
        if employee is None:
            return Result.failure(NotFound(NOT_FOUND_MESSAGE))
        return Result.success(to_employee_read(employee))

    def get_paged(self, page_number: int, page_size: int, active: bool | None = None) -> Result[PagedData[EmployeeRead]]:
        page_number, page_size = normalize_paging(page_number, page_size)
        filters = self.repo.active_filter(active)
        items = self.repo.get_paged(page_number, page_size, *filters)
        count = self.repo.count(*filters)
        return Result.success(PagedData[EmployeeRead](
            data=[to_employee_read(e) for e in items],
            page_number=page_number,
            page_size=page_size,
            total_count=count,
            total_pages=total_pages(count, page_size),
        ))

    def create(self, payload: EmployeeCreate) -> Result[EmployeeRead]:
        checked = self._validate(payload.model_dump())
        if checked.is_failure:
            return checked

        employee = Employee(**checked.value)
        return self._save(employee, "criado")

    def update(self, employee_id: int, payload: EmployeeUpdate) -> Result[EmployeeRead]:
        employee = self.repo.get_by_id(employee_id)
        if employee is None:
            return Result.failure(NotFound(NOT_FOUND_MESSAGE))

        checked = self._validate(payload.model_dump(), current_id=employee_id)
        if checked.is_failure:
            return checked

        for field, value in checked.value.items():
            setattr(employee, field, value)
        return self._save(employee, "atualizado")

    def patch(self, employee_id: int, payload: EmployeePatch) -> Result[EmployeeRead]:
        employee = self.repo.get_by_id(employee_id)
        if employee is None:
            return Result.failure(NotFound(NOT_FOUND_MESSAGE))

        changes = payload.model_dump(exclude_unset=True)
        checked = self._validate(changes, current_id=employee_id)
        if checked.is_failure:
            return checked

        for field, value in checked.value.items():
            setattr(employee, field, value)
        return self._save(employee, "atualizado parcialmente")

    def delete(self, employee_id: int) -> Result[None]:
        if not self.repo.delete(employee_id):
            return Result.failure(NotFound(NOT_FOUND_MESSAGE))
        logger.info("Funcionário %s removido", employee_id)
        return Result.success()

    def _validate(self, fields: dict[str, Any], current_id: int | None = None) -> Result[dict[str, Any]]:
        """Normaliza CPF/email e confere departamento e unicidade dos campos presentes."""
        for field in REQUIRED_FIELDS & fields.keys():
            if fields[field] is None:
                return Result.failure(ValidationError(f"Campo '{field}' não pode ser nulo"))

        values = dict(fields)

        if "cpf" in values:
            cpf = CPF.create(values["cpf"])
            if cpf.is_failure:
                return Result.failure(cpf.error)
            values["cpf"] = cpf.value.number
            other = self.repo.get_by_cpf(values["cpf"])
            if other is not None and other.id != current_id:
                return Result.failure(DuplicateError("CPF já cadastrado"))

        if "email" in values:
            email = Email.create(values["email"])
            if email.is_failure:
                return Result.failure(email.error)
            values["email"] = email.value.address
            other = self.repo.get_by_email(values["email"])
            if other is not None and other.id != current_id:
                return Result.failure(DuplicateError("Email já cadastrado"))

        if "department_id" in values and self.department_repo.get_by_id(values["department_id"]) is None:
            return Result.failure(ValidationError("Departamento não encontrado"))

        for field, message in BLANK_MESSAGES.items():
            if field in values:
                values[field] = values[field].strip()
                if not values[field]:
                    return Result.failure(ValidationError(message))

        return Result.success(values)

    def _save(self, employee: Employee, action: str) -> Result[EmployeeRead]:
        try:
            saved = self.repo.update(employee)
        except IntegrityError:
            self.repo.rollback()
            logger.info("Conflito de unicidade ao salvar funcionário %s", employee.name)
            return Result.failure(DuplicateError("CPF ou email já cadastrado"))
        logger.info("Funcionário %s %s", saved.id, action)
        return Result.success(to_employee_read(saved))
