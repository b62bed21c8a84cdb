from sqlalchemy import func, select
from sqlalchemy.orm import Session
from domain.entities.department_entity import Department
from domain.entities.employee_entity import Employee
from adapters.repository.generic_repository import GenericRepository

class DepartmentRepository(GenericRepository[Department]):
    model = Department

    def __init__(self, db: Session):
        super().__init__(db)

    def get_by_name(self, name: str) -> Department | None:
        query = select(Department).where(func.lower(Department.name) == name.strip().lower())
        return self.db.execute(query).scalars().first()

    def count_employees(self, department_id: int) -> int:
        query = select(func.count()).select_from(Employee).where(Employee.department_id == department_id)
        return self.db.execute(query).scalar_one()
