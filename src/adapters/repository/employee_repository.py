from sqlalchemy import select
from sqlalchemy.orm import Session
from domain.entities.employee_entity import Employee
from adapters.repository.generic_repository import GenericRepository

class EmployeeRepository(GenericRepository[Employee]):
    model = Employee

    def __init__(self, db: Session):
        super().__init__(db)

    def get_by_cpf(self, cpf: str) -> Employee | None:
        query = select(Employee).where(Employee.cpf == cpf)
        return self.db.execute(query).scalars().first()

    def get_by_email(self, email: str) -> Employee | None:
        query = select(Employee).where(Employee.email == email)
        return self.db.execute(query).scalars().first()

    def active_filter(self, active: bool | None):
        if active is None:
            return ()
        return (Employee.is_active == active,)
