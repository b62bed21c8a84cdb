from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field

class EmployeeCreate(BaseModel):
    name: str = Field(min_length=1, max_length=150)
    position: str = Field(min_length=1, max_length=100)
    cpf: str
    email: str
    phone: str | None = Field(default=None, max_length=20)
    hire_date: date
    department_id: int = Field(ge=1, le=2**31 - 1)
    salary: float = Field(ge=0)
    address: str | None = Field(default=None, max_length=255)
    seniority_level: int = Field(default=1, ge=1, le=5)
    is_active: bool = True

class EmployeeUpdate(EmployeeCreate):
    pass

class EmployeePatch(BaseModel):
    """Atualização parcial: só os campos enviados no corpo são aplicados."""
    name: str | None = Field(default=None, min_length=1, max_length=150)
    position: str | None = Field(default=None, min_length=1, max_length=100)
    cpf: str | None = None
    email: str | None = None
    phone: str | None = Field(default=None, max_length=20)
    hire_date: date | None = None
    department_id: int | None = Field(default=None, ge=1, le=2**31 - 1)
    salary: float | None = Field(default=None, ge=0)
    address: str | None = Field(default=None, max_length=255)
    seniority_level: int | None = Field(default=None, ge=1, le=5)
    is_active: bool | None = None

class EmployeeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    position: str
    cpf: str
    email: str
    phone: str | None = None
    hire_date: date
    department_id: int
    department_name: str | None = None
    salary: float
    address: str | None = None
    seniority_level: int
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
