from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

class DepartmentCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    leader: str | None = Field(default=None, max_length=150)
    is_active: bool = True

class DepartmentUpdate(DepartmentCreate):
    pass

class DepartmentPatch(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    leader: str | None = Field(default=None, max_length=150)
    is_active: bool | None = None

class DepartmentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    leader: str | None = None
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
