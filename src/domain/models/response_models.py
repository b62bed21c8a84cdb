# schemas.py
from datetime import datetime, timezone
from typing import Generic, List, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str = "Operação realizada com sucesso"
    data: T | None = None
    timestamp: datetime = Field(default_factory=_utcnow)

    @classmethod
    def ok(cls, data: T | None = None, message: str = "Operação realizada com sucesso") -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data)

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    timestamp: datetime = Field(default_factory=_utcnow)

class PagedData(BaseModel, Generic[T]):
    data: List[T]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
