from dataclasses import dataclass
from typing import Generic, TypeVar

from domain.exceptions import AppError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Sucesso com valor ou falha com um AppError, sem lançar exceção."""

    is_success: bool
    value: T | None = None
    error: AppError | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def failure(cls, error: AppError) -> "Result[T]":
        return cls(is_success=False, error=error)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def unwrap(self) -> T:
        if not self.is_success:
            raise self.error
        return self.value
