# domain/value_objects/email.py
import re
from dataclasses import InitVar, dataclass

from domain.exceptions import ValidationError
from domain.value_objects.result import Result

EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
EMAIL_MAX_LENGTH = 150

_CREATE_KEY = object()


@dataclass(frozen=True)
class Email:
    """Endereço de e-mail normalizado (minúsculo, sem espaços nas bordas)."""

    address: str
    _key: InitVar[object] = None

    def __post_init__(self, _key):
        if _key is not _CREATE_KEY:
            raise TypeError("Use Email.create() para construir um Email")

    @staticmethod
    def create(raw: str | None) -> Result["Email"]:
        if raw is None or not raw.strip():
            return Result.failure(ValidationError("Email não pode estar vazio"))

        if len(raw) > EMAIL_MAX_LENGTH:
            return Result.failure(ValidationError("Email não pode exceder 150 caracteres"))

        if not EMAIL_RE.fullmatch(raw):
            return Result.failure(ValidationError("Email inválido"))

        return Result.success(Email(raw.strip().lower(), _CREATE_KEY))

    def __str__(self) -> str:
        return self.address
