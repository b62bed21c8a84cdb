# domain/value_objects/cpf.py
import re
from dataclasses import InitVar, dataclass

from domain.exceptions import ValidationError
from domain.value_objects.result import Result

NON_DIGIT_RE = re.compile(r"\D")

_CREATE_KEY = object()


def only_digits(value: str) -> str:
    return NON_DIGIT_RE.sub("", value or "")


def _check_digit(digits: str) -> int:
    weights = range(len(digits) + 1, 1, -1)
    remainder = sum(int(d) * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


@dataclass(frozen=True)
class CPF:
    """CPF sempre válido. Construa com CPF.create()."""

    number: str
    _key: InitVar[object] = None

    def __post_init__(self, _key):
        if _key is not _CREATE_KEY:
            raise TypeError("Use CPF.create() para construir um CPF")

    @staticmethod
    def create(raw: str | None) -> Result["CPF"]:
        if raw is None or not raw.strip():
            return Result.failure(ValidationError("CPF não pode estar vazio"))

        digits = only_digits(raw)
        if len(digits) != 11:
            return Result.failure(ValidationError("CPF deve conter exatamente 11 dígitos"))

        if digits == digits[0] * 11:
            return Result.failure(ValidationError("CPF inválido"))

        d1 = _check_digit(digits[:9])
        d2 = _check_digit(digits[:9] + str(d1))
        if digits[9:] != f"{d1}{d2}":
            return Result.failure(ValidationError("CPF inválido"))

        return Result.success(CPF(digits, _CREATE_KEY))

    def formatted(self) -> str:
        n = self.number
        return f"{n[:3]}.{n[3:6]}.{n[6:9]}-{n[9:]}"

    def __str__(self) -> str:
        return self.formatted()
