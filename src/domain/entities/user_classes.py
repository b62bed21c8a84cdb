# entities.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType

class RoleType(str, Enum):
    admin = "Admin"
    manager = "Manager"
    employee = "Employee"
    viewer = "Viewer"

DEFAULT_ROLE = RoleType.employee

# nomes em português aceitos no cadastro
_ROLE_ALIASES = {
    "gerente": RoleType.manager,
    "funcionario": RoleType.employee,
    "funcionário": RoleType.employee,
}

# verbo HTTP -> perfis autorizados; tabela fixa, somente leitura
ROLE_PERMISSIONS = MappingProxyType({
    RoleType.admin: frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"}),
    RoleType.manager: frozenset({"GET", "POST", "PUT", "PATCH"}),
    RoleType.employee: frozenset({"GET"}),
    RoleType.viewer: frozenset({"GET"}),
})

def parse_role(raw: str | None) -> RoleType | None:
    """Converte texto em RoleType ignorando maiúsculas; None se não reconhecido."""
    if not raw:
        return None
    key = raw.strip().lower()
    for role in RoleType:
        if role.value.lower() == key:
            return role
    return _ROLE_ALIASES.get(key)

def is_allowed(role: RoleType, verb: str) -> bool:
    return verb.upper() in ROLE_PERMISSIONS.get(role, frozenset())

@dataclass(frozen=True)
class UserEntity:
    id: int
    username: str
    email: str
    full_name: str
    role: RoleType
    is_active: bool = True
    created_at: datetime | None = None
    last_login_at: datetime | None = None
