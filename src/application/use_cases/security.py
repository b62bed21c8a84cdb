# security.py
import base64
import binascii
import hashlib
import hmac
import logging
import secrets
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError

from infrastructure.settings import (
    JWT_SECRET, JWT_ISSUER, JWT_AUDIENCE,
    ACCESS_TOKEN_EXPIRE_MINUTES, JWT_LEEWAY_SECONDS,
)
from domain.exceptions import Forbidden, InvalidToken
from domain.models.user_models import TokenPayload
from domain.entities.user_classes import UserEntity, RoleType, is_allowed

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)

ALGORITHM = "HS256"

# PBKDF2-HMAC-SHA256; credencial armazenada = base64(salt || chave derivada)
PBKDF2_ITERATIONS = 10000
SALT_SIZE = 16
DERIVED_KEY_SIZE = 20

def _derive(raw: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac(
        "sha256", raw.encode("utf-8"), salt, PBKDF2_ITERATIONS, dklen=DERIVED_KEY_SIZE
    )

def hash_password(raw: str) -> str:
    if not isinstance(raw, str):
        raise TypeError("Password must be a string")
    salt = secrets.token_bytes(SALT_SIZE)
    return base64.b64encode(salt + _derive(raw, salt)).decode("ascii")

def verify_password(raw: str, hashed: str) -> bool:
    if not isinstance(raw, str) or not isinstance(hashed, str):
        return False
    try:
        stored = base64.b64decode(hashed, validate=True)
    except (binascii.Error, ValueError):
        return False
    if len(stored) != SALT_SIZE + DERIVED_KEY_SIZE:
        return False
    salt, expected = stored[:SALT_SIZE], stored[SALT_SIZE:]
    return hmac.compare_digest(_derive(raw, salt), expected)

# usado quando o usuário não existe, para que o login custe sempre uma derivação
DUMMY_PASSWORD_HASH = hash_password(secrets.token_urlsafe(16))

def create_access_token(
    *, user: UserEntity, expires_minutes: int | None = None, now: datetime | None = None
) -> tuple[str, datetime]:
    issued_at = now or datetime.now(timezone.utc)
    minutes = ACCESS_TOKEN_EXPIRE_MINUTES if expires_minutes is None else expires_minutes
    expire = issued_at + timedelta(minutes=minutes)
    payload = {
        "sub": str(user.id),
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "role": user.role.value,
        "full_name": user.full_name,
        "iss": JWT_ISSUER,
        "aud": JWT_AUDIENCE,
        "iat": int(issued_at.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=ALGORITHM), expire

def decode_token(token: str) -> TokenPayload:
    if not token:
        raise InvalidToken("Token não informado")
    try:
        payload = jwt.decode(
            token,
            JWT_SECRET,
            algorithms=[ALGORITHM],
            audience=JWT_AUDIENCE,
            issuer=JWT_ISSUER,
            options={"verify_exp": True, "leeway": JWT_LEEWAY_SECONDS},
        )
        return TokenPayload(**payload)
    except (JWTError, ValidationError, TypeError) as exc:
        logger.warning("Token inválido: %s", exc)
        raise InvalidToken()

def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer),
) -> UserEntity:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise InvalidToken("Token não informado")
    payload = decode_token(credentials.credentials)
    return UserEntity(
        id=payload.id,
        username=payload.username,
        email=payload.email,
        full_name=payload.full_name,
        role=payload.role,
    )

def require_roles(*allowed: RoleType):
    def _checker(current: UserEntity = Depends(get_current_user)) -> UserEntity:
        if current.role not in allowed:
            raise Forbidden()
        return current
    return _checker

def require_permission(verb: str):
    """Dependência que aplica a matriz perfil x verbo HTTP ao endpoint."""
    def _checker(current: UserEntity = Depends(get_current_user)) -> UserEntity:
        if not is_allowed(current.role, verb):
            logger.warning("Acesso negado: %s (%s) tentou %s", current.username, current.role.value, verb)
            raise Forbidden()
        return current
    return _checker
