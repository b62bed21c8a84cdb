# infrastructure/settings.py
from dotenv import load_dotenv
import os

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./futuro_do_trabalho.db")

JWT_SECRET = os.environ.get("JWT_SECRET", "change_this_in_prod")
JWT_ISSUER = os.environ.get("JWT_ISSUER", "FuturoDoTrabalho.Api")
JWT_AUDIENCE = os.environ.get("JWT_AUDIENCE", "FuturoDoTrabalho.Client")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
JWT_LEEWAY_SECONDS = int(os.environ.get("JWT_LEEWAY_SECONDS", "0"))

# cadastro público pode escolher o próprio perfil; false força o perfil padrão
ALLOW_SELF_ROLE_ASSIGNMENT = _as_bool(os.environ.get("ALLOW_SELF_ROLE_ASSIGNMENT", "true"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
    ).split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# usados apenas ao executar `python src/main.py`
API_HOST = os.environ.get("API_HOST", "127.0.0.1")
API_PORT = int(os.environ.get("API_PORT", "8000"))
