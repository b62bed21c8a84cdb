# alembic/env.py
from __future__ import annotations
import os, sys
from logging.config import fileConfig
from alembic import context
from sqlalchemy import engine_from_config, pool

# src/ precisa estar no path para importar a infraestrutura e as entidades
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# settings carrega o .env; DATABASE_URL já vem resolvida
from infrastructure.settings import DATABASE_URL
from infrastructure.database import Base
# cada entidade importada registra sua tabela no Base.metadata
from domain.entities.user_entity import User  # noqa: F401
from domain.entities.department_entity import Department  # noqa: F401
from domain.entities.employee_entity import Employee  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

def _options(url: str) -> dict:
    # SQLite não suporta ALTER TABLE completo: usa o modo batch
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "compare_server_default": True,
        "render_as_batch": url.startswith("sqlite"),
    }

def run_migrations_offline() -> None:
    context.configure(url=DATABASE_URL, literal_binds=True, **_options(DATABASE_URL))
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online() -> None:
    connectable = engine_from_config(
        {"sqlalchemy.url": DATABASE_URL},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **_options(DATABASE_URL))
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
