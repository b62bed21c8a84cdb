"""Configurações de teste compartilhadas."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from infrastructure.database import Base, get_db
from adapters.repository.autentication_repository import AuthenticationRepository
from application.use_cases.autentication_use_cases import to_user_entity
from application.use_cases.security import create_access_token
from domain.entities.department_entity import Department
from domain.entities.user_classes import RoleType
from main import app

DEFAULT_PASSWORD = "Senha@123"


@pytest.fixture
def engine():
    """Banco SQLite em memória, uma conexão compartilhada por teste."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make_user(username, role=RoleType.employee, password=DEFAULT_PASSWORD, is_active=True):
        repo = AuthenticationRepository(db_session)
        user = repo.create_user(
            username=username,
            email=f"{username}@futuro.com",
            password=password,
            full_name=username.title(),
            role=role,
        )
        if not is_active:
            user = repo.users.update_status(user, False)
        return user
    return _make_user


def headers_for(user) -> dict:
    token, _ = create_access_token(user=to_user_entity(user))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(make_user):
    return headers_for(make_user("admin", RoleType.admin))


@pytest.fixture
def manager_headers(make_user):
    return headers_for(make_user("gerente", RoleType.manager))


@pytest.fixture
def employee_headers(make_user):
    return headers_for(make_user("funcionario", RoleType.employee))


@pytest.fixture
def viewer_headers(make_user):
    return headers_for(make_user("visitante", RoleType.viewer))


@pytest.fixture
def department(db_session):
    dept = Department(name="Tecnologia", description="Departamento de TI e Desenvolvimento", leader="João Silva")
    db_session.add(dept)
    db_session.commit()
    db_session.refresh(dept)
    return dept
