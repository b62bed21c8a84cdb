"""Tests for the registration, login and token-check endpoints."""

import logging

from sqlalchemy import select

from infrastructure import settings
from application.use_cases.security import decode_token
from domain.entities.user_entity import User

REGISTER_URL = "/api/autenticacao/registrar"
LOGIN_URL = "/api/autenticacao/login"
VERIFY_URL = "/api/autenticacao/verificar-token"


def register(client, **overrides):
    body = {
        "username": "joao",
        "email": "joao@x.com",
        "password": "Senha@123",
        "full_name": "João da Silva",
    }
    body.update(overrides)
    return client.post(REGISTER_URL, json=body)


class TestRegister:

    def test_register_returns_account_and_token(self, client):
        response = register(client)
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Usuário registrado com sucesso"
        assert "timestamp" in body

        data = body["data"]
        assert data["username"] == "joao"
        assert data["email"] == "joao@x.com"
        assert data["role"] == "Employee"
        assert decode_token(data["token"]).username == "joao"

    def test_registration_is_logged_once(self, client, caplog):
        with caplog.at_level(logging.INFO):
            register(client)
        registered = [r for r in caplog.records if "registrado" in r.getMessage()]
        assert len(registered) == 1

    def test_password_is_not_stored_in_clear(self, client, db_session):
        register(client)
        user = db_session.execute(select(User).where(User.username == "joao")).scalar_one()
        assert user.password_hash != "Senha@123"
        assert "Senha@123" not in user.password_hash

    def test_duplicate_username_fails(self, client):
        assert register(client).status_code == 200

        response = register(client, email="outro@x.com")
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Usuário ou email já cadastrado"
        assert "data" not in body

    def test_duplicate_email_is_case_insensitive(self, client):
        register(client)
        response = register(client, username="joao2", email="JOAO@X.COM")
        assert response.status_code == 400
        assert response.json()["message"] == "Usuário ou email já cadastrado"

    def test_invalid_email_fails(self, client):
        response = register(client, email="joao.x.com")
        assert response.status_code == 400
        assert response.json()["message"] == "Email inválido"

    def test_short_password_fails_validation(self, client):
        response = register(client, password="123")
        assert response.status_code == 400
        assert response.json()["message"].startswith("Validação falhou")

    def test_requested_role_is_honored(self, client):
        response = register(client, role="gerente")
        assert response.json()["data"]["role"] == "Manager"

    def test_unknown_role_falls_back_to_default(self, client):
        response = register(client, role="superuser")
        assert response.json()["data"]["role"] == "Employee"

    def test_self_assignment_can_be_disabled(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ALLOW_SELF_ROLE_ASSIGNMENT", False)
        response = register(client, role="Admin")
        assert response.status_code == 200
        assert response.json()["data"]["role"] == "Employee"

    def test_blank_username_is_rejected(self, client, db_session):
        response = register(client, username="   ")
        assert response.status_code == 400
        assert response.json()["message"] == "Nome de usuário é obrigatório"
        assert db_session.execute(select(User)).first() is None

    def test_blank_full_name_is_rejected(self, client):
        response = register(client, full_name=" \t ")
        assert response.status_code == 400
        assert response.json()["message"] == "Nome completo é obrigatório"

    def test_username_is_stored_trimmed(self, client):
        response = register(client, username="  joao  ")
        assert response.json()["data"]["username"] == "joao"


class TestLogin:

    def test_login_succeeds_and_updates_last_login(self, client, db_session):
        register(client)
        before = db_session.execute(select(User).where(User.username == "joao")).scalar_one()
        assert before.last_login_at is None

        response = client.post(LOGIN_URL, json={"username": "joao", "password": "Senha@123"})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login realizado com sucesso"
        assert decode_token(body["data"]["token"]).email == "joao@x.com"

        db_session.expire_all()
        after = db_session.execute(select(User).where(User.username == "joao")).scalar_one()
        assert after.last_login_at is not None

    def test_wrong_password_is_invalid_credentials(self, client):
        register(client)
        response = client.post(LOGIN_URL, json={"username": "joao", "password": "wrong"})
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Nome de usuário ou senha inválidos",
            "timestamp": response.json()["timestamp"],
        }

    def test_unknown_user_is_invalid_credentials(self, client):
        response = client.post(LOGIN_URL, json={"username": "ninguem", "password": "Senha@123"})
        assert response.status_code == 400
        assert response.json()["message"] == "Nome de usuário ou senha inválidos"

    def test_inactive_account_is_rejected(self, client, make_user):
        make_user("inativo", is_active=False)
        response = client.post(LOGIN_URL, json={"username": "inativo", "password": "Senha@123"})
        assert response.status_code == 400
        assert response.json()["message"] == "Usuário inativo"

    def test_blank_username_is_rejected(self, client):
        response = client.post(LOGIN_URL, json={"username": "   ", "password": "Senha@123"})
        assert response.status_code == 400
        assert response.json()["message"] == "Nome de usuário é obrigatório"

    def test_missing_fields_fail_validation(self, client):
        response = client.post(LOGIN_URL, json={"username": "joao"})
        assert response.status_code == 400
        assert response.json()["success"] is False


class TestVerifyToken:

    def test_valid_token(self, client):
        token = register(client).json()["data"]["token"]
        response = client.get(VERIFY_URL, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Token válido"
        assert body["data"]["username"] == "joao"

    def test_missing_token(self, client):
        response = client.get(VERIFY_URL)
        assert response.status_code == 401
        assert response.json()["message"] == "Token não informado"

    def test_invalid_token(self, client):
        response = client.get(VERIFY_URL, headers={"Authorization": "Bearer abc.def.ghi"})
        assert response.status_code == 401
        assert response.json()["message"] == "Token inválido ou expirado"
