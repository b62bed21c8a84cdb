"""Role x HTTP verb matrix applied to the protected endpoints."""

import pytest

from factories import employee_payload

EMPLOYEES = "/api/v2/funcionario"
DEPARTMENTS = "/api/v2/departamento"


def test_missing_token_is_unauthorized(client):
    response = client.get(EMPLOYEES)
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json()["message"] == "Token não informado"


def test_invalid_token_is_unauthorized(client):
    response = client.get(DEPARTMENTS, headers={"Authorization": "Bearer nao-e-um-jwt"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token inválido ou expirado"


@pytest.mark.parametrize("role_headers", ["admin_headers", "manager_headers", "employee_headers", "viewer_headers"])
def test_every_role_can_read(client, request, role_headers, department):
    headers = request.getfixturevalue(role_headers)
    assert client.get(EMPLOYEES, headers=headers).status_code == 200
    assert client.get(f"{DEPARTMENTS}/{department.id}", headers=headers).status_code == 200


@pytest.mark.parametrize("role_headers", ["employee_headers", "viewer_headers"])
def test_read_only_roles_cannot_write(client, request, role_headers, department):
    headers = request.getfixturevalue(role_headers)

    response = client.post(EMPLOYEES, json=employee_payload(department.id), headers=headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Permissões insuficientes"

    assert client.put(f"{DEPARTMENTS}/{department.id}", json={"name": "TI"}, headers=headers).status_code == 403
    assert client.patch(f"{DEPARTMENTS}/{department.id}", json={"leader": "X"}, headers=headers).status_code == 403
    assert client.delete(f"{DEPARTMENTS}/{department.id}", headers=headers).status_code == 403


def test_manager_can_write_but_not_delete(client, manager_headers, department):
    created = client.post(EMPLOYEES, json=employee_payload(department.id), headers=manager_headers)
    assert created.status_code == 201

    response = client.post(DEPARTMENTS, json={"name": "Operações"}, headers=manager_headers)
    assert response.status_code == 201

    employee_id = created.json()["data"]["id"]
    assert client.delete(f"{EMPLOYEES}/{employee_id}", headers=manager_headers).status_code == 403


def test_admin_can_delete(client, admin_headers, department):
    created = client.post(EMPLOYEES, json=employee_payload(department.id), headers=admin_headers)
    employee_id = created.json()["data"]["id"]
    assert client.delete(f"{EMPLOYEES}/{employee_id}", headers=admin_headers).status_code == 204


@pytest.mark.parametrize("role_headers", ["manager_headers", "employee_headers", "viewer_headers"])
def test_user_admin_endpoints_require_admin(client, request, role_headers):
    headers = request.getfixturevalue(role_headers)
    assert client.get("/api/usuarios", headers=headers).status_code == 403
