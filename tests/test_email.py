"""Tests for the Email value object."""

import dataclasses

import pytest

from domain.value_objects.email import Email


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("joao@x.com", "joao@x.com"),
        ("Carlos.Silva@GDSolutions.com", "carlos.silva@gdsolutions.com"),
        ("ANA+rh@empresa.com.br", "ana+rh@empresa.com.br"),
    ],
)
def test_valid_emails_are_normalized(raw, expected):
    result = Email.create(raw)
    assert result.is_success
    assert result.value.address == expected
    assert str(result.value) == expected


@pytest.mark.parametrize("raw", ["joao.x.com", "joao@xcom", "joao@", "@x.com", "jo ao@x.com", "a@b@c.com"])
def test_invalid_emails_are_rejected(raw):
    result = Email.create(raw)
    assert result.is_failure
    assert result.error.message == "Email inválido"


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_empty_email_is_rejected(raw):
    result = Email.create(raw)
    assert result.is_failure
    assert result.error.message == "Email não pode estar vazio"


def test_max_length_boundary():
    domain = "@empresa.com"
    at_limit = "a" * (150 - len(domain)) + domain
    assert len(at_limit) == 150
    assert Email.create(at_limit).is_success

    over = "a" + at_limit
    result = Email.create(over)
    assert result.is_failure
    assert result.error.message == "Email não pode exceder 150 caracteres"


def test_equality_ignores_case():
    assert Email.create("Joao@X.com").value == Email.create("joao@x.com").value


def test_cannot_be_constructed_directly():
    with pytest.raises(TypeError):
        Email("joao@x.com")


def test_is_immutable():
    email = Email.create("joao@x.com").value
    with pytest.raises(dataclasses.FrozenInstanceError):
        email.address = "outro@x.com"
