"""Tests for the CPF value object."""

import dataclasses

import pytest

from domain.exceptions import ValidationError
from domain.value_objects.cpf import CPF
from factories import make_cpf, random_cpfs


class TestCPFCreate:

    def test_known_valid_cpf(self):
        result = CPF.create("52998224725")
        assert result.is_success
        assert result.value.number == "52998224725"
        assert result.value.formatted() == "529.982.247-25"

    def test_accepts_punctuation(self):
        result = CPF.create("529.982.247-25")
        assert result.is_success
        assert result.value.number == "52998224725"

    @pytest.mark.parametrize("cpf", random_cpfs(25))
    def test_generated_cpfs_are_valid_and_round_trip(self, cpf):
        first = CPF.create(cpf)
        assert first.is_success

        again = CPF.create(first.value.formatted())
        assert again.is_success
        assert again.value == first.value
        assert again.value.number == cpf

    @pytest.mark.parametrize("digit", "0123456789")
    def test_identical_digits_are_rejected(self, digit):
        result = CPF.create(digit * 11)
        assert result.is_failure
        assert isinstance(result.error, ValidationError)
        assert result.error.message == "CPF inválido"

    @pytest.mark.parametrize("raw", ["123", "5299822472", "529982247250", "abc.def.ghi-jk"])
    def test_wrong_length_is_rejected(self, raw):
        result = CPF.create(raw)
        assert result.is_failure
        assert result.error.message == "CPF deve conter exatamente 11 dígitos"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_is_rejected(self, raw):
        result = CPF.create(raw)
        assert result.is_failure
        assert result.error.message == "CPF não pode estar vazio"

    @pytest.mark.parametrize("raw", ["52998224715", "52998224724", "12345678900"])
    def test_wrong_check_digits_are_rejected(self, raw):
        assert CPF.create(raw).is_failure

    def test_make_cpf_matches_known_value(self):
        assert make_cpf("529982247") == "52998224725"
        assert make_cpf("123456789") == "12345678909"


class TestCPFValue:

    def test_equality_by_digits(self):
        a = CPF.create("529.982.247-25").value
        b = CPF.create("52998224725").value
        assert a == b
        assert hash(a) == hash(b)

    def test_str_is_formatted(self):
        assert str(CPF.create("12345678909").value) == "123.456.789-09"

    def test_cannot_be_constructed_directly(self):
        with pytest.raises(TypeError):
            CPF("52998224725")

    def test_is_immutable(self):
        cpf = CPF.create("52998224725").value
        with pytest.raises(dataclasses.FrozenInstanceError):
            cpf.number = "12345678909"

    def test_unwrap_raises_the_carried_error(self):
        with pytest.raises(ValidationError):
            CPF.create("11111111111").unwrap()
