"""Tests for the frozen validator namespace and the package surface."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

import typec
from typec.config.models import ValidatorConfig
from typec.errors import ArgumentShapeError, TypeMismatch
from typec.namespace import Validator, validator


class TestDefaultValidator:
    def test_package_exports_instance(self) -> None:
        assert typec.validator is validator

    def test_default_prefix(self) -> None:
        with pytest.raises(TypeMismatch, match=r"^Type mismatch: Expected type number"):
            validator.ensure_type("1", "number")

    def test_operations(self) -> None:
        assert validator.type_check("a", "string")
        assert validator.is_null(None)
        assert validator.check_all([1, "a"])
        assert validator.truthy("0")
        assert validator.falsy(0)
        assert validator.is_true(True)
        assert validator.classify([]) == "object"
        assert validator.ensure_type_array([1, 2], "number") == [1, 2]
        validator.ensure_type_all([{"type": "number", "value": 0}])

    def test_cannot_rebind_operations(self) -> None:
        with pytest.raises(ValidationError):
            validator.type_check = lambda *_a: True  # type: ignore[method-assign]

    def test_cannot_swap_config(self) -> None:
        with pytest.raises(ValidationError):
            validator.config = ValidatorConfig(default_prefix="x")


class TestConfiguredValidator:
    def test_configured_prefix(self) -> None:
        v = Validator(config=ValidatorConfig(default_prefix="Bad input:"))
        with pytest.raises(TypeMismatch) as exc_info:
            v.ensure_type(1, "string")
        assert str(exc_info.value) == "Bad input: Expected type string, but got number"

    def test_explicit_message_wins(self) -> None:
        v = Validator(config=ValidatorConfig(default_prefix="Bad input:"))
        with pytest.raises(TypeMismatch, match=r"^Ids:"):
            v.ensure_type_array([1, None], "number", "Ids:")

    def test_prefix_applies_to_batches(self) -> None:
        v = Validator(config=ValidatorConfig(default_prefix="Row:"))
        with pytest.raises(TypeMismatch, match=r"^Row: Expected type boolean"):
            v.ensure_type_all([{"type": "boolean", "value": "yes"}])

    def test_legacy_pair_shape(self, legacy_validator: Validator) -> None:
        with pytest.raises(ArgumentShapeError):
            legacy_validator.ensure_type_all([{"type": "number", "value": 0}])
        legacy_validator.ensure_type_all([{"type": "number", "value": 1}])


class TestPackageSurface:
    @pytest.mark.parametrize(
        "name",
        [
            "type_check",
            "is_null",
            "check_all",
            "ensure_type",
            "ensure_type_all",
            "ensure_type_array",
            "truthy",
            "falsy",
            "is_true",
        ],
    )
    def test_operation_exported(self, name: str) -> None:
        assert name in typec.__all__
        assert callable(getattr(typec, name))
        assert callable(getattr(typec.validator, name))

    def test_all_names_resolve(self) -> None:
        for name in typec.__all__:
            assert hasattr(typec, name)
