"""Shared pytest fixtures and test helpers for typec tests."""

from __future__ import annotations

import pytest

from typec.config.models import ValidatorConfig
from typec.namespace import Validator


@pytest.fixture
def nan() -> float:
    """A fresh NaN float."""
    return float("nan")


@pytest.fixture
def legacy_validator() -> Validator:
    """Validator that treats falsy descriptor values as malformed."""
    return Validator(config=ValidatorConfig(legacy_pair_shape=True))
