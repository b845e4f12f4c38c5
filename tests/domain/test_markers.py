"""Tests for empty markers and NaN detection."""

from __future__ import annotations

import copy
import pickle
from decimal import Decimal

import pytest

from typec.domain.markers import UNDEFINED, is_nan, is_null


class TestUndefined:
    def test_singleton(self) -> None:
        assert type(UNDEFINED)() is UNDEFINED

    def test_repr(self) -> None:
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_is_falsy_in_python(self) -> None:
        assert not UNDEFINED

    def test_survives_copy_and_pickle(self) -> None:
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


class TestIsNan:
    @pytest.mark.parametrize(
        "value",
        [float("nan"), complex(float("nan"), 0), Decimal("NaN"), Decimal("sNaN")],
    )
    def test_nan_values(self, value: object) -> None:
        assert is_nan(value)

    @pytest.mark.parametrize("value", [0, 0.0, float("inf"), Decimal("1"), "nan", None, False])
    def test_non_nan_values(self, value: object) -> None:
        assert not is_nan(value)


class TestIsNull:
    def test_markers(self, nan: float) -> None:
        assert is_null(None)
        assert is_null(UNDEFINED)
        assert is_null(nan)

    @pytest.mark.parametrize("value", ["", 0, 0.0, False, [], {}, (), set(), b""])
    def test_falsy_but_present(self, value: object) -> None:
        """Falsy values are present, not empty markers."""
        assert not is_null(value)
