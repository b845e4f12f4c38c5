"""Empty markers: the values treated as absence throughout typec.

Three markers:
- Missing: the ``UNDEFINED`` sentinel (what an absent key resolves to).
- Unset: ``None``.
- Not-a-number: NaN floats, complex numbers with a NaN part, NaN decimals.

INVARIANT: falsy-but-present values (``""``, ``0``, ``False``, empty
containers) are never empty markers.
"""

from __future__ import annotations

import cmath
import math
from decimal import Decimal
from typing import Any, Final


class _Undefined:
    """Singleton type of :data:`UNDEFINED`."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


def is_nan(value: Any) -> bool:
    """Check whether *value* is a numeric not-a-number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return cmath.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def is_null(value: Any) -> bool:
    """Check whether *value* is missing, unset, or NaN.

    Examples:
        >>> is_null(None), is_null(UNDEFINED), is_null(float("nan"))
        (True, True, True)
        >>> is_null(""), is_null(0), is_null(False), is_null({})
        (False, False, False, False)
    """
    return value is UNDEFINED or value is None or is_nan(value)
