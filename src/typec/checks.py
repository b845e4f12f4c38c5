"""Predicates and guards for the nine typec operations.

Predicates (``type_check``, ``is_null``, ``check_all``, ``truthy``, ``falsy``,
``is_true``) return a bool. Guards (``ensure_type``, ``ensure_type_all``,
``ensure_type_array``) return their input unchanged or raise a
:class:`~typec.errors.TypecError`.

INVARIANT: every function is pure. Batch guards walk their input in order
and stop at the first failure.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable
from typing import Any, TypeVar

from typec.config.models import DEFAULT_PREFIX
from typec.domain.markers import UNDEFINED, is_nan, is_null
from typec.domain.pairs import unpack_pair
from typec.domain.types import classify
from typec.errors import ArgumentShapeError, ArgumentTypeError, TypeMismatch

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "check_all",
    "ensure_type",
    "ensure_type_all",
    "ensure_type_array",
    "falsy",
    "is_null",
    "is_true",
    "truthy",
    "type_check",
]


def type_check(value: Any, ctype: Any) -> bool:
    """Check that *value* is present and classified as *ctype*.

    Lists and tuples classify as ``"object"``; use :func:`ensure_type_array`
    for sequence checks.

    Examples:
        >>> type_check("hello", "string"), type_check(42, "number")
        (True, True)
        >>> type_check(None, "object"), type_check([], "object")
        (False, True)
    """
    if is_null(value) or not isinstance(ctype, str) or not ctype:
        return False
    return classify(value) == ctype


def check_all(values: Iterable[Any]) -> bool:
    """Check that no element of *values* is missing, unset, or NaN.

    An empty iterable passes.
    """
    return all(not is_null(value) for value in values)


def _mismatch(value: Any, ctype: Any, message: str, index: int | None = None) -> TypeMismatch:
    actual = classify(value)
    logger.debug("Rejected %s value where %s was expected (index=%s)", actual, ctype, index)
    return TypeMismatch(ctype, actual, message, index=index)


def ensure_type(value: T, ctype: Any, message: str = DEFAULT_PREFIX) -> T:
    """Return *value* if it passes :func:`type_check`, else raise.

    Raises:
        TypeMismatch: ``"{message} Expected type {ctype}, but got {actual}"``.
    """
    if not type_check(value, ctype):
        raise _mismatch(value, ctype, message)
    return value


def ensure_type_all(
    pairs: Iterable[Any],
    *,
    message: str = DEFAULT_PREFIX,
    legacy_pair_shape: bool = False,
) -> None:
    """Check each ``{type, value}`` descriptor in order.

    A descriptor is a mapping with ``"type"`` and ``"value"`` keys or a
    :class:`~typec.domain.pairs.TypeValuePair`. The ``type`` must be truthy
    and the ``value`` key present; ``0``, ``False`` and ``""`` are valid
    values. With *legacy_pair_shape*, any falsy ``value`` is a shape error.

    Raises:
        ArgumentShapeError: A descriptor is malformed.
        TypeMismatch: A descriptor's value does not match its type.
    """
    for index, item in enumerate(pairs):
        unpacked = unpack_pair(item)
        if unpacked is None:
            raise ArgumentShapeError(item, index=index)
        ctype, value = unpacked
        if falsy(ctype) or (legacy_pair_shape and falsy(value)):
            raise ArgumentShapeError(item, index=index)
        if not type_check(value, ctype):
            raise _mismatch(value, ctype, message, index)


def ensure_type_array(
    values: Any,
    ctype: Any,
    message: str = DEFAULT_PREFIX,
) -> Any:
    """Return the list or tuple *values* if every element matches *ctype*.

    Raises:
        ArgumentTypeError: *values* is not a list or tuple.
        TypeMismatch: First non-matching element, with its ``index`` set.
    """
    if not isinstance(values, (list, tuple)):
        raise ArgumentTypeError(classify(values))
    for index, item in enumerate(values):
        if not type_check(item, ctype):
            raise _mismatch(item, ctype, message, index)
    return values


def truthy(value: Any) -> bool:
    """Check *value* against the fixed falsy list.

    Only ``UNDEFINED``, ``None``, ``False``, numeric zero, ``""`` and NaN are
    falsy. ``"0"``, ``[]``, ``{}`` and negative numbers are truthy.
    """
    if value is UNDEFINED or value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return not is_nan(value) and value != 0
    return True


def falsy(value: Any) -> bool:
    return not truthy(value)


def is_true(value: Any) -> bool:
    """Check that *value* is the boolean ``True`` itself, not merely truthy."""
    return type_check(value, "boolean") and value is True
