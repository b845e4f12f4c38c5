"""Type tags and runtime classification.

Values are classified by their primitive kind, not by class identity,
mirroring a ``typeof``-style tagging:

- ``UNDEFINED`` -> ``undefined``; ``None`` -> ``object``.
- ``bool`` -> ``boolean`` (before numbers, since ``bool`` is an ``int``).
- ``str`` -> ``string``; any ``numbers.Number`` -> ``number``.
- :class:`Symbol` -> ``symbol``; any callable -> ``function``.
- Everything else, including lists, tuples and dicts -> ``object``.
"""

from __future__ import annotations

import numbers
from enum import StrEnum
from typing import Any

from typec.domain.markers import UNDEFINED


class TypeTag(StrEnum):
    """Classification names produced by :func:`classify`."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    FUNCTION = "function"
    UNDEFINED = "undefined"
    SYMBOL = "symbol"


class Symbol:
    """A unique marker value classified as ``symbol``.

    Two symbols are never equal, even with the same description.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description})"


def classify(value: Any) -> str:
    """Return the :class:`TypeTag` name for *value*.

    Examples:
        >>> classify("a"), classify(1.5), classify(True)
        ('string', 'number', 'boolean')
        >>> classify(None), classify([]), classify(len)
        ('object', 'object', 'function')
    """
    if value is UNDEFINED:
        return TypeTag.UNDEFINED.value
    if isinstance(value, bool):
        return TypeTag.BOOLEAN.value
    if isinstance(value, str):
        return TypeTag.STRING.value
    if isinstance(value, numbers.Number):
        return TypeTag.NUMBER.value
    if isinstance(value, Symbol):
        return TypeTag.SYMBOL.value
    if callable(value):
        return TypeTag.FUNCTION.value
    return TypeTag.OBJECT.value
