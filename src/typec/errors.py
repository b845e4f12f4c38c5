"""Error kinds raised by the typec guards.

INVARIANT: every error derives from the builtin ``TypeError`` and is raised
synchronously to the immediate caller. Nothing is swallowed or retried.
"""

from __future__ import annotations

from typing import Any


class TypecError(TypeError):
    """Base class for all typec validation failures."""


class TypeMismatch(TypecError):
    """A value's classification differs from the expected tag.

    Attributes:
        expected: The tag the caller asked for.
        actual: The classification of the rejected value.
        prefix: Message prefix (caller-supplied or the configured default).
        index: Position of the rejected element in a batch, if any.
    """

    def __init__(
        self,
        expected: Any,
        actual: str,
        prefix: str,
        *,
        index: int | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.prefix = prefix
        self.index = index
        super().__init__(f"{prefix} Expected type {expected}, but got {actual}")


class ArgumentShapeError(TypecError):
    """A batch descriptor lacks its ``type`` or ``value`` field."""

    def __init__(self, item: Any, *, index: int | None = None) -> None:
        self.item = item
        self.index = index
        super().__init__("Each argument must be an object with 'type' and 'value' properties.")


class ArgumentTypeError(TypecError):
    """A sequence guard received something that is not a list or tuple."""

    def __init__(self, actual: str) -> None:
        self.actual = actual
        super().__init__(f"Expected an array, but got {actual}")
