"""Type/value descriptors for batch validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from typec.domain.markers import UNDEFINED


class TypeValuePair(BaseModel):
    """A ``{type, value}`` descriptor consumed by ``ensure_type_all``.

    Attributes:
        type: Expected type tag (e.g. ``"string"``).
        value: The value to check. Any object, including ``None``.
    """

    model_config = {"frozen": True}

    type: str = Field(min_length=1)
    value: Any

    @classmethod
    def of(cls, type: str, value: Any) -> TypeValuePair:
        """Build a descriptor positionally."""
        return cls(type=type, value=value)


def unpack_pair(item: Any) -> tuple[Any, Any] | None:
    """Return ``(type, value)`` from a descriptor, or None if *item* is not one.

    A mapping without a ``"value"`` key is not a descriptor. An absent
    ``"type"`` key comes back as ``UNDEFINED``.
    """
    if isinstance(item, TypeValuePair):
        return item.type, item.value
    if isinstance(item, Mapping):
        if "value" not in item:
            return None
        return item.get("type", UNDEFINED), item["value"]
    return None
