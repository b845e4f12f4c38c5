"""Frozen validator namespace.

A :class:`Validator` binds the typec operations to a
:class:`~typec.config.models.ValidatorConfig`. Instances are frozen pydantic
models: rebinding any attribute, including an operation, raises
``pydantic.ValidationError``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final, TypeVar

from pydantic import BaseModel, Field

from typec import checks
from typec.config.models import ValidatorConfig
from typec.domain.types import classify

T = TypeVar("T")


class Validator(BaseModel):
    """The typec operations as an immutable namespace.

    Attributes:
        config: Message prefix and descriptor-shape options.
    """

    model_config = {"frozen": True}

    config: ValidatorConfig = Field(default_factory=ValidatorConfig)

    def classify(self, value: Any) -> str:
        return classify(value)

    def type_check(self, value: Any, ctype: Any) -> bool:
        return checks.type_check(value, ctype)

    def is_null(self, value: Any) -> bool:
        return checks.is_null(value)

    def check_all(self, values: Iterable[Any]) -> bool:
        return checks.check_all(values)

    def ensure_type(self, value: T, ctype: Any, message: str | None = None) -> T:
        """Guard *value*; *message* falls back to ``config.default_prefix``."""
        return checks.ensure_type(value, ctype, self._prefix(message))

    def ensure_type_all(self, pairs: Iterable[Any]) -> None:
        checks.ensure_type_all(
            pairs,
            message=self.config.default_prefix,
            legacy_pair_shape=self.config.legacy_pair_shape,
        )

    def ensure_type_array(self, values: Any, ctype: Any, message: str | None = None) -> Any:
        return checks.ensure_type_array(values, ctype, self._prefix(message))

    def truthy(self, value: Any) -> bool:
        return checks.truthy(value)

    def falsy(self, value: Any) -> bool:
        return checks.falsy(value)

    def is_true(self, value: Any) -> bool:
        return checks.is_true(value)

    def _prefix(self, message: str | None) -> str:
        return self.config.default_prefix if message is None else message


validator: Final = Validator()
