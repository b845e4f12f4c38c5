"""Pydantic configuration models with code-baked defaults.

No files or environment variables are read: a validator is configured
entirely by the values passed at construction.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, Field

DEFAULT_PREFIX: Final = "Type mismatch:"


class ValidatorConfig(BaseModel):
    """Options for a :class:`~typec.validator.Validator`, frozen after construction.

    Attributes:
        default_prefix: Message prefix used when a guard is not given one.
        legacy_pair_shape: Treat a falsy ``value`` field in ``ensure_type_all``
            descriptors as a malformed descriptor, as older releases did.
    """

    model_config = {"frozen": True, "strict": True}

    default_prefix: str = Field(default=DEFAULT_PREFIX)
    legacy_pair_shape: bool = False


DEFAULT_CONFIG: Final = ValidatorConfig()
