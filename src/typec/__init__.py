"""typec — runtime type checks, null checks, and type guards."""

from typec.checks import (
    check_all,
    ensure_type,
    ensure_type_all,
    ensure_type_array,
    falsy,
    is_null,
    is_true,
    truthy,
    type_check,
)
from typec.config.logging import configure_logging
from typec.config.models import DEFAULT_PREFIX, ValidatorConfig
from typec.domain.markers import UNDEFINED
from typec.domain.pairs import TypeValuePair
from typec.domain.types import Symbol, TypeTag, classify
from typec.errors import ArgumentShapeError, ArgumentTypeError, TypecError, TypeMismatch
from typec.namespace import Validator, validator

__version__ = "1.0.1"

__all__ = [
    "DEFAULT_PREFIX",
    "UNDEFINED",
    "ArgumentShapeError",
    "ArgumentTypeError",
    "Symbol",
    "TypeMismatch",
    "TypeTag",
    "TypeValuePair",
    "TypecError",
    "Validator",
    "ValidatorConfig",
    "check_all",
    "classify",
    "configure_logging",
    "ensure_type",
    "ensure_type_all",
    "ensure_type_array",
    "falsy",
    "is_null",
    "is_true",
    "truthy",
    "type_check",
    "validator",
]
