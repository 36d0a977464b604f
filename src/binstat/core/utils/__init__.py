"""Configuration, logging and argument-validation helpers."""

from .config import RuntimeConfig, configure, get_config
from .logging import configure_logging, get_logger
from .param_validation import (
    ParamValidationError,
    ensure,
    ensure_positive_int,
    ensure_type,
    validate_arguments,
)

__all__ = [
    "RuntimeConfig",
    "configure",
    "get_config",
    "configure_logging",
    "get_logger",
    "ParamValidationError",
    "ensure",
    "ensure_positive_int",
    "ensure_type",
    "validate_arguments",
]
