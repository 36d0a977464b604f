"""Entry point for the core library components."""

from __future__ import annotations

from .data import (
    element_count,
    interquartile_range,
    mean,
    quantile,
    span,
    variance,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__: list[str] = [
    "element_count",
    "interquartile_range",
    "mean",
    "quantile",
    "span",
    "variance",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
