"""Sample statistics shared across the core library."""

from .statistics import (
    as_sample,
    element_count,
    summation,
    mean,
    variance,
    quantile,
    interquartile_range,
    span,
)

__all__ = [
    "as_sample",
    "element_count",
    "summation",
    "mean",
    "variance",
    "quantile",
    "interquartile_range",
    "span",
]
