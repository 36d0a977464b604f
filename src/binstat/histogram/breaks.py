"""
Bin-count heuristics for histogram axes.

Responsibilities
  - Suggest a number of bins for a sample: Sturges, Scott and
    Freedman–Diaconis rules, plus the width-to-count conversion they share.
  - Keep a small registry so factories can accept a break function by name.

Usage Context
  - ``regular_axis(freedman_diaconis, low, high, data=sample)`` or
    ``regular_histogram(sample, "scott", low, high)``.

Limitations
  - Empty samples and zero-spread samples are rejected; the heuristics do
    not guess a width for degenerate input.
"""
# 说明：分箱数启发式规则与其注册表。
# 职责：
# - sturges：ceil(log2(n)) + 1
# - bins_from_width：ceil((max - min) / width)
# - scott：宽度 3.49 * 样本标准差 / n^(1/3)
# - freedman_diaconis：宽度 2 * IQR / n^(1/3)；IQR 为 0 时按 1/8 → 1/512 逐级放宽分位窗口，
#   走回退路径时宽度改用 iqr / (1 - 2q)，与主流统计软件的处理保持一致
# - 注册表：register_break_function / get_break_function / resolve_break_function

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Union

import numpy as np

from binstat.core.data.statistics import (
    as_sample,
    element_count,
    interquartile_range,
    span,
    variance,
)
from binstat.core.utils.logging import get_logger
from binstat.core.utils.param_validation import (
    ParamValidationError,
    ensure,
    validate_arguments,
)
from binstat.histogram.exceptions import DegenerateSampleError

_logger = get_logger(__name__)

BreakFunction = Callable[[Any], int]

# Freedman–Diaconis 回退阶梯的分位窗口除数：8, 16, ..., 512
FD_LADDER = (8, 16, 32, 64, 128, 256, 512)


def _non_empty(values: Any) -> np.ndarray:
    sample = as_sample(values)
    ensure(sample.size > 0, "sample must not be empty")
    return sample


def _positive_width(width: Any) -> float:
    ensure(isinstance(width, (int, float, np.integer, np.floating)), "width must be a number")
    width = float(width)
    ensure(width > 0, "width must be positive")
    return width


def sturges(values: Any) -> int:
    """Sturges' rule; accepts a sample or its element count."""
    if isinstance(values, (int, np.integer)) and not isinstance(values, bool):
        n = int(values)
    else:
        n = element_count(values)
    ensure(n > 0, "sturges requires at least one observation")
    return int(math.ceil(math.log2(n))) + 1


@validate_arguments({"width": _positive_width})
def bins_from_width(values: Any, width: float) -> int:
    """Number of bins of ``width`` needed to cover the sample range."""
    sample = _non_empty(values)
    lo, hi = span(sample)
    if hi - lo == 0:
        raise DegenerateSampleError("sample has zero spread; no bin count can be derived")
    return int(math.ceil((hi - lo) / width))


def scott(values: Any) -> int:
    """Scott's normal-reference rule."""
    sample = _non_empty(values)
    n = sample.size
    try:
        sigma = math.sqrt(variance(sample, ddof=1))
    except ValueError as exc:
        raise DegenerateSampleError("scott requires at least two observations") from exc
    width = 3.49 * sigma / np.cbrt(n)
    if not width > 0:
        raise DegenerateSampleError("scott: sample variance is zero")
    bins = bins_from_width(sample, float(width))
    _logger.debug("scott: n=%d width=%.6g bins=%d", n, width, bins)
    return bins


def freedman_diaconis(values: Any) -> int:
    """Freedman–Diaconis rule with a widening quantile window for zero IQR."""
    sample = _non_empty(values)
    n = sample.size
    q = 0.25
    iqr = interquartile_range(sample, q, 1.0 - q)
    if iqr > 0:
        width = 2.0 * iqr / np.cbrt(n)
    else:
        for divisor in FD_LADDER:
            q = 1.0 / divisor
            iqr = interquartile_range(sample, q, 1.0 - q)
            _logger.debug("freedman_diaconis: widened window to [1/%d, 1 - 1/%d], iqr=%.6g", divisor, divisor, iqr)
            if iqr > 0:
                break
        if not iqr > 0:
            raise DegenerateSampleError(
                f"freedman_diaconis: interquartile range is zero up to 1/{FD_LADDER[-1]} quantiles"
            )
        width = iqr / (1.0 - 2.0 * q) / np.cbrt(n)
    bins = bins_from_width(sample, float(width))
    _logger.debug("freedman_diaconis: n=%d q=%.6g width=%.6g bins=%d", n, q, width, bins)
    return bins


# 名称到分箱函数的注册表，名称一律小写
BREAK_FUNCTIONS: Dict[str, BreakFunction] = {
    "sturges": sturges,
    "scott": scott,
    "freedman_diaconis": freedman_diaconis,
    "fd": freedman_diaconis,
}


def _normalize_name(name: str) -> str:
    return str(name).strip().lower().replace("-", "_").replace(" ", "_")


def register_break_function(name: str, fn: BreakFunction) -> None:
    ensure(callable(fn), "break function must be callable")
    key = _normalize_name(name)
    ensure(bool(key), "break function name must not be empty")
    BREAK_FUNCTIONS[key] = fn


def get_break_function(name: str) -> BreakFunction:
    key = _normalize_name(name)
    if key not in BREAK_FUNCTIONS:
        raise ParamValidationError(f"unknown break function '{name}'")
    return BREAK_FUNCTIONS[key]


def is_break_function(obj: Any) -> bool:
    # 字符串按注册名判定，可调用对象需已在注册表中
    if isinstance(obj, str):
        return _normalize_name(obj) in BREAK_FUNCTIONS
    return callable(obj) and any(obj is fn for fn in BREAK_FUNCTIONS.values())


def resolve_break_function(fn: Union[str, BreakFunction]) -> BreakFunction:
    """Return a callable for a registered name, or ``fn`` itself if callable."""
    if isinstance(fn, str):
        return get_break_function(fn)
    if not callable(fn):
        raise ParamValidationError("break function must be a callable or a registered name")
    return fn


__all__ = [
    "BREAK_FUNCTIONS",
    "FD_LADDER",
    "bins_from_width",
    "freedman_diaconis",
    "get_break_function",
    "is_break_function",
    "register_break_function",
    "resolve_break_function",
    "scott",
    "sturges",
]
