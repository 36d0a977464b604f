"""
One-call histogram construction.

Responsibilities
  - Allocate zeroed counters, build the axis, put the data and return the
    accumulator.
  - Accept a break function (callable or registered name) as ``n_bin``,
    evaluated on the same data that is then binned.

Usage Context
  - ``regular_histogram(sample, "fd", 0.0, 1.0, AxisOptions(False, True, True))``.

Limitations
  - Lazy iterables are materialised once when a break function needs them.
"""
# 说明：一次调用完成直方图构造的便捷接口。
# 职责：
# - 分配零初始化计数、构造轴、放入数据并返回累加器
# - n_bin 为分箱函数时先在数据上求值；惰性可迭代对象先物化，避免被分箱函数耗尽

from __future__ import annotations

import enum
from typing import Any, Optional, Sequence, Type

import numpy as np

from binstat.histogram.accumulator import HistogramAccumulator
from binstat.histogram.axis_factory import (
    BinCount,
    category_axis,
    enum_axis,
    integral_axis,
    regular_axis,
    transform_axis,
    variable_axis,
)
from binstat.histogram.frequency_accumulator import FrequencyAccumulator
from binstat.histogram.options import AxisOptions
from binstat.histogram.storage import allocate_counts
from binstat.histogram.traits import bin_count_of, count_dtype_of
from binstat.histogram.transforms import TransformLike


def _materialize(data: Any, n_bin: BinCount) -> Any:
    if isinstance(n_bin, (int, np.integer)):
        return data
    if isinstance(data, np.ndarray) or hasattr(data, "__len__"):
        return data
    return list(data)


def histogram(data: Any, axis: Any) -> HistogramAccumulator:
    """Histogram of ``data`` over an already built axis."""
    counts = allocate_counts(bin_count_of(axis), count_dtype_of(axis))
    return HistogramAccumulator(axis, counts).put(data)


def frequency(data: Any, axis: Any) -> FrequencyAccumulator:
    """Frequency accumulator of ``data`` over an already built axis."""
    counts = allocate_counts(bin_count_of(axis), count_dtype_of(axis))
    return FrequencyAccumulator(axis, counts).put(data)


def integral_histogram(
    data: Any,
    n_bin: BinCount,
    low: Any,
    options: Optional[AxisOptions] = None,
    *,
    count_dtype: Any = None,
) -> HistogramAccumulator:
    data = _materialize(data, n_bin)
    return histogram(data, integral_axis(n_bin, low, options, data=data, count_dtype=count_dtype))


def regular_histogram(
    data: Any,
    n_bin: BinCount,
    low: Any,
    high: Any,
    options: Optional[AxisOptions] = None,
    *,
    count_dtype: Any = None,
) -> HistogramAccumulator:
    data = _materialize(data, n_bin)
    return histogram(data, regular_axis(n_bin, low, high, options, data=data, count_dtype=count_dtype))


def transform_histogram(
    data: Any,
    n_bin: BinCount,
    low: Any,
    high: Any,
    transform: TransformLike,
    inverse: Optional[TransformLike] = None,
    options: Optional[AxisOptions] = None,
    *,
    count_dtype: Any = None,
) -> HistogramAccumulator:
    data = _materialize(data, n_bin)
    axis = transform_axis(n_bin, low, high, transform, inverse, options, data=data, count_dtype=count_dtype)
    return histogram(data, axis)


def enum_histogram(data: Any, enum_cls: Type[enum.Enum], *, count_dtype: Any = None) -> HistogramAccumulator:
    return histogram(data, enum_axis(enum_cls, count_dtype=count_dtype))


def category_histogram(
    data: Any,
    enum_cls: Type[enum.Enum],
    options: Optional[AxisOptions] = None,
    *,
    count_dtype: Any = None,
) -> HistogramAccumulator:
    return histogram(data, category_axis(enum_cls, options, count_dtype=count_dtype))


def variable_histogram(
    data: Any,
    edges: Sequence[Any],
    options: Optional[AxisOptions] = None,
    *,
    count_dtype: Any = None,
) -> HistogramAccumulator:
    return histogram(data, variable_axis(edges, options, count_dtype=count_dtype))


__all__ = [
    "category_histogram",
    "enum_histogram",
    "frequency",
    "histogram",
    "integral_histogram",
    "regular_histogram",
    "transform_histogram",
    "variable_histogram",
]
