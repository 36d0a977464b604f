"""
Numerical utilities for basic sample statistics.

Responsibilities:
    * Provide the sample statistics consumed by the bin-count heuristics
      (element count, extrema, variance, quantiles, interquartile range).
    * Accept plain Python sequences, iterables or numpy arrays of any
      dimension; multi-dimensional input is treated as its flattened values.
"""
# 说明：直方图分箱启发式所依赖的基础样本统计工具。
# 职责：
# - element_count / summation / mean / variance：计数、求和（含 Kahan 补偿以提升数值稳定性）、均值与方差
# - quantile / interquartile_range：基于线性插值（R type 7，numpy 默认 "linear"）的分位数与四分位距
# - span：样本最小值与最大值
# 约定：
# - 输入一律按展平后的 float64 数组处理，不修改调用方数据

from __future__ import annotations

from typing import Any, Iterable, Tuple, Union

import numpy as np

ArrayLike = Union[Iterable[float], np.ndarray]


def as_sample(values: Any) -> np.ndarray:
    """Return the values as a flat float64 array (copying only when needed)."""
    # 惰性可迭代对象（生成器等）先物化为列表，再统一展平
    if not isinstance(values, np.ndarray) and not hasattr(values, "__len__"):
        values = list(values)
    return np.asarray(values, dtype=np.float64).ravel()


def element_count(values: Any) -> int:
    """Return the number of elements, counting every entry of multi-dimensional input."""
    if isinstance(values, np.ndarray):
        return int(values.size)
    if hasattr(values, "__len__"):
        return int(np.size(values))
    # 计数：迭代一次求长度（惰性可迭代也适用）
    return sum(1 for _ in values)


def summation(values: ArrayLike) -> float:
    """Return the sum of values with Kahan compensation."""
    # 求和（Kahan 补偿）：降低浮点累加误差
    total = 0.0
    compensation = 0.0
    for value in as_sample(values):
        y = float(value) - compensation
        t = total + y
        compensation = (t - total) - y
        total = t
    return total


def mean(values: ArrayLike) -> float:
    # 均值：对展平后的数组求和/长度；空输入时报错
    sample = as_sample(values)
    if sample.size == 0:
        raise ValueError("mean of empty input")
    return summation(sample) / sample.size


def variance(values: ArrayLike, *, ddof: int = 1) -> float:
    # 方差：默认无偏估计（ddof=1 样本方差）。当样本数 ≤ ddof 时抛错。
    sample = as_sample(values)
    n = sample.size
    if n <= ddof:
        raise ValueError("not enough values to compute variance")
    mu = mean(sample)
    accum = float(np.sum((sample - mu) ** 2))
    return accum / (n - ddof)


def quantile(values: ArrayLike, p: float) -> float:
    """Return the p-quantile using linear interpolation between order statistics."""
    if not 0.0 <= p <= 1.0:
        raise ValueError("quantile probability must lie in [0, 1]")
    sample = as_sample(values)
    if sample.size == 0:
        raise ValueError("quantile of empty input")
    return float(np.quantile(sample, p, method="linear"))


def interquartile_range(values: ArrayLike, low: float = 0.25, high: float = 0.75) -> float:
    """Return quantile(high) - quantile(low); defaults to the interquartile range."""
    if low > high:
        raise ValueError("lower quantile must not exceed upper quantile")
    sample = as_sample(values)
    if sample.size == 0:
        raise ValueError("interquartile range of empty input")
    # 一次排序同时求两个分位点
    lo, hi = np.quantile(sample, [low, high], method="linear")
    return float(hi - lo)


def span(values: ArrayLike) -> Tuple[float, float]:
    """Return (minimum, maximum) of the sample."""
    sample = as_sample(values)
    if sample.size == 0:
        raise ValueError("span of empty input")
    return float(sample.min()), float(sample.max())
