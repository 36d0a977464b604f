"""
Capability queries over axis-like objects.

The accumulators accept any object exposing ``index`` and either ``n_bin`` or
``bin_count()``; these helpers decide which optional capabilities such an object provides.
"""
# 说明：轴能力探测工具，按鸭子类型判定。
# - 上溢 / 下溢“被包含”：轴具有对应的 is_overflow / is_underflow 方法，且要么没有 options，要么 options 启用了它

from __future__ import annotations

from typing import Any

import numpy as np

from binstat.core.utils.config import get_config


def is_axis(obj: Any) -> bool:
    return callable(getattr(obj, "index", None)) and (
        hasattr(obj, "n_bin") or callable(getattr(obj, "bin_count", None))
    )


def has_axis_options(axis: Any) -> bool:
    return getattr(axis, "options", None) is not None


def includes_overflow(axis: Any) -> bool:
    if not callable(getattr(axis, "is_overflow", None)):
        return False
    if not has_axis_options(axis):
        return True
    return bool(axis.options.enable_overflow)


def includes_underflow(axis: Any) -> bool:
    if not callable(getattr(axis, "is_underflow", None)):
        return False
    if not has_axis_options(axis):
        return True
    return bool(axis.options.enable_underflow)


def bin_count_of(axis: Any) -> int:
    # n_bin 属性优先，其次 bin_count() 方法
    n_bin = getattr(axis, "n_bin", None)
    return int(n_bin if n_bin is not None else axis.bin_count())


def count_dtype_of(axis: Any) -> np.dtype:
    # 自定义轴未声明 count_dtype 时回落到运行时配置
    dtype = getattr(axis, "count_dtype", None)
    return np.dtype(dtype if dtype is not None else get_config().default_count_dtype)


__all__ = [
    "bin_count_of",
    "count_dtype_of",
    "has_axis_options",
    "includes_overflow",
    "includes_underflow",
    "is_axis",
]
