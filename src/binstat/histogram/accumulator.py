"""
One-dimensional histogram accumulator.

Responsibilities
  - Route each value to overflow, underflow or its bin counter.
  - Merge accumulators built over equal axes.
  - Expose read-only views of the counters for reporting.

Usage Context
  - Built directly from an axis or through the construction API in
    ``binstat.histogram.api``; per-worker accumulators are combined with
    ``put(other)``.

Limitations
  - Counters only grow; there is no removal. A value rejected by the axis
    (out of range with overflow/underflow disabled) raises, and elements of
    the same ``put`` call routed before it stay counted.
"""
# 说明：一维直方图累加器。
# 职责：
# - put(value)：依次判定上溢 → 下溢 → counts[index(value)] += 1
# - put(iterable)：按输入顺序逐个路由；嵌套列表、生成器与 numpy 数组任意深度展平；嵌套元组视为多维点；字符串与枚举成员视为标量
# - put(other)：两轴相等时逐元素合并计数，双方都跟踪上溢 / 下溢时一并相加
# - 合并时对方的计数 dtype 必须能安全转换为本方的 dtype，否则抛 AxisMismatchError
# 约定：
# - 不变式 sum(counts) + overflow + underflow == 已放入的值的个数

from __future__ import annotations

import enum
from typing import Any, Dict, Iterator, Optional

import numpy as np

from binstat.core.utils.logging import get_logger
from binstat.core.utils.param_validation import ParamValidationError, ensure
from binstat.histogram.exceptions import AxisMismatchError
from binstat.histogram.storage import allocate_counts
from binstat.histogram.traits import (
    bin_count_of,
    count_dtype_of,
    includes_overflow,
    includes_underflow,
    is_axis,
)

_logger = get_logger(__name__)


def is_scalar_value(value: Any) -> bool:
    # 字符串、字节串、枚举成员与 numpy 标量均按单个值处理
    if isinstance(value, (str, bytes, enum.Enum, np.generic)):
        return True
    if isinstance(value, np.ndarray):
        return value.ndim == 0
    return not hasattr(value, "__iter__")


def iter_values(values: Any) -> Iterator[Any]:
    # 嵌套序列逐层展开，任意深度；嵌套的元组是一个多维点，整体作为单个值
    if isinstance(values, np.ndarray):
        if values.ndim == 0:
            yield values.item()
            return
        yield from values.ravel()
        return
    if is_scalar_value(values):
        yield values
        return
    for item in values:
        if isinstance(item, tuple):
            yield item
        else:
            yield from iter_values(item)


class HistogramAccumulator:
    """
    Counts values per bin of a single axis.

    - Configuration
      - axis: Any axis-like object (``index`` and ``n_bin`` or ``bin_count()``).
      - counts: Optional pre-allocated integer array of length ``n_bin``;
        zero-initialised storage is allocated when omitted.

    - Behavior
      - Overflow/underflow counters exist only when the axis includes them
        (see ``binstat.histogram.traits``); otherwise they read as None.

    - Usage Notes
      - ``put`` returns the accumulator so calls can be chained.
    """

    def __init__(self, axis: Any, counts: Optional[np.ndarray] = None):
        ensure(is_axis(axis), "axis must provide index() and n_bin or bin_count()")
        n_bin = bin_count_of(axis)
        if counts is None:
            counts = allocate_counts(n_bin, count_dtype_of(axis))
        else:
            ensure(isinstance(counts, np.ndarray), "counts must be a numpy array")
            ensure(counts.shape == (n_bin,), f"counts must have shape ({n_bin},), got {counts.shape}")
            ensure(np.issubdtype(counts.dtype, np.integer), "counts must have an integer dtype")
        self._axis = axis
        self._counts = counts
        self._overflow: Optional[int] = 0 if includes_overflow(axis) else None
        self._underflow: Optional[int] = 0 if includes_underflow(axis) else None
        _logger.debug(
            "HistogramAccumulator created: axis=%s n_bin=%d overflow=%s underflow=%s",
            type(axis).__name__,
            n_bin,
            self._overflow is not None,
            self._underflow is not None,
        )

    @property
    def axis(self) -> Any:
        return self._axis

    @property
    def counts(self) -> np.ndarray:
        # 只读视图，计数只能通过 put 修改
        view = self._counts.view()
        view.flags.writeable = False
        return view

    @property
    def overflow(self) -> Optional[int]:
        return self._overflow

    @property
    def underflow(self) -> Optional[int]:
        return self._underflow

    @property
    def n_bin(self) -> int:
        return int(self._counts.size)

    @property
    def total(self) -> int:
        return int(self._counts.sum()) + (self._overflow or 0) + (self._underflow or 0)

    def bin(self, i: int) -> Any:
        return self._axis.bin(i)

    def __len__(self) -> int:
        return self.n_bin

    def _put_one(self, x: Any) -> None:
        if self._overflow is not None and self._axis.is_overflow(x):
            self._overflow += 1
            return
        if self._underflow is not None and self._axis.is_underflow(x):
            self._underflow += 1
            return
        self._counts[self._axis.index(x)] += 1

    def put(self, values: Any) -> "HistogramAccumulator":
        if isinstance(values, HistogramAccumulator):
            return self.merge(values)
        for x in iter_values(values):
            self._put_one(x)
        return self

    def merge(self, other: "HistogramAccumulator") -> "HistogramAccumulator":
        if not isinstance(other, HistogramAccumulator):
            raise ParamValidationError("can only merge another HistogramAccumulator")
        if not self._axis == other._axis:
            raise AxisMismatchError("cannot merge accumulators over different axes")
        if not np.can_cast(other._counts.dtype, self._counts.dtype, casting="safe"):
            raise AxisMismatchError(
                f"cannot merge {other._counts.dtype} counts into {self._counts.dtype} counts"
            )
        np.add(self._counts, other._counts, out=self._counts, casting="safe")
        if self._overflow is not None and other._overflow is not None:
            self._overflow += other._overflow
        if self._underflow is not None and other._underflow is not None:
            self._underflow += other._underflow
        _logger.debug("HistogramAccumulator merged: total=%d", self.total)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the counters as plain Python values."""
        return {
            "axis": type(self._axis).__name__,
            "counts": self._counts.tolist(),
            "overflow": self._overflow,
            "underflow": self._underflow,
            "total": self.total,
        }

    def __repr__(self) -> str:
        return (
            f"HistogramAccumulator(axis={type(self._axis).__name__}, counts={self._counts.tolist()}, "
            f"overflow={self._overflow}, underflow={self._underflow})"
        )


__all__ = ["HistogramAccumulator", "is_scalar_value", "iter_values"]
