"""
Base abstractions for histogram axes.

Responsibilities
  - Define the axis interface consumed by the accumulators.
  - Standardise dtype handling, value equality and describe() metadata.
  - Provide the shared interval classification used by the continuous axes.

Usage Context
  - Subclass BaseAxis for a custom axis; any object exposing ``index`` and
    ``n_bin`` (optionally ``is_overflow``/``is_underflow``/``options``) is
    accepted by the accumulators as well.

Limitations
  - Axes are immutable after construction; there is no setter for geometry.
"""
# 说明：直方图轴的抽象基类与区间分类的共享实现。
# 职责：
# - BaseAxis：约定 index/bin/n_bin 接口，统一计数 dtype、按值比较与 describe() 描述
# - IntervalAxis：实现左闭右开 / 左开右闭 / 环形回绕三种边界语义下的上溢、下溢判定与越界检查
# - AxisInfo：轻量轴描述，供日志与调试展示

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Hashable, Mapping, Optional, Tuple

import numpy as np

from binstat.core.utils.config import get_config
from binstat.core.utils.param_validation import ensure, ensure_positive_int
from binstat.histogram.exceptions import AxisError, AxisRangeError
from binstat.histogram.options import AxisOptions


@dataclass(frozen=True)
class AxisInfo:
    """Lightweight descriptor used for logging and inspection."""

    kind: str
    n_bin: int
    bin_dtype: str
    count_dtype: str
    bounds: Optional[Tuple[Any, Any]] = None
    options: Mapping[str, bool] = field(default_factory=dict)
    metadata: Mapping[str, Any] = field(default_factory=dict)


def resolve_count_dtype(count_dtype: Any = None) -> np.dtype:
    # 计数 dtype：显式参数优先，否则取运行时配置中的默认值；只接受整数类型
    dtype = np.dtype(count_dtype if count_dtype is not None else get_config().default_count_dtype)
    ensure(np.issubdtype(dtype, np.integer), f"count dtype must be an integer type, got {dtype}", error=AxisError)
    return dtype


def validate_bin_count(n_bin: Any) -> int:
    # 分箱数必须为正整数（numpy 整数同样接受）
    return ensure_positive_int(n_bin, label="n_bin", error=AxisError)


class BaseAxis(ABC):
    """
    Abstract interface mapping values to bin indices.

    - Configuration
      - count_dtype: Integer dtype of the counters an accumulator allocates.

    - Behavior
      - ``index(x)`` returns the bin of a value, ``bin(i)`` describes bin ``i``.
      - Axes compare equal when their kind, geometry and options match.
    """

    def __init__(self, *, count_dtype: Any = None, bin_dtype: Any = None):
        self._count_dtype = resolve_count_dtype(count_dtype)
        self._bin_dtype = np.dtype(bin_dtype) if bin_dtype is not None else np.dtype(object)

    @property
    def count_dtype(self) -> np.dtype:
        return self._count_dtype

    @property
    def bin_dtype(self) -> np.dtype:
        return self._bin_dtype

    @property
    @abstractmethod
    def n_bin(self) -> int:
        """Number of regular bins."""

    def bin_count(self) -> int:
        return self.n_bin

    def __len__(self) -> int:
        return self.n_bin

    @abstractmethod
    def index(self, x: Any) -> int:
        """Return the bin index of ``x``."""

    @abstractmethod
    def bin(self, i: int) -> Any:
        """Return the boundaries (or slot) of bin ``i``."""

    @abstractmethod
    def _key(self) -> Tuple[Hashable, ...]:
        """Geometry and options identifying the axis for equality."""

    def _check_bin_index(self, i: Any) -> int:
        # bin(i) 的前置条件：0 <= i < n_bin
        ensure(
            isinstance(i, (int, np.integer)) and not isinstance(i, bool),
            "bin index must be an integer",
            error=AxisError,
        )
        ensure(0 <= int(i) < self.n_bin, f"{type(self).__name__}.bin: input must be less than n_bin", error=AxisError)
        return int(i)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseAxis):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def describe(self) -> AxisInfo:
        return AxisInfo(
            kind=type(self).__name__,
            n_bin=self.n_bin,
            bin_dtype=str(self.bin_dtype),
            count_dtype=str(self.count_dtype),
        )


class IntervalAxis(BaseAxis):
    """
    Axis covering a numeric interval ``[low, high)`` or ``(low, high]``.

    - Configuration
      - options: AxisOptions copied at construction.

    - Behavior
      - Not right-closed: underflow ``x < low``, overflow ``x >= high``.
      - Right-closed: underflow ``x <= low``, overflow ``x > high``.
      - Circular: underflow ``x < low``, overflow ``x > high``; the boundary
        value that would otherwise fall outside wraps into bin 0 (``high``,
        not right-closed) or bin ``n_bin - 1`` (``low``, right-closed).
      - ``index`` raises AxisRangeError for values outside the range.
    """

    def __init__(self, options: Optional[AxisOptions] = None, *, count_dtype: Any = None, bin_dtype: Any = None):
        super().__init__(count_dtype=count_dtype, bin_dtype=bin_dtype)
        self._options = options.copy() if options is not None else AxisOptions()

    @property
    def options(self) -> AxisOptions:
        # 返回副本，避免外部修改轴的配置
        return self._options.copy()

    @property
    @abstractmethod
    def low(self) -> Any:
        """Lower edge of the covered range."""

    @property
    @abstractmethod
    def high(self) -> Any:
        """Upper edge of the covered range."""

    def is_underflow(self, x: Any) -> bool:
        if self._options.is_right_closed and not self._options.is_circular:
            return bool(x <= self.low)
        return bool(x < self.low)

    def is_overflow(self, x: Any) -> bool:
        if self._options.is_right_closed or self._options.is_circular:
            return bool(x > self.high)
        return bool(x >= self.high)

    def _check_range(self, x: Any) -> None:
        # 写成“在范围内”的正向判断，NaN 两侧比较均为 False，因此同样会被拒绝
        opts = self._options
        low_ok = x > self.low if (opts.is_right_closed and not opts.is_circular) else x >= self.low
        high_ok = x <= self.high if (opts.is_right_closed or opts.is_circular) else x < self.high
        if not (low_ok and high_ok):
            raise AxisRangeError(
                f"{type(self).__name__}.index: value {x!r} outside of axis range [{self.low}, {self.high}]",
                value=x,
            )

    def _wrapped_index(self, x: Any) -> Optional[int]:
        # 环形轴的回绕点：左闭右开时 high 落入首箱，左开右闭时 low 落入末箱
        if not self._options.is_circular:
            return None
        if not self._options.is_right_closed and x == self.high:
            return 0
        if self._options.is_right_closed and x == self.low:
            return self.n_bin - 1
        return None

    def _scaled_index(self, position: float) -> int:
        # position 为按箱宽缩放后的位置；右闭时恰好落在整数边界的值属于下方的箱
        output = math.floor(position)
        if self._options.is_right_closed and position == output:
            output -= 1
        # 浮点舍入可能把范围内的值推到 n_bin 或 -1 上
        return min(max(int(output), 0), self.n_bin - 1)

    @abstractmethod
    def _locate(self, x: Any) -> int:
        """Index of an in-range value that is not a wrap point."""

    def index(self, x: Any) -> int:
        self._check_range(x)
        wrapped = self._wrapped_index(x)
        if wrapped is not None:
            return wrapped
        return self._locate(x)

    def describe(self) -> AxisInfo:
        return AxisInfo(
            kind=type(self).__name__,
            n_bin=self.n_bin,
            bin_dtype=str(self.bin_dtype),
            count_dtype=str(self.count_dtype),
            bounds=(self.low, self.high),
            options=self._options.to_dict(),
        )
