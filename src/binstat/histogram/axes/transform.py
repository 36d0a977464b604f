"""
Equal-width binning in a transformed space.

Responsibilities
  - Bin ``f(x)`` on a RegularAxis over ``[f(low), f(high))``.
  - Classify overflow/underflow on the raw value against the raw range.
  - Map bin edges back through the inverse transform.

Usage Context
  - Log-scaled or square-root-scaled histograms: ``TransformAxis(10, 1.0,
    1e6, "log10")``.

Limitations
  - The transform must be increasing over the range; the inverse is trusted.
"""
# 说明：在变换空间内等宽分箱的轴。
# 职责：
# - 内部持有一个 [f(low), f(high)) 上的 RegularAxis，index(x) 委托 f(x) 给它定位
# - 上溢 / 下溢与越界检查使用原始 x 与原始 low/high 比较
# - bin(i)：内部箱边界经反函数映射回原始空间

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

from binstat.core.utils.param_validation import ensure
from binstat.histogram.axes.base import AxisInfo, IntervalAxis, validate_bin_count
from binstat.histogram.axes.regular import RegularAxis
from binstat.histogram.bins import Bin
from binstat.histogram.exceptions import AxisError
from binstat.histogram.options import AxisOptions
from binstat.histogram.transforms import (
    TransformLike,
    inverse_transform_for,
    resolve_transform,
    transform_name,
)


class TransformAxis(IntervalAxis):
    """
    Axis binning ``transform(x)`` with equal width in the transformed space.

    - Configuration
      - transform: Callable or registered name (``"log"``, ``"sqrt"``, ...).
      - inverse: Optional explicit inverse; looked up when omitted.

    - Behavior
      - ``low_transform``/``high_transform`` expose the transformed range.
      - ``step_size()`` and ``value(x)`` are measured in transformed space.
    """

    def __init__(
        self,
        n_bin: int,
        low: Any,
        high: Any,
        transform: TransformLike,
        inverse: Optional[TransformLike] = None,
        options: Optional[AxisOptions] = None,
        *,
        count_dtype: Any = None,
        bin_dtype: Any = "float64",
    ):
        super().__init__(options, count_dtype=count_dtype, bin_dtype=bin_dtype)
        n_bin = validate_bin_count(n_bin)
        ensure(high > low, f"TransformAxis: high ({high}) must be greater than low ({low})", error=AxisError)
        self._low = low
        self._high = high
        self._transform = resolve_transform(transform)
        self._inverse = inverse_transform_for(transform, inverse)
        self._name = transform_name(transform)
        low_t = float(self._transform(low))
        high_t = float(self._transform(high))
        ensure(
            high_t > low_t,
            f"TransformAxis: transform must be increasing on [{low}, {high}] (got {low_t}, {high_t})",
            error=AxisError,
        )
        # 内部轴共享同一份选项，负责变换空间内的定位与箱宽计算
        self._regular = RegularAxis(n_bin, low_t, high_t, self._options, count_dtype=self.count_dtype)

    @property
    def n_bin(self) -> int:
        return self._regular.n_bin

    @property
    def low(self) -> Any:
        return self._low

    @property
    def high(self) -> Any:
        return self._high

    @property
    def low_transform(self) -> float:
        return self._regular.low

    @property
    def high_transform(self) -> float:
        return self._regular.high

    @property
    def transform(self):
        return self._transform

    @property
    def inverse(self):
        return self._inverse

    def step_size(self) -> float:
        return self._regular.step_size()

    def value(self, x: Any) -> float:
        return self._regular.value(float(self._transform(x)))

    def _locate(self, x: Any) -> int:
        return self._regular._locate(float(self._transform(x)))

    def bin(self, i: int) -> Bin:
        inner = self._regular.bin(self._check_bin_index(i))
        return Bin(float(self._inverse(inner.low)), float(self._inverse(inner.high)))

    def _key(self):
        transform_key = self._name if self._name is not None else self._transform
        return (self.n_bin, self._low, self._high, transform_key, self._inverse, self._options.as_tuple())

    def describe(self) -> AxisInfo:
        return replace(
            super().describe(),
            metadata={
                "transform": self._name or getattr(self._transform, "__name__", repr(self._transform)),
                "transformed_bounds": (self.low_transform, self.high_transform),
            },
        )
