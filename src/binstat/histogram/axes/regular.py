"""
Equal-width axis over ``[low, high)``.

Responsibilities
  - Split the range into ``n_bin`` bins of width ``(high - low) / n_bin``.
  - Map values by their relative position ``(x - low) / (high - low)``.

Limitations
  - Floating-point rounding near bin edges follows the scaled-position
    formula; values rounded onto ``n_bin`` are clamped into the last bin.
"""
# 说明：等宽分箱轴。
# 职责：
# - 校验 high > low 并计算箱宽 step_size
# - index：floor(n * value(x))，右闭时恰为整数的缩放位置归入下方的箱
# - bin(i)：(low + i*step, low + i*step + step)

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from binstat.core.utils.param_validation import ensure
from binstat.histogram.axes.base import IntervalAxis, validate_bin_count
from binstat.histogram.bins import Bin
from binstat.histogram.exceptions import AxisError
from binstat.histogram.options import AxisOptions


class RegularAxis(IntervalAxis):
    """
    Axis with ``n_bin`` equal-width bins between ``low`` and ``high``.

    - Configuration
      - n_bin: Number of bins.
      - low / high: Range edges, ``high > low`` required.
      - options: Closedness, overflow/underflow and circular switches.

    - Usage Notes
      - ``value(x)`` exposes the relative position used for indexing.
    """

    def __init__(
        self,
        n_bin: int,
        low: Any,
        high: Any,
        options: Optional[AxisOptions] = None,
        *,
        count_dtype: Any = None,
        bin_dtype: Any = None,
    ):
        if bin_dtype is None:
            bin_dtype = np.result_type(np.asarray(low).dtype, np.asarray(high).dtype, np.float64)
        super().__init__(options, count_dtype=count_dtype, bin_dtype=bin_dtype)
        self._n_bin = validate_bin_count(n_bin)
        ensure(high > low, f"RegularAxis: high ({high}) must be greater than low ({low})", error=AxisError)
        self._low = low
        self._high = high

    @property
    def n_bin(self) -> int:
        return self._n_bin

    @property
    def low(self) -> Any:
        return self._low

    @property
    def high(self) -> Any:
        return self._high

    def step_size(self) -> float:
        return (self._high - self._low) / self._n_bin

    def value(self, x: Any) -> float:
        return (x - self._low) / (self._high - self._low)

    def _locate(self, x: Any) -> int:
        return self._scaled_index(self._n_bin * float(self.value(x)))

    def bin(self, i: int) -> Bin:
        i = self._check_bin_index(i)
        step = self.step_size()
        start = self._low + i * step
        return Bin(start, start + step)

    def _key(self):
        return (self._n_bin, self._low, self._high, self._options.as_tuple())
