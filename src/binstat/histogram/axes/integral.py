"""
Unit-width axis over ``[low, low + n_bin)``.
"""
# 说明：整数宽度轴，每个箱宽为 1。
# - 轴下界与输入均为整数时走整数运算：x - low（右闭时再减 1）
# - 否则按浮点公式 floor(x - low)，右闭时恰为整数边界的值归入下方的箱

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from binstat.histogram.axes.base import IntervalAxis, validate_bin_count
from binstat.histogram.bins import Bin
from binstat.histogram.options import AxisOptions


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class IntegralAxis(IntervalAxis):
    """
    Axis with ``n_bin`` unit-width bins starting at ``low``.

    - Configuration
      - n_bin: Number of bins, ``high = low + n_bin``.
      - low: Lower edge; its type decides the bin dtype.
    """

    def __init__(
        self,
        n_bin: int,
        low: Any,
        options: Optional[AxisOptions] = None,
        *,
        count_dtype: Any = None,
        bin_dtype: Any = None,
    ):
        if bin_dtype is None:
            bin_dtype = np.asarray(low).dtype
        super().__init__(options, count_dtype=count_dtype, bin_dtype=bin_dtype)
        self._n_bin = validate_bin_count(n_bin)
        self._low = low
        self._high = low + self._n_bin

    @property
    def n_bin(self) -> int:
        return self._n_bin

    @property
    def low(self) -> Any:
        return self._low

    @property
    def high(self) -> Any:
        return self._high

    def _locate(self, x: Any) -> int:
        if _is_integer(x) and _is_integer(self._low):
            offset = int(x) - int(self._low)
            return offset - 1 if self._options.is_right_closed else offset
        return self._scaled_index(float(x) - float(self._low))

    def bin(self, i: int) -> Bin:
        i = self._check_bin_index(i)
        return Bin(self._low + i, self._low + i + 1)

    def _key(self):
        return (self._n_bin, self._low, self._options.as_tuple())
