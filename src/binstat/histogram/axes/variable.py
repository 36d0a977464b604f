"""
Axis with caller-supplied, possibly unequal bin edges.

Responsibilities
  - Locate values with a binary search over the edge array.
  - Return bins as non-copying views over consecutive edges.

Usage Context
  - Bins read from a configuration file or derived from quantiles.

Limitations
  - numpy input is borrowed, not copied; mutating it afterwards changes the
    axis. Edges must be strictly increasing.
"""
# 说明：可变宽度分箱轴，边界序列由调用方给出（n_bin + 1 个边界）。
# 职责：
# - index：np.searchsorted 二分查找，左闭右开取 side="right" 再减 1，左开右闭取 side="left" 再减 1
# - bin(i)：返回 EdgeBin，共享底层边界数组内存
# - 严格校验模式下（RuntimeConfig.strict_validation）在构造时检查边界严格递增

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from binstat.core.utils.config import get_config
from binstat.core.utils.param_validation import ensure
from binstat.histogram.axes.base import IntervalAxis
from binstat.histogram.bins import EdgeBin
from binstat.histogram.exceptions import AxisError
from binstat.histogram.options import AxisOptions


class VariableAxis(IntervalAxis):
    """
    Axis whose bins are delimited by an increasing edge sequence.

    - Configuration
      - edges: ``n_bin + 1`` edges; at least two.
      - options: Closedness, overflow/underflow and circular switches.
    """

    def __init__(
        self,
        edges: Sequence[Any],
        options: Optional[AxisOptions] = None,
        *,
        count_dtype: Any = None,
    ):
        # np.asarray 对 ndarray 输入不复制
        array = np.asarray(edges)
        ensure(array.ndim == 1, "VariableAxis: edges must be one-dimensional", error=AxisError)
        ensure(array.size >= 2, "VariableAxis: at least two edges are required", error=AxisError)
        ensure(np.issubdtype(array.dtype, np.number), "VariableAxis: edges must be numeric", error=AxisError)
        super().__init__(options, count_dtype=count_dtype, bin_dtype=array.dtype)
        if get_config().strict_validation:
            ensure(
                bool(np.all(np.diff(array) > 0)),
                "VariableAxis: edges must be strictly increasing",
                error=AxisError,
            )
        self._edges = array

    @property
    def edges(self) -> np.ndarray:
        return self._edges

    @property
    def n_bin(self) -> int:
        return self._edges.size - 1

    @property
    def low(self) -> Any:
        return self._edges[0].item()

    @property
    def high(self) -> Any:
        return self._edges[-1].item()

    def _locate(self, x: Any) -> int:
        side = "left" if self._options.is_right_closed else "right"
        position = int(np.searchsorted(self._edges, x, side=side)) - 1
        return min(max(position, 0), self.n_bin - 1)

    def bin(self, i: int) -> EdgeBin:
        i = self._check_bin_index(i)
        return EdgeBin(self._edges[i : i + 2])

    def _key(self):
        return (tuple(self._edges.tolist()), self._options.as_tuple())
