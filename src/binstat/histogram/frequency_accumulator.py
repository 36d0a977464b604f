"""
Histogram accumulator that also counts observations.
"""
# 说明：频数累加器，在直方图累加器之外维护观测总数 count。
# 职责：
# - put(values)：展平后逐值转交直方图累加器，每放入一个值 count 加 1（中途抛错时已放入的值仍计入）
# - put(other)：合并计数、观测总数以及上溢 / 下溢（各自计入对应计数器）
# - frequencies()：counts / count，count 为 0 时返回全零

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np

from binstat.core.utils.logging import get_logger
from binstat.core.utils.param_validation import ParamValidationError
from binstat.histogram.accumulator import HistogramAccumulator, iter_values

_logger = get_logger(__name__)


class FrequencyAccumulator:
    """
    HistogramAccumulator plus a running observation count.

    - Configuration
      - axis / counts: Forwarded to the wrapped HistogramAccumulator.

    - Behavior
      - ``count`` equals the number of values put, including those routed
        to overflow or underflow.
    """

    def __init__(self, axis: Any, counts: Optional[np.ndarray] = None):
        self._histogram = HistogramAccumulator(axis, counts)
        self._count = 0

    @property
    def histogram(self) -> HistogramAccumulator:
        return self._histogram

    @property
    def axis(self) -> Any:
        return self._histogram.axis

    @property
    def counts(self) -> np.ndarray:
        return self._histogram.counts

    @property
    def overflow(self) -> Optional[int]:
        return self._histogram.overflow

    @property
    def underflow(self) -> Optional[int]:
        return self._histogram.underflow

    @property
    def count(self) -> int:
        return self._count

    @property
    def n_bin(self) -> int:
        return self._histogram.n_bin

    def bin(self, i: int) -> Any:
        return self._histogram.bin(i)

    def put(self, values: Any) -> "FrequencyAccumulator":
        if isinstance(values, FrequencyAccumulator):
            return self.merge(values)
        if isinstance(values, HistogramAccumulator):
            raise ParamValidationError("merge a FrequencyAccumulator, not a bare HistogramAccumulator")
        # 逐值放入，count 与直方图已计入的值始终一致
        for x in iter_values(values):
            self._histogram._put_one(x)
            self._count += 1
        return self

    def merge(self, other: "FrequencyAccumulator") -> "FrequencyAccumulator":
        if not isinstance(other, FrequencyAccumulator):
            raise ParamValidationError("can only merge another FrequencyAccumulator")
        self._histogram.merge(other._histogram)
        self._count += other._count
        _logger.debug("FrequencyAccumulator merged: count=%d", self._count)
        return self

    def frequencies(self) -> np.ndarray:
        if self._count == 0:
            return np.zeros(self.n_bin, dtype=np.float64)
        return self._histogram.counts / self._count

    def _fraction(self, value: Optional[int]) -> Optional[float]:
        if value is None:
            return None
        if self._count == 0:
            return 0.0
        return value / self._count

    def overflow_frequency(self) -> Optional[float]:
        return self._fraction(self.overflow)

    def underflow_frequency(self) -> Optional[float]:
        return self._fraction(self.underflow)

    def to_dict(self) -> Dict[str, Any]:
        snapshot = self._histogram.to_dict()
        snapshot["count"] = self._count
        return snapshot

    def __repr__(self) -> str:
        return f"FrequencyAccumulator(count={self._count}, histogram={self._histogram!r})"


__all__ = ["FrequencyAccumulator"]
