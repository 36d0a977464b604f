"""
Value types describing a single histogram bin.
"""
# 说明：单个分箱的值类型。
# - Bin：连续轴的 [low, high) / (low, high] 区间端点
# - EnumBin：枚举轴的单个类别槽位
# - EdgeBin：VariableAxis 的边界视图，持有底层边界数组的两元素 numpy 视图（不复制）

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

import numpy as np


@dataclass(frozen=True)
class Bin:
    """Boundaries of one bin of a continuous axis."""

    low: Any
    high: Any

    @property
    def width(self) -> Any:
        return self.high - self.low

    def as_tuple(self) -> Tuple[Any, Any]:
        return self.low, self.high


@dataclass(frozen=True)
class EnumBin:
    """The categorical slot of one bin of an enumeration axis."""

    slot: Enum


class EdgeBin:
    """
    Non-copying view of two consecutive edges of a variable-width axis.

    The view shares memory with the axis edge array; numpy keeps that
    buffer alive for as long as the view exists.
    """

    __slots__ = ("_payload",)

    def __init__(self, payload: np.ndarray):
        if payload.shape != (2,):
            raise ValueError("EdgeBin requires exactly two edges")
        self._payload = payload

    @property
    def low(self) -> Any:
        return self._payload[0].item()

    @property
    def high(self) -> Any:
        return self._payload[1].item()

    @property
    def width(self) -> Any:
        return self.high - self.low

    @property
    def edges(self) -> np.ndarray:
        return self._payload

    def as_tuple(self) -> Tuple[Any, Any]:
        return self.low, self.high

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (EdgeBin, Bin)):
            return self.as_tuple() == other.as_tuple()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"EdgeBin(low={self.low!r}, high={self.high!r})"
