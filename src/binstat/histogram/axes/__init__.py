"""Histogram axis implementations."""

from __future__ import annotations

from .base import AxisInfo, BaseAxis, IntervalAxis
from .categorical import CategoryAxis, EnumAxis
from .integral import IntegralAxis
from .regular import RegularAxis
from .transform import TransformAxis
from .variable import VariableAxis

__all__: list[str] = [
    "AxisInfo",
    "BaseAxis",
    "IntervalAxis",
    "IntegralAxis",
    "RegularAxis",
    "TransformAxis",
    "EnumAxis",
    "CategoryAxis",
    "VariableAxis",
]
