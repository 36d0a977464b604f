"""
Axis options shared by the interval-based histogram axes.

Responsibilities
  - Hold the four independent switches controlling interval closedness,
    overflow/underflow tracking and circular wrap-around.
  - Normalise option identifiers given as enum markers or strings.

Usage Context
  - Pass an AxisOptions value to an axis constructor or factory; the axis
    keeps its own copy so the caller may keep mutating theirs.

Limitations
  - Every boolean combination is accepted; nonsensical combinations (such
    as circular together with overflow) simply make some checks unreachable.
"""
# 说明：轴配置选项。四个相互独立的布尔开关：右闭区间、上溢计数、下溢计数、环形回绕。
# 职责：
# - AxisOption：选项标识枚举，支持从字符串（snake_case / camelCase）规范化
# - AxisOptions：可按规范顺序位置构造、按关键字构造或由标识集合构造，构造后也可逐项 set/get
# 约定：
# - 轴在构造时复制一份 AxisOptions，之后调用方对原对象的修改不会影响已构造的轴

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, fields, replace
from typing import Tuple, Union

from binstat.core.utils.param_validation import ParamValidationError


class AxisOption(enum.Enum):
    """Identifiers of the individual axis switches."""

    IS_RIGHT_CLOSED = "is_right_closed"
    ENABLE_OVERFLOW = "enable_overflow"
    ENABLE_UNDERFLOW = "enable_underflow"
    IS_CIRCULAR = "is_circular"

    @classmethod
    def from_str(cls, name: str) -> "AxisOption":
        # 将 camelCase、空格与连字符统一为 snake_case 后再匹配枚举值
        normalized = str(name).strip().replace(" ", "_").replace("-", "_")
        if not normalized.isupper():
            normalized = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", normalized)
        normalized = normalized.lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ParamValidationError(f"unknown axis option '{name}'") from exc


OptionKey = Union[AxisOption, str]


def _resolve(option: OptionKey) -> AxisOption:
    if isinstance(option, AxisOption):
        return option
    return AxisOption.from_str(option)


@dataclass
class AxisOptions:
    """
    Switches controlling how an axis classifies boundary values.

    - Configuration
      - is_right_closed: Bins are ``(a, b]`` instead of ``[a, b)``.
      - enable_overflow: Values above the range are tallied separately.
      - enable_underflow: Values below the range are tallied separately.
      - is_circular: The range wraps, so the boundary value that would
        otherwise fall outside lands in the first/last bin.

    - Behavior
      - Positional construction follows the canonical order above, so any
        prefix of the four flags may be given.
      - Compared by value.
    """

    is_right_closed: bool = False
    enable_overflow: bool = False
    enable_underflow: bool = False
    is_circular: bool = False

    @classmethod
    def of(cls, *options: OptionKey) -> "AxisOptions":
        """Build options with the given switches turned on."""
        result = cls()
        for option in options:
            result.set(option, True)
        return result

    def set(self, option: OptionKey, value: bool = True) -> "AxisOptions":
        # 逐项设置单个开关，返回自身以便链式调用
        setattr(self, _resolve(option).value, bool(value))
        return self

    def get(self, option: OptionKey) -> bool:
        return bool(getattr(self, _resolve(option).value))

    def copy(self) -> "AxisOptions":
        return replace(self)

    def as_tuple(self) -> Tuple[bool, bool, bool, bool]:
        # 按规范顺序导出四元组，用于轴的哈希与比较
        return tuple(bool(getattr(self, f.name)) for f in fields(self))  # type: ignore[return-value]

    def to_dict(self) -> dict:
        return {f.name: bool(getattr(self, f.name)) for f in fields(self)}
