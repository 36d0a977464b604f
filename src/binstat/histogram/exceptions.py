"""
Error hierarchy for the histogram subsystem.

Responsibilities
  - Separate geometry/precondition failures from degenerate-sample failures.
  - Give category conversion its own error so callers can catch it explicitly.

Usage Context
  - Raised by axes, break heuristics and accumulators at the call site.

Limitations
  - Exceptions only carry message text and optional context attributes.
"""
# 说明：直方图子系统的异常体系，全部派生自 ParamValidationError（ValueError）。
# 职责：
# - AxisError：轴几何/索引前置条件违例（high <= low、bin 越界、非枚举成员）
# - AxisRangeError：index(...) 的输入落在轴覆盖范围之外
# - AxisMismatchError：合并两个轴几何不一致的累加器
# - DegenerateSampleError：分箱启发式在零方差 / 零四分位距样本上无法给出宽度
# - CategoryConversionError：CategoryAxis 无法将字符串解析为枚举成员

from __future__ import annotations

from typing import Any, Optional

from binstat.core.utils.param_validation import ParamValidationError


class AxisError(ParamValidationError):
    """Raised when axis geometry or an axis query violates its preconditions."""


class AxisRangeError(AxisError):
    """
    Raised when ``index`` is asked for a value outside the axis range.

    - Configuration
      - value: The offending value.

    - Usage Notes
      - Check ``is_overflow`` / ``is_underflow`` first, as the accumulator does.
    """

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class AxisMismatchError(AxisError):
    """Raised when merging accumulators whose axes do not compare equal."""


class DegenerateSampleError(ParamValidationError):
    """Raised when a bin-count heuristic cannot derive a positive bin width."""


class CategoryConversionError(AxisError, LookupError):
    """
    Raised when a category label cannot be resolved to an enumeration member.

    - Configuration
      - label: The unresolved input.
      - enum_name: Name of the target enumeration.
    """

    def __init__(self, label: Any, enum_name: Optional[str] = None) -> None:
        target = f" of {enum_name}" if enum_name else ""
        super().__init__(f"cannot convert {label!r} to a member{target}")
        self.label = label
        self.enum_name = enum_name
