"""
Axes over the members of an ``enum.Enum`` class.

Responsibilities
  - EnumAxis: one bin per member in declaration order, dict lookup index.
  - CategoryAxis: additionally resolves string labels to members by name
    and counts unresolvable labels as overflow.

Usage Context
  - Tallying categorical observations; CategoryAxis is meant for raw
    string input such as parsed CSV columns.

Limitations
  - Aliases are not separate bins; an alias label resolves to its
    canonical member.
"""
# 说明：基于枚举类的离散轴。
# 职责：
# - EnumAxis：按声明顺序为每个成员分配一个箱，index 为构造时建立的字典查找；非成员输入抛出 AxisError
# - CategoryAxis：支持字符串按成员名解析（先精确匹配、再忽略大小写），无法解析的字符串计入上溢
# - lookup 返回 Optional 成员，永不抛异常；index 对无法解析的字符串抛出 CategoryConversionError

from __future__ import annotations

import enum
from dataclasses import replace
from typing import Any, Dict, Optional, Type

from binstat.core.utils.param_validation import ensure
from binstat.histogram.axes.base import AxisInfo, BaseAxis
from binstat.histogram.bins import EnumBin
from binstat.histogram.exceptions import AxisError, CategoryConversionError
from binstat.histogram.options import AxisOptions


class EnumAxis(BaseAxis):
    """
    Axis with one bin per member of an enumeration.

    - Configuration
      - enum_cls: The ``enum.Enum`` subclass; must have at least one member.

    - Behavior
      - ``index(member)`` is the declaration position of the member.
      - No overflow/underflow capability.
    """

    def __init__(self, enum_cls: Type[enum.Enum], *, count_dtype: Any = None):
        ensure(
            isinstance(enum_cls, type) and issubclass(enum_cls, enum.Enum),
            "enum_cls must be an enum.Enum subclass",
            error=AxisError,
        )
        super().__init__(count_dtype=count_dtype, bin_dtype=object)
        self._enum_cls = enum_cls
        self._members = list(enum_cls)
        ensure(len(self._members) > 0, f"{enum_cls.__name__} has no members", error=AxisError)
        # 成员到位置的映射只在构造时建立一次
        self._positions: Dict[enum.Enum, int] = {member: i for i, member in enumerate(self._members)}

    @property
    def enum_cls(self) -> Type[enum.Enum]:
        return self._enum_cls

    @property
    def members(self):
        return tuple(self._members)

    @property
    def n_bin(self) -> int:
        return len(self._members)

    def index(self, x: Any) -> int:
        if isinstance(x, self._enum_cls):
            return self._positions[x]
        raise AxisError(f"{type(self).__name__}.index: {x!r} is not a member of {self._enum_cls.__name__}")

    def bin(self, i: int) -> EnumBin:
        return EnumBin(self._members[self._check_bin_index(i)])

    def _key(self):
        return (self._enum_cls,)

    def describe(self) -> AxisInfo:
        return replace(super().describe(), metadata={"members": [m.name for m in self._members]})


class CategoryAxis(EnumAxis):
    """
    EnumAxis that also accepts string labels.

    - Configuration
      - options: Defaults to ``AxisOptions(enable_overflow=True)`` so
        unknown labels are counted instead of rejected by the accumulator.

    - Behavior
      - Labels resolve by member name: exact match first, then
        case-insensitive.
      - ``is_overflow`` is True exactly when a value cannot be resolved.
    """

    def __init__(
        self,
        enum_cls: Type[enum.Enum],
        options: Optional[AxisOptions] = None,
        *,
        count_dtype: Any = None,
    ):
        super().__init__(enum_cls, count_dtype=count_dtype)
        self._options = options.copy() if options is not None else AxisOptions(enable_overflow=True)
        # 名称表包含别名，别名解析到其规范成员
        self._by_name = dict(enum_cls.__members__)
        self._by_folded_name: Dict[str, enum.Enum] = {}
        for name, member in self._by_name.items():
            self._by_folded_name.setdefault(name.casefold(), member)

    @property
    def options(self) -> AxisOptions:
        return self._options.copy()

    def lookup(self, value: Any) -> Optional[enum.Enum]:
        """Resolve ``value`` to a member, or return None."""
        if isinstance(value, self._enum_cls):
            return value
        if isinstance(value, bytes):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError:
                return None
        if not isinstance(value, str):
            return None
        label = value.strip()
        member = self._by_name.get(label)
        if member is None:
            member = self._by_folded_name.get(label.casefold())
        return member

    def is_overflow(self, x: Any) -> bool:
        return self.lookup(x) is None

    def index(self, x: Any) -> int:
        member = self.lookup(x)
        if member is None:
            raise CategoryConversionError(x, self._enum_cls.__name__)
        return self._positions[member]

    def _key(self):
        return (self._enum_cls, self._options.as_tuple())

    def describe(self) -> AxisInfo:
        return replace(super().describe(), options=self._options.to_dict())
