"""Factory and registry utilities for histogram axes."""
# 说明：轴的工厂函数与注册表。
# 职责：
# - integral_axis / regular_axis / ...：便捷构造函数，n_bin 可以是分箱函数（可调用对象或注册名），配合 data= 在样本上求值
# - 维护从字符串标识到轴类的注册表，支持运行时扩展
# - 通过 AxisFactory 封装类方便在配置驱动场景中使用

from __future__ import annotations

import enum
from typing import Any, Dict, Optional, Sequence, Type, Union

import numpy as np

from binstat.core.utils.logging import get_logger
from binstat.core.utils.param_validation import ParamValidationError, ensure
from binstat.histogram.axes import (
    BaseAxis,
    CategoryAxis,
    EnumAxis,
    IntegralAxis,
    RegularAxis,
    TransformAxis,
    VariableAxis,
)
from binstat.histogram.breaks import BreakFunction, resolve_break_function
from binstat.histogram.options import AxisOptions
from binstat.histogram.transforms import TransformLike

_logger = get_logger(__name__)

BinCount = Union[int, str, BreakFunction]

_AXIS_REGISTRY: Dict[str, Type[BaseAxis]] = {}


def resolve_bin_count(n_bin: BinCount, data: Any = None) -> int:
    """Return ``n_bin`` as an int, evaluating a break function on ``data``."""
    if isinstance(n_bin, (int, np.integer)) and not isinstance(n_bin, bool):
        return int(n_bin)
    if isinstance(n_bin, str) or callable(n_bin):
        fn = resolve_break_function(n_bin)
        ensure(data is not None, "data= is required when n_bin is a break function")
        count = fn(data)
        _logger.debug("break function %s suggested %s bins", getattr(fn, "__name__", fn), count)
        return int(count)
    raise ParamValidationError("n_bin must be an integer or a break function")


def integral_axis(
    n_bin: BinCount,
    low: Any,
    options: Optional[AxisOptions] = None,
    *,
    data: Any = None,
    count_dtype: Any = None,
) -> IntegralAxis:
    return IntegralAxis(resolve_bin_count(n_bin, data), low, options, count_dtype=count_dtype)


def regular_axis(
    n_bin: BinCount,
    low: Any,
    high: Any,
    options: Optional[AxisOptions] = None,
    *,
    data: Any = None,
    count_dtype: Any = None,
) -> RegularAxis:
    return RegularAxis(resolve_bin_count(n_bin, data), low, high, options, count_dtype=count_dtype)


def transform_axis(
    n_bin: BinCount,
    low: Any,
    high: Any,
    transform: TransformLike,
    inverse: Optional[TransformLike] = None,
    options: Optional[AxisOptions] = None,
    *,
    data: Any = None,
    count_dtype: Any = None,
) -> TransformAxis:
    return TransformAxis(
        resolve_bin_count(n_bin, data), low, high, transform, inverse, options, count_dtype=count_dtype
    )


def enum_axis(enum_cls: Type[enum.Enum], *, count_dtype: Any = None) -> EnumAxis:
    return EnumAxis(enum_cls, count_dtype=count_dtype)


def category_axis(
    enum_cls: Type[enum.Enum],
    options: Optional[AxisOptions] = None,
    *,
    count_dtype: Any = None,
) -> CategoryAxis:
    return CategoryAxis(enum_cls, options, count_dtype=count_dtype)


def variable_axis(
    edges: Sequence[Any],
    options: Optional[AxisOptions] = None,
    *,
    count_dtype: Any = None,
) -> VariableAxis:
    return VariableAxis(edges, options, count_dtype=count_dtype)


def register_axis(name: str, cls: Type[Any]) -> None:
    """Register an axis class under a string identifier."""
    # 自定义轴只需满足鸭子类型接口，不强制继承 BaseAxis
    if not name:
        raise ParamValidationError("axis name must be non-empty")
    _AXIS_REGISTRY[str(name).lower()] = cls


def get_axis_class(name: str) -> Type[Any]:
    key = str(name).lower()
    if key not in _AXIS_REGISTRY:
        raise ParamValidationError(f"axis '{name}' not registered")
    return _AXIS_REGISTRY[key]


def create_axis(name: str, *args: Any, **kwargs: Any) -> Any:
    """Instantiate an axis from the registry."""
    cls = get_axis_class(name)
    return cls(*args, **kwargs)


class AxisFactory:
    """Convenience wrapper mirroring the function-based factory helpers."""

    @staticmethod
    def register(name: str, cls: Type[Any]) -> None:
        register_axis(name, cls)

    @staticmethod
    def get_class(name: str) -> Type[Any]:
        return get_axis_class(name)

    @staticmethod
    def create(name: str, *args: Any, **kwargs: Any) -> Any:
        return create_axis(name, *args, **kwargs)


# Pre-register the built-in axes
register_axis("integral", IntegralAxis)
register_axis("regular", RegularAxis)
register_axis("transform", TransformAxis)
register_axis("enum", EnumAxis)
register_axis("category", CategoryAxis)
register_axis("variable", VariableAxis)


__all__ = [
    "AxisFactory",
    "category_axis",
    "create_axis",
    "enum_axis",
    "get_axis_class",
    "integral_axis",
    "regular_axis",
    "register_axis",
    "resolve_bin_count",
    "transform_axis",
    "variable_axis",
]
