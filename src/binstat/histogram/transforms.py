"""
Lookup table pairing monotone transforms with their inverses.

Responsibilities
  - Resolve transform identifiers (string names, numpy ufuncs, ``math``
    functions) to callables.
  - Find the inverse of a transform so TransformAxis can map bin edges back.

Usage Context
  - Used by TransformAxis when no explicit inverse is supplied; user code can
    extend the table with ``register_inverse_transform``.

Limitations
  - Correctness of a registered inverse is not verified.
"""
# 说明：变换函数与其反函数的静态查找表。
# 职责：
# - 将字符串名称 / numpy 通用函数 / math 函数统一解析为可调用对象
# - 为 TransformAxis 提供反函数查找，未注册且未显式给出反函数时抛出参数校验错误
# - 支持用户注册自定义变换对

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Optional, Union

import numpy as np

from binstat.core.utils.param_validation import ParamValidationError

Transform = Callable[[Any], Any]
TransformLike = Union[str, Transform]


def _two_pow(x):
    return np.power(2.0, x)


def _ten_pow(x):
    return np.power(10.0, x)


# 名称到正向变换的映射
FORWARD_BY_NAME: Dict[str, Transform] = {
    "exp": np.exp,
    "log": np.log,
    "log2": np.log2,
    "log10": np.log10,
    "sqrt": np.sqrt,
}

# 名称到反函数的映射
INVERSE_BY_NAME: Dict[str, Transform] = {
    "exp": np.log,
    "log": np.exp,
    "log2": _two_pow,
    "log10": _ten_pow,
    "sqrt": np.square,
}

# 可调用对象到名称的映射，覆盖 numpy 与 math 两套实现
NAME_BY_FUNCTION: Dict[Any, str] = {
    np.exp: "exp",
    math.exp: "exp",
    np.log: "log",
    math.log: "log",
    np.log2: "log2",
    math.log2: "log2",
    np.log10: "log10",
    math.log10: "log10",
    np.sqrt: "sqrt",
    math.sqrt: "sqrt",
}


def _normalize_name(name: str) -> str:
    return str(name).strip().lower()


def resolve_transform(transform: TransformLike) -> Transform:
    """Return the callable for a transform given by name or as a callable."""
    if isinstance(transform, str):
        key = _normalize_name(transform)
        if key not in FORWARD_BY_NAME:
            raise ParamValidationError(f"unknown transform '{transform}'")
        return FORWARD_BY_NAME[key]
    if not callable(transform):
        raise ParamValidationError("transform must be a callable or a registered name")
    return transform


def transform_name(transform: TransformLike) -> Optional[str]:
    # 返回已登记变换的规范名称，未登记时返回 None
    if isinstance(transform, str):
        key = _normalize_name(transform)
        return key if key in FORWARD_BY_NAME else None
    try:
        return NAME_BY_FUNCTION.get(transform)
    except TypeError:
        # 不可哈希的可调用对象（例如带 __eq__ 的实例）无法参与查表
        return None


def has_inverse_transform(transform: TransformLike) -> bool:
    name = transform_name(transform)
    return name is not None and name in INVERSE_BY_NAME


def inverse_transform_for(transform: TransformLike, inverse: Optional[TransformLike] = None) -> Transform:
    """Return ``inverse`` when given, else the registered inverse of ``transform``."""
    if inverse is not None:
        return resolve_transform(inverse)
    name = transform_name(transform)
    if name is None or name not in INVERSE_BY_NAME:
        label = transform if isinstance(transform, str) else getattr(transform, "__name__", repr(transform))
        raise ParamValidationError(
            f"no inverse registered for transform '{label}'; pass inverse= explicitly"
        )
    return INVERSE_BY_NAME[name]


def register_inverse_transform(forward: Transform, inverse: Transform, name: Optional[str] = None) -> str:
    """Register ``forward`` with its ``inverse``; returns the name used."""
    if not callable(forward) or not callable(inverse):
        raise ParamValidationError("forward and inverse must be callables")
    key = _normalize_name(name or getattr(forward, "__name__", ""))
    if not key:
        raise ParamValidationError("a name is required for anonymous transforms")
    FORWARD_BY_NAME[key] = forward
    INVERSE_BY_NAME[key] = inverse
    NAME_BY_FUNCTION[forward] = key
    return key


__all__ = [
    "FORWARD_BY_NAME",
    "INVERSE_BY_NAME",
    "NAME_BY_FUNCTION",
    "has_inverse_transform",
    "inverse_transform_for",
    "register_inverse_transform",
    "resolve_transform",
    "transform_name",
]
