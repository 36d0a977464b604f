"""
Argument checks shared by the axes, heuristics and accumulators.

Responsibilities
  - Define ParamValidationError, the root of the histogram error hierarchy.
  - Offer one-line precondition checks that raise a chosen error type.
  - Apply per-argument validators to decorated functions.

Limitations
  - Validators run only on arguments the caller actually passed; defaults
    are trusted.
"""
# 说明：库内统一使用的参数校验工具。
# 职责：
# - ParamValidationError：参数校验失败的异常类型（ValueError 子类），直方图异常体系的根
# - ensure / ensure_type / ensure_positive_int：单行前置条件检查，可指定抛出的异常类型
# - validate_arguments：按参数名绑定验证器的装饰器，位置参数与关键字参数一视同仁

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Mapping, Tuple, Type

import numpy as np


class ParamValidationError(ValueError):
    """Raised when an argument fails validation."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    # 类型不符时在消息中列出全部可接受的类型名
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"{label} must be instance of {names}")


def ensure_positive_int(
    value: Any,
    *,
    label: str = "value",
    error: Type[Exception] = ParamValidationError,
) -> int:
    """Return ``value`` as an int, requiring a (numpy) integer greater than zero."""
    # bool 是 int 的子类，这里显式排除
    ensure(
        isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_)),
        f"{label} must be an integer",
        error=error,
    )
    ensure(int(value) > 0, f"{label} must be positive", error=error)
    return int(value)


def validate_arguments(schema: Mapping[str, Callable[[Any], Any]]) -> Callable:
    """
    Decorator running ``schema[name]`` on argument ``name`` before the call.

    A validator returns the (possibly converted) value or raises.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)
        unknown = set(schema) - set(signature.parameters)
        if unknown:
            raise ParamValidationError(f"{func.__name__} has no parameters {sorted(unknown)}")

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(*args, **kwargs)
            # 只校验调用方显式传入的参数，默认值不经过验证器
            for name, validator in schema.items():
                if name in bound.arguments:
                    bound.arguments[name] = validator(bound.arguments[name])
            return func(*bound.args, **bound.kwargs)

        return wrapper

    return decorator
