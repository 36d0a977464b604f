"""
Unit tests for validation helpers and decorators.
"""
# 说明：参数与状态验证工具（ensure / ensure_type / ensure_positive_int / validate_arguments）的单元测试。
# 覆盖：
# - ensure：在条件为真时静默通过，条件为假时抛出 ParamValidationError 或指定异常类型
# - ensure_type：检查值是否属于给定类型集合，否则抛出带 label 的 ParamValidationError
# - ensure_positive_int：接受 Python 与 numpy 正整数，拒绝 bool、浮点与非正数
# - validate_arguments：按 schema 自动验证函数参数的装饰器行为（位置参数、关键字参数与默认值）

import numpy as np
import pytest

from binstat.core.utils import (
    ParamValidationError,
    ensure,
    ensure_positive_int,
    ensure_type,
    validate_arguments,
)
from binstat.histogram import AxisError


def test_ensure_passes_and_fails() -> None:
    # 验证 ensure 在条件为 True 时不抛错，条件为 False 时抛 ParamValidationError
    ensure(True, "should not raise")
    with pytest.raises(ParamValidationError):
        ensure(False, "error")


def test_ensure_custom_error_type() -> None:
    with pytest.raises(AxisError, match="geometry"):
        ensure(False, "bad geometry", error=AxisError)


def test_ensure_type_checks() -> None:
    # 验证 ensure_type 对正确类型通过，对错误类型抛 ParamValidationError
    ensure_type(5, (int,), label="value")
    with pytest.raises(ParamValidationError, match="value must be instance of int"):
        ensure_type("text", (int,), label="value")


def test_validate_arguments_decorator() -> None:
    # 验证 validate_arguments 装饰器按 schema 调用验证器并在类型错误时抛 ParamValidationError
    def validator(value):
        ensure_type(value, (int,), label="x")
        return value

    @validate_arguments({"x": validator})
    def add_one(x: int) -> int:
        return x + 1

    assert add_one(4) == 5
    assert add_one(x=4) == 5
    with pytest.raises(ParamValidationError):
        add_one("bad")  # type: ignore[arg-type]


def test_validate_arguments_transforms_and_skips_defaults() -> None:
    # 验证器的返回值替换原参数；使用默认值的参数不经过验证器
    @validate_arguments({"scale": float})
    def scaled(value, scale=2):
        return value * scale

    assert scaled(3, "1.5") == 4.5
    assert scaled(3) == 6


def test_ensure_positive_int() -> None:
    assert ensure_positive_int(3) == 3
    assert ensure_positive_int(np.int32(7)) == 7
    for bad in (0, -2, 2.0, True, "3"):
        with pytest.raises(ParamValidationError):
            ensure_positive_int(bad, label="n_bin")
    with pytest.raises(AxisError, match="n_bin must be positive"):
        ensure_positive_int(0, label="n_bin", error=AxisError)


def test_validate_arguments_rejects_unknown_parameter_names() -> None:
    with pytest.raises(ParamValidationError):

        @validate_arguments({"missing": int})
        def noop(value):
            return value
