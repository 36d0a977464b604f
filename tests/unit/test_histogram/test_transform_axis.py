"""
Unit tests for TransformAxis and the inverse-transform table.
"""
# 说明：TransformAxis 与变换 / 反函数查找表的单元测试。
# 覆盖：
# - 变换空间内等宽分箱：low_transform / high_transform / step_size / value
# - 上溢 / 下溢使用原始值与原始边界比较
# - bin(i) 经反函数映射回原始空间；numpy、math 与字符串名称三种写法
# - 五个内置变换（log / log2 / log10 / sqrt / exp）首末边界映射回原始 low / high
# - 无已知反函数且未显式给出时报错；注册自定义变换对

import math

import numpy as np
import pytest

from binstat.core.utils import ParamValidationError
from binstat.histogram import (
    AxisError,
    AxisOptions,
    AxisRangeError,
    TransformAxis,
    register_inverse_transform,
)
from binstat.histogram.transforms import has_inverse_transform, inverse_transform_for


def test_log10_axis_geometry() -> None:
    axis = TransformAxis(3, 1.0, 1000.0, "log10")
    assert axis.low_transform == pytest.approx(0.0)
    assert axis.high_transform == pytest.approx(3.0)
    assert axis.step_size() == pytest.approx(1.0)
    assert axis.value(10.0 ** 1.5) == pytest.approx(0.5)
    assert [axis.index(x) for x in (1.0, 5.0, 10.0, 50.0, 999.0)] == [0, 0, 1, 1, 2]


def test_bins_are_mapped_through_inverse() -> None:
    axis = TransformAxis(3, 1.0, 1000.0, np.log10)
    low, high = axis.bin(1).as_tuple()
    assert low == pytest.approx(10.0)
    assert high == pytest.approx(100.0)


def test_math_callables_resolve_inverse() -> None:
    axis = TransformAxis(2, 1.0, 4.0, math.sqrt)
    assert axis.bin(0).as_tuple() == pytest.approx((1.0, 2.25))
    assert axis.bin(1).as_tuple() == pytest.approx((2.25, 4.0))


def test_overflow_uses_raw_bounds() -> None:
    axis = TransformAxis(3, 1.0, 1000.0, "log10", options=AxisOptions(enable_overflow=True, enable_underflow=True))
    assert axis.is_overflow(1000.0)
    assert not axis.is_overflow(999.0)
    assert axis.is_underflow(0.5)
    with pytest.raises(AxisRangeError):
        axis.index(0.5)


def test_transform_round_trip_through_bin_midpoints() -> None:
    axis = TransformAxis(8, 0.5, 200.0, "log")
    for i in range(axis.n_bin):
        inner_mid = axis.low_transform + (i + 0.5) * axis.step_size()
        assert axis.index(math.exp(inner_mid)) == i


@pytest.mark.parametrize(
    "name, low, high",
    [
        ("log", 0.5, 200.0),
        ("log2", 1.0, 64.0),
        ("log10", 0.01, 1000.0),
        ("sqrt", 0.0, 49.0),
        ("exp", -3.0, 2.5),
    ],
)
def test_builtin_transform_edges_map_back_to_bounds(name, low, high) -> None:
    # 首箱下界与末箱上界经反函数映射后回到原始边界
    axis = TransformAxis(6, low, high, name)
    assert axis.bin(0).low == pytest.approx(low, rel=1e-9, abs=1e-12)
    assert axis.bin(axis.n_bin - 1).high == pytest.approx(high, rel=1e-9)


def test_unknown_transform_without_inverse_raises() -> None:
    def cube(x):
        return x ** 3

    with pytest.raises(ParamValidationError):
        TransformAxis(3, 1.0, 2.0, cube)
    axis = TransformAxis(3, 1.0, 2.0, cube, inverse=np.cbrt)
    assert axis.bin(2).high == pytest.approx(2.0)
    with pytest.raises(ParamValidationError):
        TransformAxis(3, 1.0, 2.0, "cube")


def test_decreasing_transform_is_rejected() -> None:
    with pytest.raises(AxisError):
        TransformAxis(3, 1.0, 2.0, lambda x: -x, inverse=lambda y: -y)


def test_registered_inverse_is_found() -> None:
    def cube_root(x):
        return np.cbrt(x)

    def cube(x):
        return x ** 3

    assert not has_inverse_transform(cube_root)
    name = register_inverse_transform(cube_root, cube)
    assert name == "cube_root"
    assert has_inverse_transform(cube_root)
    assert inverse_transform_for("cube_root") is cube
    axis = TransformAxis(2, 0.0, 8.0, cube_root)
    assert axis.bin(0).as_tuple() == pytest.approx((0.0, 1.0))


def test_named_and_callable_transforms_compare_equal() -> None:
    assert TransformAxis(3, 1.0, 10.0, "log") == TransformAxis(3, 1.0, 10.0, np.log)
    assert TransformAxis(3, 1.0, 10.0, "log") != TransformAxis(3, 1.0, 10.0, "sqrt")


def test_describe_includes_transform_metadata() -> None:
    info = TransformAxis(3, 1.0, 1000.0, "log10").describe()
    assert info.metadata["transform"] == "log10"
    assert info.metadata["transformed_bounds"] == pytest.approx((0.0, 3.0))
