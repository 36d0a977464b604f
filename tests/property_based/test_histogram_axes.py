"""
Property-based tests for histogram axes.
"""
# 说明：直方图轴的属性测试。
# 覆盖：
# - 任意有限值在任意选项下恰好属于“上溢 / 下溢 / 范围内”之一，范围内的索引落在 [0, n_bin)
# - 等宽轴的索引与箱边界一致
# - 整数轴在整数输入下 index(x) == x - low
# - 可变边界轴的索引满足 edges[i] <= x < edges[i + 1]
# - 变换轴在箱中点处的往返一致性

import math

import numpy as np
from hypothesis import assume, given, strategies as st

from binstat.histogram import (
    AxisOptions,
    AxisRangeError,
    IntegralAxis,
    RegularAxis,
    TransformAxis,
    VariableAxis,
)
from tests.property_based.conftest import (
    axis_options,
    finite_floats,
    increasing_edges,
    regular_geometries,
)


# ------------------------------------------------------------------ Classification
@given(regular_geometries(), axis_options(), finite_floats(-3e3, 3e3))
def test_every_value_has_exactly_one_destination(geometry, options, x):
    n_bin, low, high = geometry
    axis = RegularAxis(n_bin, low, high, options)
    over = axis.is_overflow(x)
    under = axis.is_underflow(x)
    assert not (over and under)
    if over or under:
        try:
            axis.index(x)
        except AxisRangeError:
            return
        raise AssertionError("index accepted a value classified outside the range")
    assert 0 <= axis.index(x) < n_bin


@given(regular_geometries(), st.data())
def test_regular_index_matches_bin_bounds(geometry, data):
    n_bin, low, high = geometry
    axis = RegularAxis(n_bin, low, high)
    i = data.draw(st.integers(min_value=0, max_value=n_bin - 1))
    edges = axis.bin(i)
    midpoint = (edges.low + edges.high) / 2
    assume(low <= midpoint < high)
    assert axis.index(midpoint) == i


# ------------------------------------------------------------------ IntegralAxis
@given(st.integers(1, 100), st.integers(-1000, 1000), st.data())
def test_integral_axis_integer_offsets(n_bin, low, data):
    axis = IntegralAxis(n_bin, low)
    x = data.draw(st.integers(low, low + n_bin - 1))
    assert axis.index(x) == x - low
    closed = IntegralAxis(n_bin, low, AxisOptions(is_right_closed=True))
    assert closed.index(x + 1) == x - low


# ------------------------------------------------------------------ VariableAxis
@given(increasing_edges(), st.data())
def test_variable_index_brackets_value(edges, data):
    axis = VariableAxis(edges)
    x = data.draw(finite_floats(float(edges[0]), float(edges[-1])))
    assume(x < edges[-1])
    i = axis.index(x)
    assert edges[i] <= x < edges[i + 1]


@given(increasing_edges(), st.data())
def test_variable_right_closed_index_brackets_value(edges, data):
    axis = VariableAxis(edges, AxisOptions(is_right_closed=True))
    x = data.draw(finite_floats(float(edges[0]), float(edges[-1])))
    assume(x > edges[0])
    i = axis.index(x)
    assert edges[i] < x <= edges[i + 1]


# ------------------------------------------------------------------ TransformAxis
@given(st.integers(1, 30), st.floats(min_value=1e-3, max_value=10.0), st.floats(min_value=1.5, max_value=1e3))
def test_transform_bin_midpoints_round_trip(n_bin, low, factor):
    high = low * factor
    axis = TransformAxis(n_bin, low, high, "log")
    for i in range(n_bin):
        mid = axis.low_transform + (i + 0.5) * axis.step_size()
        assert axis.index(math.exp(mid)) == i
        bounds = axis.bin(i)
        assert np.isclose(math.log(bounds.low), axis.low_transform + i * axis.step_size())
