"""
Shared Hypothesis strategies for property-based testing across binstat.
"""
# 说明：属性测试中共享的 Hypothesis 策略集。
# 职责：
# - 生成有限、量级受控的浮点样本，避免溢出与次正规数干扰断言
# - 生成合法的等宽轴几何（n_bin, low, high）与任意 AxisOptions 组合
# - 生成严格递增的可变边界序列

import numpy as np
from hypothesis import strategies as st

from binstat.histogram import AxisOptions


# ------------------------------------------------------------------ Basic Types
def finite_floats(min_value=-1e6, max_value=1e6):
    # 有限浮点数，排除 NaN 与无穷
    return st.floats(min_value=min_value, max_value=max_value, allow_nan=False, allow_infinity=False)


@st.composite
def axis_options(draw):
    # 四个开关的任意组合均合法
    return AxisOptions(
        is_right_closed=draw(st.booleans()),
        enable_overflow=draw(st.booleans()),
        enable_underflow=draw(st.booleans()),
        is_circular=draw(st.booleans()),
    )


# ------------------------------------------------------------------ Axis geometry
@st.composite
def regular_geometries(draw):
    # 生成 (n_bin, low, high)，保证 high - low 足够大，避免箱宽落入次正规数
    n_bin = draw(st.integers(min_value=1, max_value=50))
    low = draw(finite_floats(-1e3, 1e3))
    width = draw(st.floats(min_value=1e-2, max_value=1e3, allow_nan=False, allow_infinity=False))
    return n_bin, low, low + width


@st.composite
def increasing_edges(draw, min_size=2, max_size=20):
    # 生成严格递增的边界序列
    values = draw(st.lists(finite_floats(-1e3, 1e3), min_size=min_size, max_size=max_size, unique=True))
    edges = np.sort(np.asarray(values, dtype=np.float64))
    if edges.size < 2:
        edges = np.array([0.0, 1.0])
    return edges


# ------------------------------------------------------------------ Samples
@st.composite
def samples(draw, min_size=0, max_size=200):
    return draw(st.lists(finite_floats(-1e4, 1e4), min_size=min_size, max_size=max_size))
