"""
Integration tests for end-to-end histogram workflows.
"""
# 说明：跨模块的直方图端到端流程测试。
# 覆盖：
# - 分箱启发式选择箱数 → 构造轴 → 分块累加 → 合并 → 频率，与一次性构造结果一致
# - 环境变量驱动的运行时配置作用于计数 dtype 与边界校验
# - 字符串类别数据经 CategoryAxis 统计，未知类别计入上溢
# - 通过轴注册表接入自定义轴并参与合并

import enum

import numpy as np
import pytest

from binstat.core.utils import get_config
from binstat.histogram import (
    AxisError,
    AxisFactory,
    AxisOptions,
    FrequencyAccumulator,
    HistogramAccumulator,
    category_histogram,
    freedman_diaconis,
    frequency,
    regular_axis,
    regular_histogram,
    transform_histogram,
    variable_histogram,
)


class Weekday(enum.Enum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3


class CircleAxis:
    """Counts 2-D points inside the unit circle; the rest go to overflow."""

    n_bin = 1

    def index(self, point):
        return 0

    def is_overflow(self, point):
        x, y = point
        return x * x + y * y > 1.0

    def bin(self, i):
        return "unit circle"


def test_chunked_accumulation_matches_one_shot() -> None:
    rng = np.random.default_rng(7)
    sample = rng.normal(loc=10.0, scale=2.0, size=2_000)
    options = AxisOptions(enable_overflow=True, enable_underflow=True)
    one_shot = regular_histogram(sample, "freedman_diaconis", 4.0, 16.0, options)
    assert one_shot.n_bin == freedman_diaconis(sample)

    axis = regular_axis(freedman_diaconis, 4.0, 16.0, options, data=sample)
    workers = [HistogramAccumulator(axis).put(chunk) for chunk in np.array_split(sample, 4)]
    combined = HistogramAccumulator(axis)
    for worker in workers:
        combined.put(worker)
    assert combined.to_dict() == one_shot.to_dict()
    assert combined.total == sample.size


def test_frequency_pipeline_over_log_axis() -> None:
    sizes = np.array([120.0, 3_400.0, 45.0, 9_800.0, 510.0, 77_000.0, 2.0])
    counts = transform_histogram(sizes, 4, 10.0, 100_000.0, "log10", options=AxisOptions(False, True, True))
    assert counts.counts.tolist() == [1, 2, 2, 1]
    assert counts.underflow == 1

    freq = frequency(sizes, counts.axis)
    assert isinstance(freq, FrequencyAccumulator)
    assert freq.count == sizes.size
    assert freq.underflow_frequency() == pytest.approx(1 / 7)
    assert freq.bin(1).as_tuple() == pytest.approx((100.0, 1_000.0))


def test_environment_configuration(monkeypatch) -> None:
    monkeypatch.setenv("BINSTAT_DEFAULT_COUNT_DTYPE", "int32")
    monkeypatch.setenv("BINSTAT_STRICT_VALIDATION", "no")
    get_config().load_from_env()
    acc = variable_histogram([0.5, 1.5], [0.0, 1.0, 2.0])
    assert acc.counts.dtype == np.dtype("int32")
    # 关闭严格校验后不再检查边界单调性
    variable_histogram([], [0.0, 2.0, 1.0])

    monkeypatch.setenv("BINSTAT_STRICT_VALIDATION", "true")
    get_config().load_from_env()
    with pytest.raises(AxisError):
        variable_histogram([], [0.0, 2.0, 1.0])


def test_category_strings_from_parsed_rows() -> None:
    rows = "Monday,tuesday,MONDAY,Sunday,wednesday,Monday".split(",")
    acc = category_histogram(rows, Weekday)
    assert acc.counts.tolist() == [3, 1, 1]
    assert acc.overflow == 1
    assert acc.total == len(rows)


def test_custom_axis_through_registry() -> None:
    AxisFactory.register("unit_circle", CircleAxis)
    axis = AxisFactory.create("unit_circle")
    rng = np.random.default_rng(3)
    points = [tuple(p) for p in rng.uniform(-1.0, 1.0, size=(400, 2))]
    left = HistogramAccumulator(axis).put(points[:200])
    right = HistogramAccumulator(axis).put(points[200:])
    left.put(right)
    inside = sum(1 for x, y in points if x * x + y * y <= 1.0)
    assert left.counts.tolist() == [inside]
    assert left.overflow == len(points) - inside
    assert left.bin(0) == "unit circle"
