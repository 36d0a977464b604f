"""Histogram axes, accumulators and bin-count heuristics."""

from __future__ import annotations

from .accumulator import HistogramAccumulator
from .api import (
    category_histogram,
    enum_histogram,
    frequency,
    histogram,
    integral_histogram,
    regular_histogram,
    transform_histogram,
    variable_histogram,
)
from .axes import (
    AxisInfo,
    BaseAxis,
    CategoryAxis,
    EnumAxis,
    IntegralAxis,
    IntervalAxis,
    RegularAxis,
    TransformAxis,
    VariableAxis,
)
from .axis_factory import (
    AxisFactory,
    category_axis,
    create_axis,
    enum_axis,
    get_axis_class,
    integral_axis,
    register_axis,
    regular_axis,
    transform_axis,
    variable_axis,
)
from .bins import Bin, EdgeBin, EnumBin
from .breaks import (
    bins_from_width,
    freedman_diaconis,
    get_break_function,
    is_break_function,
    register_break_function,
    resolve_break_function,
    scott,
    sturges,
)
from .exceptions import (
    AxisError,
    AxisMismatchError,
    AxisRangeError,
    CategoryConversionError,
    DegenerateSampleError,
)
from .frequency_accumulator import FrequencyAccumulator
from .options import AxisOption, AxisOptions
from .storage import allocate_counts
from .transforms import register_inverse_transform

__all__: list[str] = [
    "HistogramAccumulator",
    "FrequencyAccumulator",
    "histogram",
    "frequency",
    "integral_histogram",
    "regular_histogram",
    "transform_histogram",
    "enum_histogram",
    "category_histogram",
    "variable_histogram",
    "AxisInfo",
    "BaseAxis",
    "IntervalAxis",
    "IntegralAxis",
    "RegularAxis",
    "TransformAxis",
    "EnumAxis",
    "CategoryAxis",
    "VariableAxis",
    "AxisFactory",
    "integral_axis",
    "regular_axis",
    "transform_axis",
    "enum_axis",
    "category_axis",
    "variable_axis",
    "register_axis",
    "get_axis_class",
    "create_axis",
    "Bin",
    "EnumBin",
    "EdgeBin",
    "sturges",
    "scott",
    "freedman_diaconis",
    "bins_from_width",
    "register_break_function",
    "get_break_function",
    "is_break_function",
    "resolve_break_function",
    "AxisError",
    "AxisRangeError",
    "AxisMismatchError",
    "DegenerateSampleError",
    "CategoryConversionError",
    "AxisOption",
    "AxisOptions",
    "allocate_counts",
    "register_inverse_transform",
]
