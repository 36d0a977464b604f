"""
Counter storage for histogram accumulators.
"""
# 说明：计数存储分配。只提供零初始化的一维整数数组。

from __future__ import annotations

from typing import Any

import numpy as np

from binstat.core.utils.config import get_config
from binstat.core.utils.param_validation import ensure, ensure_positive_int


def allocate_counts(n: int, dtype: Any = None) -> np.ndarray:
    """Return a zero-initialised counter array of length ``n``."""
    n = ensure_positive_int(n, label="counter length")
    resolved = np.dtype(dtype if dtype is not None else get_config().default_count_dtype)
    ensure(np.issubdtype(resolved, np.integer), f"counter dtype must be an integer type, got {resolved}")
    return np.zeros(n, dtype=resolved)


__all__ = ["allocate_counts"]
