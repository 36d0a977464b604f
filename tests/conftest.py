"""Shared pytest configuration and path setup for test modules."""

import sys
from dataclasses import replace
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from binstat.core.utils import config as _config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 每个测试结束后恢复全局配置，避免 configure(...) 的修改在测试之间泄漏
    snapshot = replace(_config._GLOBAL_CONFIG)
    yield
    for name in ("strict_validation", "default_count_dtype", "log_level"):
        setattr(_config._GLOBAL_CONFIG, name, getattr(snapshot, name))


@pytest.fixture(autouse=True)
def _restore_registries():
    # 分箱函数、轴类型与反函数注册表均为模块级字典，测试中的自定义注册在结束后撤销
    from binstat.histogram import axis_factory, breaks, transforms

    registries = (
        breaks.BREAK_FUNCTIONS,
        axis_factory._AXIS_REGISTRY,
        transforms.FORWARD_BY_NAME,
        transforms.INVERSE_BY_NAME,
        transforms.NAME_BY_FUNCTION,
    )
    snapshots = [dict(registry) for registry in registries]
    yield
    for registry, snapshot in zip(registries, snapshots):
        registry.clear()
        registry.update(snapshot)
