"""
Process-wide settings for the histogram library.

Settings live on a single RuntimeConfig instance. They can be changed with
``configure(...)`` or read from ``BINSTAT_*`` environment variables.
"""
# 说明：直方图库的进程级配置。
# 职责：
# - RuntimeConfig：严格校验开关、计数器默认 dtype 与日志等级
# - load_from_env(...)：读取带前缀的环境变量，按字段逐个解析后写回
# - get_config() / configure(...)：访问与更新全局单例
# 约定：
# - 布尔开关接受 1/true/yes/on（大小写不敏感），其余取值视为 False
# - default_count_dtype 必须是 numpy 整数类型，写入时即校验
# - 未知配置键触发 AttributeError

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

import numpy as np

from .param_validation import ParamValidationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_flag(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


def _check_count_dtype(value: Any) -> str:
    try:
        resolved = np.dtype(value)
    except TypeError as exc:
        raise ParamValidationError(f"default_count_dtype {value!r} is not a numpy dtype") from exc
    if not np.issubdtype(resolved, np.integer):
        raise ParamValidationError(f"default_count_dtype must be an integer type, got {resolved}")
    return resolved.name


# 环境变量后缀 -> (字段名, 解析函数)
_ENV_FIELDS: Dict[str, tuple] = {
    "STRICT_VALIDATION": ("strict_validation", _parse_flag),
    "DEFAULT_COUNT_DTYPE": ("default_count_dtype", _check_count_dtype),
    "LOG_LEVEL": ("log_level", str.upper),
}

# 写入前需要规整的字段
_FIELD_CHECKS: Dict[str, Callable[[Any], Any]] = {
    "default_count_dtype": _check_count_dtype,
}


@dataclass
class RuntimeConfig:
    # strict_validation 打开时，VariableAxis 在构造阶段校验边界严格递增
    strict_validation: bool = True
    default_count_dtype: str = "int64"
    log_level: str = field(default_factory=lambda: os.environ.get("BINSTAT_LOG_LEVEL", "INFO"))

    def update(self, **kwargs: Any) -> None:
        for key, value in kwargs.items():
            if key not in self.__dataclass_fields__:
                raise AttributeError(f"unknown config option '{key}'")
            check = _FIELD_CHECKS.get(key)
            setattr(self, key, check(value) if check is not None else value)

    def load_from_env(self, prefix: str = "BINSTAT_") -> None:
        """Override fields from ``<prefix><FIELD>`` variables that are set."""
        for suffix, (name, parse) in _ENV_FIELDS.items():
            raw = os.environ.get(prefix + suffix)
            if raw is not None:
                setattr(self, name, parse(raw))


_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    """Update the global configuration in place and return it."""
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
