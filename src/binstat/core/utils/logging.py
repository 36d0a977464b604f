"""
Logger access for the histogram modules.

All library loggers sit under the ``binstat`` namespace, so one level
setting controls every module's diagnostics.
"""
# 说明：统一的 logger 获取入口与默认格式。
# 约定：
# - 日志级别优先级：显式参数 level > 环境变量 BINSTAT_LOG_LEVEL > 运行时配置的 log_level
# - 库内模块只在 DEBUG 级别输出诊断信息（轴构造、合并、分箱启发式的回退路径）
# - 根 logger 已有 handler 时不重复初始化，避免覆盖应用自身的日志配置

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from .config import get_config

NAMESPACE = "binstat"
_FORMAT = "[%(levelname)s] %(name)s %(asctime)s | %(message)s"


def _resolve_level(level: Union[str, int, None]) -> Union[str, int]:
    if level is None:
        level = os.environ.get("BINSTAT_LOG_LEVEL", get_config().log_level)
    return level.upper() if isinstance(level, str) else level


def configure_logging(level: Union[str, int, None] = None) -> None:
    resolved = _resolve_level(level)
    logging.basicConfig(level=resolved, format=_FORMAT)
    logging.getLogger(NAMESPACE).setLevel(resolved)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``name``'s logger (the namespace logger when omitted)."""
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or NAMESPACE)
