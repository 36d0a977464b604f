"""
Unit tests for logging utilities.
"""
# 说明：日志配置与 logger 获取的单元测试。
# 覆盖：
# - configure_logging(...)：显式级别作用于 binstat 命名空间 logger
# - get_logger(...)：返回按名称区分的标准 logger，库内 DEBUG 诊断可被捕获

import logging

import numpy as np

from binstat.core.utils import configure_logging, get_logger
from binstat.histogram import freedman_diaconis


def test_configure_logging_sets_package_level() -> None:
    configure_logging(level="WARNING")
    assert logging.getLogger("binstat").level == logging.WARNING
    configure_logging(level="INFO")
    assert logging.getLogger("binstat").level == logging.INFO


def test_get_logger_returns_named_logger(caplog) -> None:
    logger = get_logger("binstat.test")
    assert logger.name == "binstat.test"
    with caplog.at_level(logging.INFO, logger="binstat"):
        logger.info("message")
    assert "message" in caplog.text


def test_freedman_diaconis_ladder_is_logged(caplog) -> None:
    # 四分位距为 0 时，回退阶梯的每一步都在 DEBUG 级别记录
    sample = np.zeros(500)
    sample[-1] = 1.0
    with caplog.at_level(logging.DEBUG, logger="binstat"):
        freedman_diaconis(sample)
    assert "widened window" in caplog.text
    assert "1/512" in caplog.text
