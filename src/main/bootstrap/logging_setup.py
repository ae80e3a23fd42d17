"""
日志初始化

为 src 命名空间下的所有 logger 挂载单一 StreamHandler，重复调用不会叠加 handler。
"""
import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    配置 src 根 logger

    Args:
        level: 日志级别名称 (DEBUG / INFO / WARNING / ERROR)
        stream: 输出流，默认 stderr (stdout 保留给计算结果)
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"未知日志级别: {level}")

    logger = logging.getLogger("src")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger
