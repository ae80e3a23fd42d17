"""
Value Object Module

领域层值对象定义。

子模块分类:
- pricing/: 定价相关 (Greeks 输入、归一化中间量、计算结果、校验错误)
- config/: 配置相关 (Greeks 引擎配置)
"""

from .pricing.greeks import (
    GREEKS_OUTPUT_ORDER,
    GreeksInput,
    GreeksResult,
    InvalidInput,
    NormalizedInput,
)
from .config.greeks_engine_config import GreeksEngineConfig

__all__ = [
    # Greeks 相关
    "GREEKS_OUTPUT_ORDER",
    "GreeksInput",
    "GreeksResult",
    "InvalidInput",
    "NormalizedInput",
    # 配置相关
    "GreeksEngineConfig",
]
