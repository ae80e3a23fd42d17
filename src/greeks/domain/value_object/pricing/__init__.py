"""
Pricing 子模块 - 定价相关值对象

包含 Greeks 计算的输入、归一化中间量、结果和校验错误。
"""
from .greeks import (
    GREEKS_OUTPUT_ORDER,
    GreeksInput,
    GreeksResult,
    InvalidInput,
    NormalizedInput,
)

__all__ = [
    "GREEKS_OUTPUT_ORDER",
    "GreeksInput",
    "GreeksResult",
    "InvalidInput",
    "NormalizedInput",
]
