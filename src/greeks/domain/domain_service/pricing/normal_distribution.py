"""
标准正态分布

Black-Scholes 公式所需的累积分布函数与概率密度函数。纯计算，无副作用。
"""
import math

_SQRT_2 = math.sqrt(2.0)
_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def norm_cdf(x: float) -> float:
    """标准正态分布累积分布函数 Φ(x)"""
    return 0.5 * (1.0 + math.erf(x / _SQRT_2))


def norm_pdf(x: float) -> float:
    """标准正态分布概率密度函数 φ(x)"""
    return math.exp(-0.5 * x * x) * _INV_SQRT_2PI
