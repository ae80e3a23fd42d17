"""
Greeks 计算公式

带连续股息率的 Black-Scholes 欧式期权定价与 Greeks。
每个 Greek 一个独立函数，输入为归一化后的 NormalizedInput。纯计算服务，无副作用。

单位约定:
- theta 除以 days_per_year, 即每个日历日的价值衰减
- rho 除以 100, 即利率变动 1 个百分点的敏感度
- vega / gamma 不做缩放, vega 对应波动率变动 1 (100%)
"""
import math

from ...value_object.pricing.greeks import GreeksInput, NormalizedInput
from .normal_distribution import norm_cdf, norm_pdf


def normalize(params: GreeksInput) -> NormalizedInput:
    """
    百分比转小数、天数转年化时间，并计算 d1/d2

    Args:
        params: 已通过校验的原始输入

    Returns:
        NormalizedInput
    """
    sigma = params.volatility / 100.0
    r = params.risk_free_rate / 100.0
    q = params.dividend_yield / 100.0
    t = params.time_to_expiration / params.days_per_year

    S = params.underlying_price
    K = params.strike_price
    sigma_sqrt_t = sigma * math.sqrt(t)
    d1 = (math.log(S / K) + (r - q + 0.5 * sigma ** 2) * t) / sigma_sqrt_t
    d2 = d1 - sigma_sqrt_t

    return NormalizedInput(
        spot=S,
        strike=K,
        t=t,
        sigma=sigma,
        r=r,
        q=q,
        days_per_year=params.days_per_year,
        d1=d1,
        d2=d2,
    )


def call_premium(n: NormalizedInput) -> float:
    return (
        n.spot * math.exp(-n.q * n.t) * norm_cdf(n.d1)
        - n.strike * math.exp(-n.r * n.t) * norm_cdf(n.d2)
    )


def put_premium(n: NormalizedInput) -> float:
    return (
        n.strike * math.exp(-n.r * n.t) * norm_cdf(-n.d2)
        - n.spot * math.exp(-n.q * n.t) * norm_cdf(-n.d1)
    )


def call_delta(n: NormalizedInput) -> float:
    return math.exp(-n.q * n.t) * norm_cdf(n.d1)


def put_delta(n: NormalizedInput) -> float:
    return math.exp(-n.q * n.t) * (norm_cdf(n.d1) - 1.0)


def gamma(n: NormalizedInput) -> float:
    """Gamma 对 call/put 相同"""
    return norm_pdf(n.d1) / (n.spot * n.sigma * n.sqrt_t)


def vega(n: NormalizedInput) -> float:
    """Vega 对 call/put 相同，未除以 100"""
    return n.spot * norm_pdf(n.d1) * n.sqrt_t


def _theta_decay(n: NormalizedInput) -> float:
    """theta 中 call/put 共有的时间价值衰减项"""
    return -(n.spot * n.sigma * math.exp(-n.q * n.t) * norm_pdf(n.d1)) / (2.0 * n.sqrt_t)


def call_theta(n: NormalizedInput) -> float:
    return (
        _theta_decay(n)
        - n.r * n.strike * math.exp(-n.r * n.t) * norm_cdf(n.d2)
        + n.q * math.exp(-n.q * n.t) * n.spot * norm_cdf(n.d1)
    ) / n.days_per_year


def put_theta(n: NormalizedInput) -> float:
    return (
        _theta_decay(n)
        + n.r * n.strike * math.exp(-n.r * n.t) * norm_cdf(-n.d2)
        - n.q * math.exp(-n.q * n.t) * n.spot * norm_cdf(-n.d1)
    ) / n.days_per_year


def call_rho(n: NormalizedInput) -> float:
    return n.strike * n.t * math.exp(-n.r * n.t) * norm_cdf(n.d2) / 100.0


def put_rho(n: NormalizedInput) -> float:
    return -n.strike * n.t * math.exp(-n.r * n.t) * norm_cdf(-n.d2) / 100.0
