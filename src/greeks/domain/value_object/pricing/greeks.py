"""
Greeks 相关值对象

定义 Greeks 计算的原始输入、归一化后的中间量、计算结果以及输入校验错误。
"""
import math
from dataclasses import astuple, dataclass, fields
from typing import Dict


@dataclass(frozen=True)
class GreeksInput:
    """
    Greeks 计算输入参数 (原始口径)

    Attributes:
        underlying_price: 标的价格 S0
        strike_price: 行权价 X
        time_to_expiration: 剩余到期时间 (天)
        volatility: 年化隐含波动率 (百分比, 14.72 表示 14.72%)
        risk_free_rate: 年化无风险利率 (百分比)
        dividend_yield: 年化股息率 (百分比)
        days_per_year: 年化天数约定
    """
    underlying_price: float
    strike_price: float
    time_to_expiration: float
    volatility: float
    risk_free_rate: float
    dividend_yield: float
    days_per_year: float = 365.0


@dataclass(frozen=True)
class NormalizedInput:
    """
    归一化后的计算量

    百分比已转换为小数，天数已转换为年化时间，d1/d2 已计算。
    只在单次计算内存在。
    """
    spot: float
    strike: float
    t: float
    sigma: float
    r: float
    q: float
    days_per_year: float
    d1: float
    d2: float

    @property
    def sqrt_t(self) -> float:
        return math.sqrt(self.t)


@dataclass(frozen=True)
class GreeksResult:
    """
    Greeks 计算结果

    字段声明顺序即输出顺序。

    Attributes:
        call_theta: 看涨 Theta (每日历日)
        put_theta: 看跌 Theta (每日历日)
        call_premium: 看涨理论价格
        put_premium: 看跌理论价格
        call_delta: 看涨 Delta
        put_delta: 看跌 Delta
        gamma: Gamma
        vega: Vega (每单位波动率, 未缩放)
        call_rho: 看涨 Rho (每 1 个百分点利率)
        put_rho: 看跌 Rho (每 1 个百分点利率)
    """
    call_theta: float
    put_theta: float
    call_premium: float
    put_premium: float
    call_delta: float
    put_delta: float
    gamma: float
    vega: float
    call_rho: float
    put_rho: float

    @property
    def success(self) -> bool:
        return True

    def as_dict(self) -> Dict[str, float]:
        """按输出顺序返回字段字典"""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in astuple(self))


@dataclass(frozen=True)
class InvalidInput:
    """
    输入校验失败

    作为返回值而非异常传递给调用方。

    Attributes:
        field: 未通过校验的字段名
        value: 该字段的取值
        error_message: 错误描述
    """
    field: str
    value: float
    error_message: str

    @property
    def success(self) -> bool:
        return False


# 输出顺序 (与 GreeksResult 字段声明顺序一致)
GREEKS_OUTPUT_ORDER = tuple(f.name for f in fields(GreeksResult))
