"""
GreeksEngine 领域服务

Greeks 计算统一入口: 输入校验 → 归一化 (d1/d2) → 十项公式 → GreeksResult。
校验失败时返回 InvalidInput 而不抛出异常。
引擎只持有不可变配置，无可变状态，可在多线程中并发调用。
"""
from typing import Optional, Union

from ...value_object.config.greeks_engine_config import GreeksEngineConfig
from ...value_object.pricing.greeks import GreeksInput, GreeksResult, InvalidInput
from . import greeks_calculator as calc
from .input_validator import validate_greeks_input


class GreeksEngine:
    """Black-Scholes Greeks 引擎"""

    def __init__(self, config: Optional[GreeksEngineConfig] = None):
        self._config = config or GreeksEngineConfig()

    @property
    def config(self) -> GreeksEngineConfig:
        return self._config

    def build_input(
        self,
        underlying_price: float,
        strike_price: float,
        time_to_expiration: float,
        volatility: float,
        risk_free_rate: float,
        dividend_yield: float,
        days_per_year: Optional[float] = None,
    ) -> GreeksInput:
        """构建 GreeksInput，未指定 days_per_year 时使用配置值"""
        if days_per_year is None:
            days_per_year = self._config.days_per_year
        return GreeksInput(
            underlying_price=underlying_price,
            strike_price=strike_price,
            time_to_expiration=time_to_expiration,
            volatility=volatility,
            risk_free_rate=risk_free_rate,
            dividend_yield=dividend_yield,
            days_per_year=days_per_year,
        )

    def calculate(self, params: GreeksInput) -> Union[GreeksResult, InvalidInput]:
        """
        计算期权理论价格与 Greeks

        Args:
            params: 原始输入 (百分比口径的波动率/利率/股息率, 天数口径的到期时间)

        Returns:
            GreeksResult，或校验失败时的 InvalidInput
        """
        # 1. 输入校验
        error = validate_greeks_input(
            params, strict_days_per_year=self._config.strict_days_per_year
        )
        if error is not None:
            return error

        # 2. 归一化并计算
        try:
            n = calc.normalize(params)
            result = GreeksResult(
                call_theta=calc.call_theta(n),
                put_theta=calc.put_theta(n),
                call_premium=calc.call_premium(n),
                put_premium=calc.put_premium(n),
                call_delta=calc.call_delta(n),
                put_delta=calc.put_delta(n),
                gamma=calc.gamma(n),
                vega=calc.vega(n),
                call_rho=calc.call_rho(n),
                put_rho=calc.put_rho(n),
            )
        except (OverflowError, ValueError, ZeroDivisionError) as e:
            # 未开启严格校验时 days_per_year <= 0 会在此处失败
            if not params.days_per_year > 0:
                return InvalidInput(
                    field="days_per_year",
                    value=params.days_per_year,
                    error_message=f"计算异常: {e}",
                )
            return InvalidInput(
                field="result",
                value=float("nan"),
                error_message=f"计算异常: {e}",
            )

        # 3. 可选: 拒绝退化结果
        if self._config.reject_non_finite and not result.is_finite():
            return InvalidInput(
                field="result",
                value=float("nan"),
                error_message="计算结果包含 NaN 或 inf",
            )
        return result


_DEFAULT_ENGINE = GreeksEngine()


def compute_greeks(
    underlying_price: float,
    strike_price: float,
    time_to_expiration_days: float,
    volatility_pct: float,
    risk_free_rate_pct: float,
    dividend_yield_pct: float,
    days_per_year: float = 365,
) -> Union[GreeksResult, InvalidInput]:
    """
    计算欧式期权 Black-Scholes 理论价格与 Greeks (默认配置)

    Args:
        underlying_price: 标的价格
        strike_price: 行权价
        time_to_expiration_days: 剩余到期天数
        volatility_pct: 年化波动率 (百分比)
        risk_free_rate_pct: 年化无风险利率 (百分比)
        dividend_yield_pct: 年化股息率 (百分比)
        days_per_year: 年化天数约定

    Returns:
        GreeksResult 或 InvalidInput
    """
    params = GreeksInput(
        underlying_price=underlying_price,
        strike_price=strike_price,
        time_to_expiration=time_to_expiration_days,
        volatility=volatility_pct,
        risk_free_rate=risk_free_rate_pct,
        dividend_yield=dividend_yield_pct,
        days_per_year=days_per_year,
    )
    return _DEFAULT_ENGINE.calculate(params)
