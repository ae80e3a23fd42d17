"""
Greeks 输入校验

按固定顺序检查原始输入，返回第一个未通过的字段；全部通过时返回 None。
比较写成 `not (x > 0)` 的形式，使 NaN 同样判为无效。
"""
from typing import Optional

from ...value_object.pricing.greeks import GreeksInput, InvalidInput


def validate_greeks_input(
    params: GreeksInput,
    strict_days_per_year: bool = False,
) -> Optional[InvalidInput]:
    """
    校验 Greeks 输入参数

    Args:
        params: 原始输入
        strict_days_per_year: 是否额外要求 days_per_year > 0 (默认不校验)

    Returns:
        InvalidInput 或 None
    """
    if not params.underlying_price > 0:
        return _invalid("underlying_price", params.underlying_price, "必须大于 0")
    if not params.strike_price > 0:
        return _invalid("strike_price", params.strike_price, "必须大于 0")
    if not params.time_to_expiration > 0:
        return _invalid("time_to_expiration", params.time_to_expiration, "必须大于 0")
    if not params.volatility > 0:
        return _invalid("volatility", params.volatility, "必须大于 0")
    if not params.risk_free_rate >= 0:
        return _invalid("risk_free_rate", params.risk_free_rate, "不能为负数")
    if not params.dividend_yield >= 0:
        return _invalid("dividend_yield", params.dividend_yield, "不能为负数")
    if strict_days_per_year and not params.days_per_year > 0:
        return _invalid("days_per_year", params.days_per_year, "必须大于 0")
    return None


def _invalid(field: str, value: float, reason: str) -> InvalidInput:
    return InvalidInput(
        field=field,
        value=value,
        error_message=f"{field} {reason} (实际值: {value})",
    )
