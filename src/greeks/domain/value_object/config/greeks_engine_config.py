"""GreeksEngineConfig 配置值对象"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GreeksEngineConfig:
    """Greeks 引擎配置"""

    days_per_year: float = 365.0        # 年化天数约定
    strict_days_per_year: bool = False  # 是否校验 days_per_year > 0
    reject_non_finite: bool = False     # 结果含 NaN/inf 时是否按无效输入返回
