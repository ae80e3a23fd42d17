"""
Pricing Module

期权 Greeks 计算领域服务。

- norm_cdf / norm_pdf: 标准正态分布
- validate_greeks_input: 输入校验
- greeks_calculator: 十项 Greek 公式 (call/put 价格、Delta、Gamma、Vega、Theta、Rho)
- GreeksEngine / compute_greeks: 统一计算入口
"""

from .normal_distribution import norm_cdf, norm_pdf
from .input_validator import validate_greeks_input
from .greeks_calculator import normalize
from .greeks_engine import GreeksEngine, compute_greeks

__all__ = [
    "norm_cdf",
    "norm_pdf",
    "validate_greeks_input",
    "normalize",
    "GreeksEngine",
    "compute_greeks",
]
