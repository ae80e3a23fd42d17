"""
run_greeks.py - Greeks 计算命令行入口

用法:
    python -m src.main.run_greeks 34950.60 35000 3 14.72 10 0
    python -m src.main.run_greeks --example --labels

按固定顺序逐行输出十项结果:
call theta, put theta, call premium, put premium, call delta, put delta,
gamma, vega, call rho, put rho
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.greeks.domain.domain_service.pricing.greeks_engine import GreeksEngine
from src.greeks.domain.value_object.pricing.greeks import GREEKS_OUTPUT_ORDER, GreeksResult
from src.main.bootstrap.logging_setup import setup_logging
from src.main.config.config_loader import ConfigLoader
from src.main.config.domain_service_config_loader import load_greeks_engine_config

logger = logging.getLogger(__name__)

# 示例场景: 标的 34950.60, 行权价 35000, 3 天, 波动率 14.72%, 利率 10%, 股息率 0
EXAMPLE_INPUTS = (34950.60, 35000.00, 3.0, 14.72, 10.0, 0.0)

_POSITIONAL = (
    ("underlying_price", "标的价格"),
    ("strike_price", "行权价"),
    ("time_to_expiration", "剩余到期时间 (天)"),
    ("volatility", "年化波动率 (百分比)"),
    ("risk_free_rate", "年化无风险利率 (百分比)"),
    ("dividend_yield", "年化股息率 (百分比)"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="计算欧式期权 Black-Scholes 理论价格与 Greeks")
    for name, help_text in _POSITIONAL:
        parser.add_argument(name, type=float, nargs="?", help=help_text)
    parser.add_argument("--example", action="store_true", help="使用内置示例场景")
    parser.add_argument("--days-per-year", type=float, default=None, help="年化天数约定 (覆盖配置)")
    parser.add_argument("--config", type=str, default=None, help="Greeks 引擎 TOML 配置文件路径")
    parser.add_argument("--labels", action="store_true", help="每行输出前加字段名")
    parser.add_argument("--log-level", type=str, default=None, help="日志级别 (默认读取 GREEKS_LOG_LEVEL)")
    return parser


def format_result(result: GreeksResult, labels: bool = False) -> List[str]:
    """按固定顺序格式化十项结果"""
    values = result.as_dict()
    if labels:
        return [f"{name}: {values[name]!r}" for name in GREEKS_OUTPUT_ORDER]
    return [repr(values[name]) for name in GREEKS_OUTPUT_ORDER]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    given = [getattr(args, name) for name, _ in _POSITIONAL]
    if all(v is None for v in given):
        if not args.example:
            parser.error("需要提供六个数值参数，或使用 --example")
        inputs = EXAMPLE_INPUTS
    elif any(v is None for v in given):
        parser.error("六个数值参数必须同时提供")
    else:
        if args.example:
            parser.error("--example 不能与数值参数同时使用")
        inputs = tuple(given)

    if args.config is not None and not Path(args.config).exists():
        parser.error(f"配置文件不存在: {args.config}")

    ConfigLoader.load_dotenv_file()
    try:
        setup_logging(args.log_level or ConfigLoader.load_log_level())
    except ValueError as e:
        parser.error(str(e))

    overrides = {}
    if args.days_per_year is not None:
        overrides["days_per_year"] = args.days_per_year
    try:
        config = load_greeks_engine_config(overrides=overrides, path=args.config)
    except ValueError as e:
        logger.error("配置加载失败: %s", e)
        return 1

    engine = GreeksEngine(config)
    params = engine.build_input(*inputs)
    logger.debug("计算输入: %s", params)

    result = engine.calculate(params)
    if not result.success:
        logger.error("输入无效: %s", result.error_message)
        return 1

    for line in format_result(result, labels=args.labels):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
