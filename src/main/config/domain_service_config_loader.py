"""
domain_service_config_loader.py - 领域服务 TOML 配置加载器

从 config/domain_service/ 目录下的 TOML 文件加载领域服务配置，
并转换为对应的配置值对象。
"""
from pathlib import Path
from typing import Optional

from src.greeks.domain.value_object.config.greeks_engine_config import GreeksEngineConfig
from src.main.config.config_loader import PROJECT_ROOT, ConfigLoader


_DOMAIN_SERVICE_CONFIG_DIR = PROJECT_ROOT / "config" / "domain_service"
GREEKS_ENGINE_CONFIG_PATH = _DOMAIN_SERVICE_CONFIG_DIR / "pricing" / "greeks_engine.toml"


def load_greeks_engine_config(
    overrides: Optional[dict] = None,
    path: Optional[Path] = None,
    use_env: bool = True,
) -> GreeksEngineConfig:
    """
    加载 Greeks 引擎配置

    优先级: overrides > 环境变量 > TOML 文件 > dataclass 默认值

    Args:
        overrides: 运行时覆盖值 (如来自命令行参数)
        path: TOML 文件路径，默认 config/domain_service/pricing/greeks_engine.toml
        use_env: 是否读取环境变量覆盖
    """
    toml_path = Path(path) if path is not None else GREEKS_ENGINE_CONFIG_PATH
    data = ConfigLoader.load_toml_if_exists(toml_path)
    overrides = dict(overrides or {})
    if use_env:
        ConfigLoader.load_dotenv_file()
        env = ConfigLoader.load_env_overrides()
        for key, value in env.items():
            overrides.setdefault(key, value)

    calendar = data.get("calendar", {})
    validation = data.get("validation", {})

    kwargs = {}

    # calendar
    _map_field(kwargs, "days_per_year", overrides, "days_per_year", calendar, "days_per_year")

    # validation
    _map_field(
        kwargs, "strict_days_per_year", overrides, "strict_days_per_year",
        validation, "strict_days_per_year",
    )
    _map_field(
        kwargs, "reject_non_finite", overrides, "reject_non_finite",
        validation, "reject_non_finite",
    )

    if "days_per_year" in kwargs:
        kwargs["days_per_year"] = ConfigLoader.parse_float(
            kwargs["days_per_year"], f"{toml_path}: calendar.days_per_year"
        )
    for key in ("strict_days_per_year", "reject_non_finite"):
        if key in kwargs:
            kwargs[key] = ConfigLoader.parse_bool(kwargs[key], f"{toml_path}: validation.{key}")

    return GreeksEngineConfig(**kwargs)


def _map_field(
    kwargs: dict,
    config_key: str,
    overrides: dict,
    override_key: str,
    toml_section: dict,
    toml_key: str,
) -> None:
    """辅助: 按优先级填充字段 (overrides > toml > 默认值)"""
    if override_key in overrides:
        kwargs[config_key] = overrides[override_key]
    elif toml_key in toml_section:
        kwargs[config_key] = toml_section[toml_key]
