"""
config_loader.py - 配置加载器

支持:
1. TOML 配置文件 (领域服务配置)
2. 环境变量 (.env / 进程环境)
3. 配置值解析与验证
"""
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

# Python 3.11+ 内置 tomllib，之前版本使用 tomli
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

# 从 src/main/config/config_loader.py 到项目根目录需要 4 级 parent
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

# 环境变量名
ENV_DAYS_PER_YEAR = "GREEKS_DAYS_PER_YEAR"
ENV_STRICT_DAYS_PER_YEAR = "GREEKS_STRICT_DAYS_PER_YEAR"
ENV_REJECT_NON_FINITE = "GREEKS_REJECT_NON_FINITE"
ENV_LOG_LEVEL = "GREEKS_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigLoader:
    """
    配置加载器

    - 领域服务配置: 从 TOML 文件加载
    - 运行时覆盖: 从环境变量加载 (.env)
    """

    @staticmethod
    def load_toml(path: str) -> Dict[str, Any]:
        """加载 TOML 配置文件，格式错误时抛出 ValueError"""
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"TOML 配置文件格式错误: {path}: {e}") from e
        logger.info("已加载配置文件: %s", path)
        return data

    @staticmethod
    def load_toml_if_exists(path: Path) -> Dict[str, Any]:
        """加载 TOML 文件，文件不存在时返回空字典"""
        if not path.exists():
            logger.debug("配置文件不存在，使用默认值: %s", path)
            return {}
        return ConfigLoader.load_toml(str(path))

    @staticmethod
    def load_dotenv_file(env_path: Optional[Path] = None) -> None:
        """加载项目根目录下的 .env，已存在的进程环境变量不会被覆盖"""
        env_path = env_path or PROJECT_ROOT / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)
            logger.debug("已加载环境变量文件: %s", env_path)
        else:
            # 回退到默认搜索
            load_dotenv()

    @staticmethod
    def load_env_overrides() -> Dict[str, Any]:
        """
        从环境变量读取 Greeks 引擎配置覆盖值

        Returns:
            仅包含已设置变量的字典，键为 GreeksEngineConfig 字段名
        """
        overrides: Dict[str, Any] = {}

        days = os.getenv(ENV_DAYS_PER_YEAR)
        if days:
            overrides["days_per_year"] = ConfigLoader.parse_float(days, ENV_DAYS_PER_YEAR)

        strict = os.getenv(ENV_STRICT_DAYS_PER_YEAR)
        if strict:
            overrides["strict_days_per_year"] = ConfigLoader.parse_bool(
                strict, ENV_STRICT_DAYS_PER_YEAR
            )

        reject = os.getenv(ENV_REJECT_NON_FINITE)
        if reject:
            overrides["reject_non_finite"] = ConfigLoader.parse_bool(
                reject, ENV_REJECT_NON_FINITE
            )

        return overrides

    @staticmethod
    def load_log_level(default: str = "WARNING") -> str:
        """从环境变量读取日志级别"""
        return (os.getenv(ENV_LOG_LEVEL) or default).upper()

    @staticmethod
    def parse_float(value: Any, source: str) -> float:
        """解析数值配置，bool 不视为数值"""
        if isinstance(value, bool):
            raise ValueError(f"{source} 必须为数值: {value!r}")
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{source} 必须为数值: {value!r}") from e

    @staticmethod
    def parse_bool(value: Any, source: str) -> bool:
        """解析布尔配置，支持 TOML 布尔值和 1/0、true/false、yes/no、on/off 字符串"""
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise ValueError(f"{source} 必须为布尔值: {value!r}")
