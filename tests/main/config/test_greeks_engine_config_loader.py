"""
Greeks 引擎配置加载单元测试

验证 TOML 解析、环境变量覆盖、优先级 (overrides > 环境变量 > TOML > 默认值)
以及错误配置的报错。
"""
import pytest

from src.greeks.domain.value_object.config.greeks_engine_config import GreeksEngineConfig
from src.main.config.config_loader import (
    ENV_DAYS_PER_YEAR,
    ENV_LOG_LEVEL,
    ENV_REJECT_NON_FINITE,
    ENV_STRICT_DAYS_PER_YEAR,
    ConfigLoader,
)
from src.main.config.domain_service_config_loader import (
    GREEKS_ENGINE_CONFIG_PATH,
    load_greeks_engine_config,
)

_ENV_KEYS = (ENV_DAYS_PER_YEAR, ENV_STRICT_DAYS_PER_YEAR, ENV_REJECT_NON_FINITE, ENV_LOG_LEVEL)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def toml_file(tmp_path):
    def _write(content: str):
        path = tmp_path / "greeks_engine.toml"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


class TestLoadGreeksEngineConfig:

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_greeks_engine_config(path=tmp_path / "missing.toml", use_env=False)
        assert config == GreeksEngineConfig()

    def test_shipped_file_matches_defaults(self):
        assert GREEKS_ENGINE_CONFIG_PATH.exists()
        config = load_greeks_engine_config(use_env=False)
        assert config == GreeksEngineConfig()

    def test_full_toml(self, toml_file):
        path = toml_file(
            """
[calendar]
days_per_year = 252

[validation]
strict_days_per_year = true
reject_non_finite = true
"""
        )
        config = load_greeks_engine_config(path=path, use_env=False)
        assert config.days_per_year == 252.0
        assert isinstance(config.days_per_year, float)
        assert config.strict_days_per_year is True
        assert config.reject_non_finite is True

    def test_partial_toml_keeps_defaults(self, toml_file):
        path = toml_file("[calendar]\ndays_per_year = 360\n")
        config = load_greeks_engine_config(path=path, use_env=False)
        assert config.days_per_year == 360.0
        assert config.strict_days_per_year is False
        assert config.reject_non_finite is False

    def test_env_overrides_toml(self, toml_file, monkeypatch):
        path = toml_file("[calendar]\ndays_per_year = 360\n")
        monkeypatch.setenv(ENV_DAYS_PER_YEAR, "252")
        monkeypatch.setenv(ENV_STRICT_DAYS_PER_YEAR, "yes")
        config = load_greeks_engine_config(path=path)
        assert config.days_per_year == 252.0
        assert config.strict_days_per_year is True

    def test_overrides_beat_env(self, toml_file, monkeypatch):
        path = toml_file("[calendar]\ndays_per_year = 360\n")
        monkeypatch.setenv(ENV_DAYS_PER_YEAR, "252")
        config = load_greeks_engine_config(overrides={"days_per_year": 365}, path=path)
        assert config.days_per_year == 365.0

    def test_env_ignored_when_disabled(self, toml_file, monkeypatch):
        path = toml_file("[calendar]\ndays_per_year = 360\n")
        monkeypatch.setenv(ENV_DAYS_PER_YEAR, "252")
        config = load_greeks_engine_config(path=path, use_env=False)
        assert config.days_per_year == 360.0

    def test_malformed_toml_raises(self, toml_file):
        path = toml_file("[calendar\ndays_per_year = ")
        with pytest.raises(ValueError, match="TOML"):
            load_greeks_engine_config(path=path, use_env=False)

    def test_non_numeric_days_raises(self, toml_file):
        path = toml_file('[calendar]\ndays_per_year = "many"\n')
        with pytest.raises(ValueError, match="days_per_year"):
            load_greeks_engine_config(path=path, use_env=False)

    def test_bad_env_bool_raises(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_REJECT_NON_FINITE, "maybe")
        with pytest.raises(ValueError, match=ENV_REJECT_NON_FINITE):
            load_greeks_engine_config(path=tmp_path / "missing.toml")


class TestConfigLoader:

    @pytest.mark.parametrize("text, expected", [
        ("1", True), ("true", True), ("ON", True), (" yes ", True),
        ("0", False), ("False", False), ("off", False), ("no", False),
        (True, True), (False, False),
    ])
    def test_parse_bool(self, text, expected):
        assert ConfigLoader.parse_bool(text, "test") is expected

    def test_parse_float(self):
        assert ConfigLoader.parse_float("365", "test") == 365.0
        assert ConfigLoader.parse_float(252, "test") == 252.0

    @pytest.mark.parametrize("value", ["abc", None, True])
    def test_parse_float_rejects(self, value):
        with pytest.raises(ValueError, match="test"):
            ConfigLoader.parse_float(value, "test")

    def test_env_overrides_only_set_keys(self, monkeypatch):
        assert ConfigLoader.load_env_overrides() == {}
        monkeypatch.setenv(ENV_DAYS_PER_YEAR, "360")
        assert ConfigLoader.load_env_overrides() == {"days_per_year": 360.0}

    def test_load_log_level(self, monkeypatch):
        assert ConfigLoader.load_log_level() == "WARNING"
        monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
        assert ConfigLoader.load_log_level() == "DEBUG"
