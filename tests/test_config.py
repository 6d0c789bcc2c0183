"""
Tests for configuration loading.
"""

import pytest
import yaml

from date_periods.config.manager import DEFAULT_CONFIG_PATH, ConfigManager
from date_periods.core.periods import PeriodCalculator
from date_periods.data.schemas import Config, Weekday


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no overrides leak in from the environment."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_default_settings_file(self):
        config = ConfigManager().load_config()

        assert ConfigManager().config_path == DEFAULT_CONFIG_PATH
        assert config.week_start == Weekday.MONDAY
        assert config.week_end == Weekday.SUNDAY

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()
        assert config == Config()

    def test_load_nested_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("week:\n  start: sunday\n  end: saturday\n", encoding="utf-8")

        config = ConfigManager(str(path)).load_config()

        assert config.week_start == Weekday.SUNDAY
        assert config.week_end == Weekday.SATURDAY

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DATE_PERIODS_WEEK_START", "fri")
        monkeypatch.setenv("DATE_PERIODS_WEEK_END", "3")

        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert config.week_start == Weekday.FRIDAY
        assert config.week_end == Weekday.THURSDAY

    def test_invalid_weekday_raises(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("week:\n  start: someday\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(str(path)).load_config()

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("week: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            ConfigManager(str(path)).load_config()

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "settings.yaml"
        manager = ConfigManager(str(path))

        manager.save_config(Config(week_start=Weekday.SUNDAY, week_end=Weekday.SATURDAY))

        saved = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert saved == {"week": {"start": "sunday", "end": "saturday"}}
        calc = PeriodCalculator.from_config(manager.load_config())
        assert calc.week.start == Weekday.SUNDAY
