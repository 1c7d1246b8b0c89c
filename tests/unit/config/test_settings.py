# tests/unit/config/test_settings.py
# Unit tests for configuration management including load/save, defaults & validation

import json

import pytest

from faultline.config.settings import FaultlineSettings, SettingsManager
from faultline.core.exceptions import SettingsValidationError
from faultline.core.template import DEFAULT_TEMPLATE


class TestFaultlineSettings:

    # * Test default values are correctly set
    def test_default_settings(self):
        settings = FaultlineSettings()
        assert settings.template is None
        assert settings.exit_code == 1
        assert settings.style == "bold white on red"
        assert settings.max_chain_depth == 100
        assert settings.dev_mode is False

    # * Test resolved template falls back to the built-in default
    def test_resolved_template(self):
        assert FaultlineSettings().resolved_template == DEFAULT_TEMPLATE
        assert FaultlineSettings(template=":message").resolved_template == ":message"

    # * Test invalid values are rejected
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"exit_code": 0},
            {"exit_code": 256},
            {"exit_code": True},
            {"exit_code": "1"},
            {"style": "not a colour at all"},
            {"max_chain_depth": 0},
            {"dev_mode": "yes"},
            {"template": 42},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            FaultlineSettings(**kwargs)


class TestSettingsManager:

    # * Test load reads persisted values
    def test_load_from_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"exit_code": 3, "template": ":message"}))
        settings = SettingsManager(config).load()
        assert settings.exit_code == 3
        assert settings.template == ":message"

    # * Test missing file yields defaults
    def test_load_missing_file(self, tmp_path):
        assert SettingsManager(tmp_path / "absent.json").load() == FaultlineSettings()

    # * Test invalid config falls back to defaults w/ a warning
    def test_load_invalid_file(self, tmp_path, capsys):
        config = tmp_path / "config.json"
        config.write_text("{ not json")
        settings = SettingsManager(config).load()
        assert settings == FaultlineSettings()
        assert "Invalid config file" in capsys.readouterr().out

    # * Test unknown keys in config fall back to defaults
    def test_load_unknown_key(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"colour": "red"}))
        assert SettingsManager(config).load() == FaultlineSettings()

    # * Test set persists & re-validates
    def test_set_persists(self, tmp_path):
        config = tmp_path / "config.json"
        manager = SettingsManager(config)
        manager.set("exit_code", 70)

        assert json.loads(config.read_text())["exit_code"] == 70
        assert SettingsManager(config).load().exit_code == 70

    # * Test invalid set leaves stored settings untouched
    def test_set_invalid_value(self, tmp_path):
        manager = SettingsManager(tmp_path / "config.json")
        with pytest.raises(SettingsValidationError) as exc_info:
            manager.set("exit_code", 0)
        assert exc_info.value.setting_name == "exit_code"
        assert manager.get("exit_code") == 1

    # * Test unknown key is rejected
    def test_set_unknown_key(self, tmp_path):
        with pytest.raises(SettingsValidationError, match="Unknown setting"):
            SettingsManager(tmp_path / "config.json").set("colour", "red")

    # * Test reset restores defaults
    def test_reset(self, tmp_path):
        manager = SettingsManager(tmp_path / "config.json")
        manager.set("dev_mode", True)
        manager.reset()
        assert manager.list_settings()["dev_mode"] is False
