"""Tests for configuration loading."""

import json

import pytest

from formulation import ConfigError, FormConfig, ValidateOn
from formulation.config import Settings, load_form_config, load_settings


class TestValidateOn:
    def test_values(self):
        assert ValidateOn.CHANGE == "change"
        assert ValidateOn.BLUR == "blur"

    def test_parse_is_case_insensitive(self):
        assert ValidateOn.parse(" Change ") is ValidateOn.CHANGE
        assert ValidateOn.parse(ValidateOn.BLUR) is ValidateOn.BLUR

    def test_parse_unknown(self):
        with pytest.raises(ConfigError, match="Unknown validateOn"):
            ValidateOn.parse("hover")


class TestFormConfig:
    def test_defaults(self):
        config = FormConfig()
        assert config.validate_on is ValidateOn.BLUR
        assert config.schema_ == {}
        assert config.messages == {}

    def test_coerce_none(self):
        assert FormConfig.coerce(None) == FormConfig()

    def test_coerce_passes_instances_through(self):
        config = FormConfig(validate_on="change")
        assert FormConfig.coerce(config) is config

    def test_accepts_callables(self):
        test = lambda value, parameter: True  # noqa: E731
        config = FormConfig.coerce({"schema": {"a": {"custom": {"test": test}}}})
        assert config.schema_["a"]["custom"]["test"] is test


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings(None)
        assert settings == Settings()

    def test_missing_env_file_is_ignored(self, tmp_path):
        assert load_settings(tmp_path / ".env") == Settings()

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FORMULATION_VALIDATE_ON=change\nFORMULATION_LOG_LEVEL=debug\n")
        settings = load_settings(env_file)
        assert settings.validate_on is ValidateOn.CHANGE
        assert settings.log_level == "DEBUG"

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("FORMULATION_VALIDATE_ON=change\n")
        monkeypatch.setenv("FORMULATION_VALIDATE_ON", "blur")
        assert load_settings(env_file).validate_on is ValidateOn.BLUR

    def test_invalid_validate_on(self, monkeypatch):
        monkeypatch.setenv("FORMULATION_VALIDATE_ON", "hover")
        with pytest.raises(ConfigError):
            load_settings(None)

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("FORMULATION_LOG_LEVEL", "loud")
        with pytest.raises(ConfigError, match="log level"):
            load_settings(None)


class TestLoadFormConfig:
    def test_loads_json(self, config_file):
        config = load_form_config(config_file)
        assert list(config.schema_) == ["firstname", "lastname", "phone"]
        assert config.messages == {"required": "Please fill in this field"}
        assert config.validate_on is ValidateOn.BLUR

    def test_settings_supply_validate_on(self, config_file):
        config = load_form_config(config_file, Settings(validate_on=ValidateOn.CHANGE))
        assert config.validate_on is ValidateOn.CHANGE

    def test_file_value_beats_settings(self, tmp_path):
        path = tmp_path / "form.json"
        path.write_text(json.dumps({"schema": {}, "validateOn": "blur"}))
        config = load_form_config(path, Settings(validate_on=ValidateOn.CHANGE))
        assert config.validate_on is ValidateOn.BLUR

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_form_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "form.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_form_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "form.json"
        path.write_text("[]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_form_config(path)
