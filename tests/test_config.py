"""
Tests for YAML configuration loading.
"""

import logging
from pathlib import Path

import pytest

from proplogic.config import (
    CONFIG_ENV_VAR,
    ConfigError,
    ProplogicConfig,
    load_config_from_env,
    resolve_log_level,
)


class TestProplogicConfig:
    """Test ProplogicConfig.from_file."""

    def test_defaults(self):
        config = ProplogicConfig()
        assert config.export_dir == Path("exports")
        assert config.export_prefix == "export_"
        assert config.auto_export is False
        assert config.default_view == "all"

    def test_from_file(self, tmp_path):
        path = tmp_path / "proplogic.yaml"
        path.write_text(
            "log_level: debug\n"
            "output:\n"
            "  view: steps\n"
            "export:\n"
            "  dir: out\n"
            "  prefix: tt_\n"
            "  auto: true\n"
            "  echo_console: true\n",
            encoding="utf-8",
        )
        config = ProplogicConfig.from_file(path)
        assert config.log_level == "DEBUG"
        assert config.default_view == "steps"
        assert config.export_dir == Path("out")
        assert config.export_prefix == "tt_"
        assert config.auto_export is True
        assert config.echo_console is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert ProplogicConfig.from_file(path) == ProplogicConfig()

    def test_unknown_view(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("output:\n  view: fancy\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ProplogicConfig.from_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ProplogicConfig.from_file(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("output: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ProplogicConfig.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            ProplogicConfig.from_file(tmp_path / "absent.yaml")

    @pytest.mark.parametrize("text", ["export: 5\n", "output: [simple]\n", "export: text\n"])
    def test_section_not_a_mapping(self, tmp_path, text):
        path = tmp_path / "section.yaml"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigError, match="must be a mapping"):
            ProplogicConfig.from_file(path)

    def test_unknown_log_level(self, tmp_path):
        path = tmp_path / "level.yaml"
        path.write_text("log_level: loud\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Unknown log level"):
            ProplogicConfig.from_file(path)


class TestResolveLogLevel:
    """Level names are checked before logging is configured."""

    def test_known_names(self):
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level("WARNING") == logging.WARNING

    @pytest.mark.parametrize("name", ["LOUD", "", "verbose"])
    def test_unknown_names(self, name):
        with pytest.raises(ConfigError):
            resolve_log_level(name)


class TestLoadConfigFromEnv:
    def test_absent_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yaml"))
        assert load_config_from_env() == ProplogicConfig()

    def test_env_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("output:\n  view: latex\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config_from_env().default_view == "latex"

    def test_explicit_path_must_exist(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config_from_env(tmp_path / "absent.yaml")
