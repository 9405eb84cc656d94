"""Runtime configuration for the command-line front end and export."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

CONFIG_ENV_VAR = "PROPLOGIC_CONFIG"
DEFAULT_CONFIG_PATH = "config/proplogic.yaml"

VIEWS = ("simple", "detailed", "steps", "latex", "all")


class ConfigError(Exception):
    """Configuration file is unreadable or malformed."""
    pass


def resolve_log_level(name: str) -> int:
    """Return the numeric level for a logging level name such as ``debug``."""
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level {name!r}")
    return level


@dataclass(slots=True)
class ProplogicConfig:
    """Settings read from YAML; command-line flags override them."""

    export_dir: Path = Path("exports")
    export_prefix: str = "export_"
    auto_export: bool = False
    echo_console: bool = False
    log_level: str = "WARNING"
    default_view: str = "all"

    @classmethod
    def from_file(cls, path: Path | str) -> "ProplogicConfig":
        """
        Load settings from a YAML file with ``export`` and ``output`` sections.

        Raises:
            ConfigError: file missing or not YAML, a section that is not a
                mapping, an unknown view or an unknown log level
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found at: {path}")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML file: {path}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Malformed config file: expected a mapping in {path}")

        export = data.get("export", {}) or {}
        output = data.get("output", {}) or {}
        for name, section in (("export", export), ("output", output)):
            if not isinstance(section, dict):
                raise ConfigError(f"Malformed config file: section {name!r} must be a mapping in {path}")
        view = str(output.get("view", "all"))
        if view not in VIEWS:
            raise ConfigError(f"Unknown view {view!r} in {path}; expected one of {', '.join(VIEWS)}")
        log_level = str(data.get("log_level", "WARNING")).upper()
        resolve_log_level(log_level)
        return cls(
            export_dir=Path(export.get("dir", "exports")),
            export_prefix=str(export.get("prefix", "export_")),
            auto_export=bool(export.get("auto", False)),
            echo_console=bool(export.get("echo_console", False)),
            log_level=log_level,
            default_view=view,
        )


def load_config_from_env(path: Optional[Path | str] = None) -> ProplogicConfig:
    """Load config from ``path`` or $PROPLOGIC_CONFIG; defaults when absent."""
    if path is not None:
        return ProplogicConfig.from_file(path)
    config_path = Path(os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))
    if not config_path.exists():
        return ProplogicConfig()
    return ProplogicConfig.from_file(config_path)
