"""
TOML configuration for the converter and its command-line front end.

    [conversion]
    aliases = true        # accept v (ū) and x (š)

    [logging]
    level = "WARNING"
    format = "pretty"     # or "json"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from manchu_converter.errors import ConfigError

DEFAULT_CONFIG_NAME = "manchu_converter.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("pretty", "json")


@dataclass(slots=True)
class ConverterConfig:
    aliases: bool = True
    log_level: str = "WARNING"
    log_format: str = "pretty"

    @classmethod
    def from_file(cls, config_path: str | Path) -> ConverterConfig:
        """Load a config file; missing sections and keys keep their defaults."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            try:
                cfg = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"{config_path}: {e}") from e

        return cls.from_dict(cfg, source=str(config_path))

    @classmethod
    def from_dict(cls, cfg: dict, source: str = "<config>") -> ConverterConfig:
        conv_cfg = cfg.get("conversion", {})
        log_cfg = cfg.get("logging", {})
        if not isinstance(conv_cfg, dict):
            raise ConfigError(f"{source}: [conversion] must be a table")
        if not isinstance(log_cfg, dict):
            raise ConfigError(f"{source}: [logging] must be a table")

        aliases = conv_cfg.get("aliases", True)
        if not isinstance(aliases, bool):
            raise ConfigError(f"{source}: [conversion] aliases must be true or false")

        level = str(log_cfg.get("level", "WARNING")).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(
                f"{source}: [logging] level must be one of {', '.join(_LOG_LEVELS)}"
            )

        fmt = str(log_cfg.get("format", "pretty")).lower()
        if fmt not in _LOG_FORMATS:
            raise ConfigError(
                f"{source}: [logging] format must be one of {', '.join(_LOG_FORMATS)}"
            )

        return cls(aliases=aliases, log_level=level, log_format=fmt)


def find_default_config() -> Path | None:
    """Look for manchu_converter.toml in the working directory."""
    candidate = Path(DEFAULT_CONFIG_NAME)
    if candidate.exists():
        return candidate
    return None
