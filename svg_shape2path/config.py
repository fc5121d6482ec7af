"""Configuration for svg-shape2path.

Configuration lives in a YAML file::

    log_level: INFO
    plugins:
      convertShapeToPath:
        convertArcs: true

Lookup order for ``Config.load()``: explicit path, ``$SVG_SHAPE2PATH_CONFIG``,
then ``~/.config/svg-shape2path/config.yaml``. Missing files fall back to
defaults; CLI flags override whatever was loaded.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from svg_shape2path.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SVG_SHAPE2PATH_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/svg-shape2path/config.yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PLUGIN_NAME = "convertShapeToPath"


@dataclass
class Config:
    """Runtime settings."""

    convert_arcs: bool = False
    log_level: str = "WARNING"

    @property
    def plugin_params(self) -> dict[str, Any]:
        """Params handed to the convertShapeToPath plugin."""
        return {"convertArcs": self.convert_arcs}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a Config from parsed YAML.

        Raises:
            ConfigError: If a field has the wrong type or value.
        """
        if not isinstance(data, dict):
            raise ConfigError("config: top level must be a mapping")

        config = cls()

        if "log_level" in data:
            level = data["log_level"]
            if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
                raise ConfigError(
                    f"log_level: must be one of {', '.join(LOG_LEVELS)}",
                    details={"value": level},
                )
            config.log_level = level.upper()

        plugins = data.get("plugins") or {}
        if not isinstance(plugins, dict):
            raise ConfigError("plugins: must be a mapping of plugin name to params")

        for plugin_name, plugin_params in plugins.items():
            if plugin_name != PLUGIN_NAME:
                raise ConfigError(f"plugins.{plugin_name}: unknown plugin")
            plugin_params = plugin_params or {}
            if not isinstance(plugin_params, dict):
                raise ConfigError(f"plugins.{plugin_name}: params must be a mapping")
            for key, value in plugin_params.items():
                if key != "convertArcs":
                    raise ConfigError(f"plugins.{plugin_name}.{key}: unknown param")
                if not isinstance(value, bool):
                    raise ConfigError(
                        f"plugins.{plugin_name}.{key}: must be a boolean",
                        details={"value": value},
                    )
                config.convert_arcs = value

        return config

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Load configuration from YAML.

        Args:
            path: Explicit config file. When given it must exist.

        Returns:
            Loaded Config, or defaults when no config file is found.

        Raises:
            ConfigError: If the file cannot be read or is invalid.
        """
        explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
        if path is None:
            path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        config_path = Path(path).expanduser()

        if not config_path.is_file():
            if explicit:
                raise ConfigError(f"Config file not found: {config_path}")
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        logger.debug("Loaded config from %s", config_path)
        return cls.from_dict(data or {})
