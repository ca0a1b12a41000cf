"""
Configuration loader for extgroup
Handles the optional YAML settings file given on the command line
"""

import copy
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    "show_header": False,
    "log_level": "WARNING",
    "log_file": None,
}


class ConfigError(Exception):
    """Raised when the settings file cannot be read or parsed"""


@dataclass
class ConfigLoader:
    """Settings for a run: defaults overridden by an optional YAML file"""

    config_path: Optional[Path] = None
    config: Dict[str, Any] = field(default_factory=dict, init=False)

    def __post_init__(self):
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        if self.config_path is not None:
            self.config_path = Path(self.config_path)
            self.load()

    def load(self) -> None:
        """Merge the YAML file into the defaults"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"Could not read config {self.config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {self.config_path} must contain a mapping")

        self.config.update(data)

        # Relative log paths follow the config file, not the scanned directory
        log_file = self.config.get("log_file")
        if log_file and not Path(log_file).expanduser().is_absolute():
            self.config["log_file"] = str(self.config_path.parent / log_file)

        logger.debug(f"Config keys from {self.config_path}: {list(data.keys())}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value, nested keys use dot notation (e.g. 'logging.level')"""
        value = self.config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                logger.debug(f"Config key '{key}' not found, using default: {default}")
                return default

        return value

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def override(self, **values: Any) -> None:
        """Apply command line values, None means not given"""
        for key, value in values.items():
            if value is not None:
                self.config[key] = value

    @property
    def show_header(self) -> bool:
        return bool(self.get("show_header", False))

    @property
    def log_level(self) -> str:
        return str(self.get("log_level", "WARNING"))

    @property
    def log_file(self) -> Optional[str]:
        return self.get("log_file")


def load_config(config_path: Optional[Path] = None) -> ConfigLoader:
    """Convenience function to build the settings for a run"""
    return ConfigLoader(config_path)
