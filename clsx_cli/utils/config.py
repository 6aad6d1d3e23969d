"""
CLI Configuration utilities

Loads and saves CLI configuration from .clsx.yaml
"""

import copy
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from clsx_core.config import ClsxConfig

CONFIG_FILENAME = ".clsx.yaml"

logger = logging.getLogger(__name__)


class CLIConfig:
    """
    Manages CLI configuration from .clsx.yaml files.

    Configuration is loaded in this order (last wins):
    1. Built-in defaults
    2. User home directory config (~/.clsx.yaml)
    3. Current directory config (./.clsx.yaml)
    """

    DEFAULT_CONFIG = {
        "build": {
            "format": "text"
        },
        "eval": {
            "format": "text"
        },
        "context": {
            "file": None
        },
        "logging": {
            "level": ClsxConfig().log_level
        }
    }

    def __init__(self, config_file: Optional[str] = None, load_standard: bool = True):
        """
        Initialize CLI config.

        Args:
            config_file: Optional path to config file. If None, searches standard locations.
            load_standard: Search standard locations when no config_file is given
        """
        self.config: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file:
            self.load_from_file(config_file)
        elif load_standard:
            self.load_standard_configs()

    def load_standard_configs(self):
        """Load config from standard locations in order."""
        home_config = Path.home() / CONFIG_FILENAME
        if home_config.exists():
            self.load_from_file(str(home_config))

        local_config = Path.cwd() / CONFIG_FILENAME
        if local_config.exists():
            self.load_from_file(str(local_config))

    def load_from_file(self, config_file: str):
        """
        Load configuration from a YAML file.

        A missing or unreadable file leaves the current values in place.

        Args:
            config_file: Path to config file
        """
        try:
            with open(config_file, 'r') as f:
                loaded_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring config file %s: %s", config_file, e)
            return

        if not isinstance(loaded_config, dict):
            logger.warning("Ignoring config file %s: not a mapping", config_file)
            return
        self._merge_config(loaded_config)

    def _merge_config(self, new_config: Dict[str, Any]):
        """Merge new config into existing config, one level deep."""
        for key, value in new_config.items():
            if key in self.config and isinstance(self.config[key], dict) and isinstance(value, dict):
                self.config[key].update(value)
            else:
                self.config[key] = value

    def get(self, command: str, option: str, default: Any = None) -> Any:
        """
        Get a config value for a command.

        Args:
            command: Command or section name (e.g., 'build', 'context')
            option: Option name (e.g., 'format', 'file')
            default: Default value if not found

        Returns:
            Configuration value or default
        """
        section = self.config.get(command)
        if isinstance(section, dict):
            value = section.get(option)
            return default if value is None else value
        return default

    def save(self, config_file: str):
        """
        Save current configuration to a file.

        Args:
            config_file: Path to save config to
        """
        with open(config_file, 'w') as f:
            f.write(self.dump())

    def dump(self) -> str:
        """Return configuration as YAML text."""
        return yaml.dump(self.config, default_flow_style=False)


def load_cli_config(config_file: Optional[str] = None) -> CLIConfig:
    """
    Load CLI configuration.

    Args:
        config_file: Optional path to config file

    Returns:
        CLIConfig instance
    """
    return CLIConfig(config_file)


def create_default_config(output_file: str = CONFIG_FILENAME):
    """
    Create a default configuration file.

    Args:
        output_file: Path to create config file at
    """
    config = CLIConfig(load_standard=False)
    config.save(output_file)
