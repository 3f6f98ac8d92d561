"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from holiday_provider.data.schemas import Config

logger = logging.getLogger(__name__)

# Default config file path
DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    # Mapping of environment variables to config fields and their converters
    ENV_MAPPINGS = {
        "HOLIDAY_PROVIDER_REGION": ("default_region", str),
        "HOLIDAY_PROVIDER_LOCALE": ("default_locale", str),
        "HOLIDAY_PROVIDER_OUTPUT_FORMAT": ("output_format", str),
        "HOLIDAY_PROVIDER_OUTPUT_DIRECTORY": ("output_directory", str),
        "HOLIDAY_PROVIDER_API_HOST": ("api_host", str),
        "HOLIDAY_PROVIDER_API_PORT": ("api_port", int),
        "HOLIDAY_PROVIDER_LOG_LEVEL": ("log_level", str),
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        # 1. Load from YAML file
        config_dict = self._load_yaml()

        # 2. Apply environment variable overrides
        config_dict = self._apply_env_overrides(config_dict)

        # 3. Validate and create Config object
        try:
            return Config(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            logger.debug(f"Config file not found: {self.config_path}, using defaults")
            return {}

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}") from e

        logger.debug(f"Loaded config from: {self.config_path}")
        return self._flatten_config(config) if config else {}

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        sections = {
            "provider": {"region": "default_region", "locale": "default_locale"},
            "output": {"format": "output_format", "directory": "output_directory"},
            "api": {"host": "api_host", "port": "api_port"},
            "logging": {"level": "log_level"},
        }

        result = {}
        for section, fields in sections.items():
            values = config.get(section) or {}
            for yaml_key, config_key in fields.items():
                if yaml_key in values:
                    result[config_key] = values[yaml_key]
        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Values that cannot be converted are ignored with a warning.

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        for env_var, (config_key, type_converter) in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            try:
                config_dict[config_key] = type_converter(env_value)
            except ValueError:
                logger.warning(f"Ignoring invalid value for {env_var}: {env_value!r}")

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        path = Path(output_path) if output_path else self.config_path

        config_dict = {
            "provider": {
                "region": config.default_region,
                "locale": config.default_locale,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
            "logging": {
                "level": config.log_level,
            },
        }

        # Ensure directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
