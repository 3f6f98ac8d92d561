"""
Configuration loading from YAML and environment variables.
"""

from holiday_provider.config.manager import ConfigManager

__all__ = ["ConfigManager"]
