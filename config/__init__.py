"""
Configuration management for the pattern catalogue.
"""
from .config_manager import (
    Config,
    ConfigManager,
    load_config
)
from .presets import ConfigPresets

__all__ = [
    'Config',
    'ConfigManager',
    'load_config',
    'ConfigPresets',
]
