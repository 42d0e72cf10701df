"""
Predefined configuration presets for the catalogue runner.
"""
from typing import Dict, Any
from utils.exceptions import ConfigurationError


class ConfigPresets:
    """Collection of predefined configuration presets."""

    @staticmethod
    def default() -> Dict[str, Any]:
        """Settings matching the classic walkthrough of every example."""
        return {
            'logging': {
                'log_level': 'WARNING',
                'log_dir': 'logs',
                'enable_file': False,
                'enable_structured': False
            },
            'chain': {
                'department_limit': 1000,
                'finance_limit': 5000
            },
            'factory': {
                'log_file': 'logs.txt'
            },
            'flyweight': {
                'preload': [
                    ['Arial', 'Regular'],
                    ['Arial', 'Bold'],
                    ['Times New Roman', 'Regular'],
                    ['Times New Roman', 'Italic'],
                    ['Verdana', 'Regular']
                ]
            },
            'proxy': {}
        }

    @staticmethod
    def quiet() -> Dict[str, Any]:
        """Only errors reach the console."""
        config = ConfigPresets.default()
        config['logging']['log_level'] = 'ERROR'
        return config

    @staticmethod
    def verbose() -> Dict[str, Any]:
        """Debug logging with structured JSON records written to log files."""
        config = ConfigPresets.default()
        config['logging'].update({
            'log_level': 'DEBUG',
            'enable_file': True,
            'enable_structured': True
        })
        return config

    @staticmethod
    def get_preset(name: str) -> Dict[str, Any]:
        """Get preset by name."""
        presets = {
            'default': ConfigPresets.default,
            'quiet': ConfigPresets.quiet,
            'verbose': ConfigPresets.verbose
        }

        if name not in presets:
            raise ConfigurationError(
                f"Unknown preset: {name}",
                details={'available_presets': list(presets.keys())}
            )

        return presets[name]()
