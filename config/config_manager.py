"""
Configuration management for the catalogue runner.
"""
import os
import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from copy import deepcopy
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError, ValidationError
from validation.schema import Schema, CATALOGUE_SCHEMAS

logger = get_logger(__name__)


class Config:
    """Configuration container with dot notation access."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = data or {}

    def __getattr__(self, key: str) -> Any:
        """Get config value using dot notation."""
        if key.startswith('_'):
            return object.__getattribute__(self, key)

        if key not in self._data:
            raise AttributeError(f"Config has no attribute '{key}'")

        value = self._data[key]
        if isinstance(value, dict):
            return Config(value)
        return value

    def __getitem__(self, key: str) -> Any:
        """Get config value using bracket notation."""
        return self._data[key]

    def __setitem__(self, key: str, value: Any):
        """Set config value using bracket notation."""
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value with default."""
        try:
            keys = key.split('.')
            value = self._data
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set config value using dot notation."""
        keys = key.split('.')
        data = self._data
        for k in keys[:-1]:
            if k not in data:
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return deepcopy(self._data)

    def update(self, other: Dict[str, Any]):
        """Update configuration with another dict."""
        self._deep_update(self._data, other)

    @staticmethod
    def _deep_update(base: Dict, update: Dict):
        """Recursively update nested dictionaries."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Config._deep_update(base[key], value)
            else:
                base[key] = deepcopy(value)


class ConfigManager:
    """
    Configuration assembled from presets, files, environment and dicts.

    Top-level keys are sections (``logging``, ``chain``, ``factory``, ...).
    Sections with a registered schema are validated on load and when read
    through :meth:`section`, which also fills in schema defaults.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None, register_defaults: bool = True):
        self._config = Config()
        self._schemas: Dict[str, Schema] = {}
        self.logger = get_logger(self.__class__.__name__)

        if register_defaults:
            for name, schema in CATALOGUE_SCHEMAS.items():
                self.register_schema(name, schema)

        if data:
            self.load_from_dict(data)

    def load_from_file(self, filepath: str, validate: bool = True):
        """
        Load configuration from file (JSON or YAML).

        Args:
            filepath: Path to configuration file
            validate: Whether to validate sections against their schemas
        """
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )

        if path.suffix not in ['.yaml', '.yml', '.json']:
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {filepath}",
                details={'filepath': str(path), 'actual_type': type(data).__name__}
            )

        if validate:
            self._validate_sections(data)

        self._config.update(data)
        self.logger.info(f"Loaded configuration from {filepath}")

    def load_from_env(self, prefix: str = "PATTERNS_") -> int:
        """
        Load configuration from environment variables.

        ``PATTERNS_CHAIN__FINANCE_LIMIT=7500`` sets ``chain.finance_limit``;
        a double underscore separates the section from the key.

        Args:
            prefix: Prefix for environment variables

        Returns:
            Number of values loaded
        """
        loaded = 0

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix):].lower()

            # Try to parse as JSON for complex types
            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            self._config.set(config_key.replace('__', '.'), parsed_value)
            loaded += 1

        self.logger.info(f"Loaded {loaded} configuration values from environment")
        return loaded

    def load_from_dict(self, data: Dict[str, Any], validate: bool = True):
        """
        Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            validate: Whether to validate sections against their schemas
        """
        if validate:
            self._validate_sections(data)

        self._config.update(data)
        self.logger.debug("Loaded configuration from dictionary")

    def save_to_file(self, filepath: str, format: str = 'yaml'):
        """
        Save configuration to file.

        Args:
            filepath: Path to save configuration
            format: File format ('yaml' or 'json')
        """
        if format not in ('yaml', 'json'):
            raise ConfigurationError(f"Unsupported format: {format}")

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            if format == 'yaml':
                yaml.safe_dump(self._config.to_dict(), f, default_flow_style=False)
            else:
                json.dump(self._config.to_dict(), f, indent=2)

        self.logger.info(f"Saved configuration to {filepath}")

    def register_schema(self, name: str, schema: Schema):
        """Register a validation schema for a section."""
        self._schemas[name] = schema
        self.logger.debug(f"Registered schema: {name}")

    def section(self, name: str) -> Dict[str, Any]:
        """Return a section as a dict, validated and with schema defaults applied."""
        data = self._config.get(name) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration section '{name}' must be a mapping",
                details={'section': name, 'actual_type': type(data).__name__}
            )

        if name in self._schemas:
            try:
                return self._schemas[name].validate(data)
            except ValidationError as e:
                raise ConfigurationError(
                    f"Invalid configuration section '{name}'",
                    details={'section': name, **e.details}
                ) from e

        return deepcopy(data)

    def validate(self):
        """Validate every section that has a registered schema."""
        self._validate_sections(self._config.to_dict())

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config.set(key, value)
        self.logger.debug(f"Set config: {key} = {value}")

    def get_config(self) -> Config:
        """Get the full configuration object."""
        return self._config

    def _validate_sections(self, data: Dict[str, Any]):
        for name, schema in self._schemas.items():
            if name not in data:
                continue
            try:
                schema.validate(data[name])
            except ValidationError as e:
                raise ConfigurationError(
                    f"Invalid configuration section '{name}'",
                    details={'section': name, **e.details}
                ) from e


def load_config(
    filepath: Optional[str] = None,
    preset: Optional[Dict[str, Any]] = None,
    use_env: bool = False
) -> ConfigManager:
    """
    Build a ConfigManager from a preset, then a file, then the environment.

    Later sources override earlier ones.
    """
    manager = ConfigManager()
    if preset:
        manager.load_from_dict(preset)
    if filepath:
        manager.load_from_file(filepath)
    if use_env:
        manager.load_from_env()
        manager.validate()
    return manager
