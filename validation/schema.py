"""
Schema validation for configuration sections.
"""
from typing import Any, Dict
from utils.logging_config import get_logger
from utils.exceptions import ValidationError
from .validators import RangeValidator, ChoiceValidator, CustomValidator

logger = get_logger(__name__)


class Schema:
    """Schema for validating dictionaries."""

    def __init__(self, schema: Dict[str, Any], strict: bool = False):
        """
        Initialize schema.

        Args:
            schema: Dictionary defining expected structure
            strict: If True, reject extra keys not in schema
        """
        self.schema = schema
        self.strict = strict

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate data against schema."""
        if not isinstance(data, dict):
            raise ValidationError(
                f"Expected dict, got {type(data)}",
                details={'actual_type': str(type(data))}
            )

        validated = {}
        errors = []

        # Check required fields
        for key, spec in self.schema.items():
            if key not in data:
                if isinstance(spec, dict) and not spec.get('required', True):
                    # Optional field, use default if provided
                    if 'default' in spec:
                        validated[key] = spec['default']
                    continue
                else:
                    errors.append(f"Missing required field: {key}")
                    continue

            # Validate field
            try:
                validated[key] = self._validate_field(key, data[key], spec)
            except ValidationError as e:
                errors.append(f"Field '{key}': {e.message}")

        # Check for extra fields in strict mode
        if self.strict:
            extra_keys = set(data.keys()) - set(self.schema.keys())
            if extra_keys:
                errors.append(f"Unexpected fields: {sorted(extra_keys)}")
        else:
            # Include extra fields
            for key in data:
                if key not in validated:
                    validated[key] = data[key]

        if errors:
            raise ValidationError(
                "Schema validation failed",
                details={'errors': errors}
            )

        return validated

    def _validate_field(self, key: str, value: Any, spec: Any) -> Any:
        """Validate a single field."""
        # If spec is a type, check type
        if isinstance(spec, type):
            if not isinstance(value, spec):
                raise ValidationError(
                    f"Expected {spec}, got {type(value)}",
                    details={'expected': str(spec), 'actual': str(type(value))}
                )
            return value

        # If spec is a dict with validation rules
        if isinstance(spec, dict):
            expected_type = spec.get('type')
            if expected_type and not isinstance(value, expected_type):
                raise ValidationError(
                    f"Expected {expected_type}, got {type(value)}",
                    details={'expected': str(expected_type), 'actual': str(type(value))}
                )

            # Apply validators
            if 'validator' in spec:
                validator = spec['validator']
                value = validator.validate(value)

            # Check choices
            if 'choices' in spec and value not in spec['choices']:
                raise ValidationError(
                    f"Must be one of {spec['choices']}, got {value}",
                    details={'allowed': spec['choices'], 'actual': value}
                )

            return value

        return value


def _is_font_key_list(value: Any) -> bool:
    return all(
        isinstance(entry, (list, tuple))
        and len(entry) == 2
        and all(isinstance(part, str) for part in entry)
        for entry in value
    )


LOGGING_SCHEMA = Schema({
    'log_level': {
        'type': str,
        'required': False,
        'default': 'WARNING',
        'validator': ChoiceValidator(
            ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], name='log_level'
        )
    },
    'log_dir': {'type': str, 'required': False, 'default': 'logs'},
    'enable_file': {'type': bool, 'required': False, 'default': False},
    'enable_structured': {'type': bool, 'required': False, 'default': False},
})

CHAIN_SCHEMA = Schema({
    'department_limit': {
        'type': (int, float),
        'required': False,
        'default': 1000,
        'validator': RangeValidator(min_value=0, name='department_limit')
    },
    'finance_limit': {
        'type': (int, float),
        'required': False,
        'default': 5000,
        'validator': RangeValidator(min_value=0, name='finance_limit')
    },
}, strict=True)

FACTORY_SCHEMA = Schema({
    'log_file': {'type': str, 'required': False, 'default': 'logs.txt'},
}, strict=True)

FLYWEIGHT_SCHEMA = Schema({
    'preload': {
        'type': (list, tuple),
        'required': False,
        'validator': CustomValidator(
            _is_font_key_list,
            "every entry must be a [family, style] pair of strings",
            name='preload'
        )
    },
}, strict=True)

PROXY_SCHEMA = Schema({
    'cache_capacity': {
        'type': int,
        'required': False,
        'validator': RangeValidator(min_value=1, name='cache_capacity')
    },
}, strict=True)

# Section name -> schema, registered by ConfigManager on construction.
CATALOGUE_SCHEMAS: Dict[str, Schema] = {
    'logging': LOGGING_SCHEMA,
    'chain': CHAIN_SCHEMA,
    'factory': FACTORY_SCHEMA,
    'flyweight': FLYWEIGHT_SCHEMA,
    'proxy': PROXY_SCHEMA,
}
