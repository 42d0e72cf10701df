"""
Validation utilities for the pattern catalogue.
"""
from .validators import (
    Validator,
    TypeValidator,
    RangeValidator,
    ChoiceValidator,
    CustomValidator,
    validate_positive,
    validate_non_negative
)
from .schema import (
    Schema,
    CATALOGUE_SCHEMAS
)

__all__ = [
    'Validator',
    'TypeValidator',
    'RangeValidator',
    'ChoiceValidator',
    'CustomValidator',
    'validate_positive',
    'validate_non_negative',
    'Schema',
    'CATALOGUE_SCHEMAS',
]
