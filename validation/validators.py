"""
Input validation utilities.
"""
from typing import Any, Callable, List, Optional, Tuple, Union
from utils.logging_config import get_logger
from utils.exceptions import ValidationError

logger = get_logger(__name__)


class Validator:
    """Base validator class."""

    def __init__(self, name: str = "value"):
        self.name = name

    def validate(self, value: Any) -> Any:
        """Validate and return the value."""
        return value

    def __call__(self, value: Any) -> Any:
        """Allow validator to be called as a function."""
        return self.validate(value)


class TypeValidator(Validator):
    """Validates value type."""

    def __init__(self, expected_type: Union[type, Tuple[type, ...]], name: str = "value"):
        super().__init__(name)
        self.expected_type = expected_type

    def validate(self, value: Any) -> Any:
        """Validate type."""
        if not isinstance(value, self.expected_type):
            raise ValidationError(
                f"{self.name} must be of type {self.expected_type}, got {type(value)}",
                details={'expected': str(self.expected_type), 'actual': str(type(value))}
            )
        return value


class RangeValidator(Validator):
    """Validates numeric value is within range."""

    def __init__(
        self,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
        inclusive: bool = True,
        name: str = "value"
    ):
        super().__init__(name)
        self.min_value = min_value
        self.max_value = max_value
        self.inclusive = inclusive

    def validate(self, value: Union[int, float]) -> Union[int, float]:
        """Validate range."""
        if self.min_value is not None:
            if self.inclusive and value < self.min_value:
                raise ValidationError(
                    f"{self.name} must be >= {self.min_value}, got {value}"
                )
            elif not self.inclusive and value <= self.min_value:
                raise ValidationError(
                    f"{self.name} must be > {self.min_value}, got {value}"
                )

        if self.max_value is not None:
            if self.inclusive and value > self.max_value:
                raise ValidationError(
                    f"{self.name} must be <= {self.max_value}, got {value}"
                )
            elif not self.inclusive and value >= self.max_value:
                raise ValidationError(
                    f"{self.name} must be < {self.max_value}, got {value}"
                )

        return value


class ChoiceValidator(Validator):
    """Validates value is in allowed choices."""

    def __init__(self, choices: List[Any], name: str = "value"):
        super().__init__(name)
        self.choices = choices

    def validate(self, value: Any) -> Any:
        """Validate choice."""
        if value not in self.choices:
            raise ValidationError(
                f"{self.name} must be one of {self.choices}, got {value}",
                details={'allowed': self.choices, 'actual': value}
            )
        return value


class CustomValidator(Validator):
    """Validator using custom function."""

    def __init__(self, func: Callable[[Any], bool], error_message: str, name: str = "value"):
        super().__init__(name)
        self.func = func
        self.error_message = error_message

    def validate(self, value: Any) -> Any:
        """Validate using custom function."""
        if not self.func(value):
            raise ValidationError(f"{self.name}: {self.error_message}")
        return value


def validate_positive(value: Union[int, float], name: str = "value") -> Union[int, float]:
    """Validate value is positive."""
    return RangeValidator(min_value=0, inclusive=False, name=name).validate(value)


def validate_non_negative(value: Union[int, float], name: str = "value") -> Union[int, float]:
    """Validate value is non-negative."""
    return RangeValidator(min_value=0, inclusive=True, name=name).validate(value)
