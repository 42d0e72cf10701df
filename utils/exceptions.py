"""
Custom exception hierarchy for the pattern catalogue.
"""
from typing import Any, Dict, Optional


class PatternCatalogueError(Exception):
    """Base exception for all pattern catalogue errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# Configuration Exceptions
class ConfigurationError(PatternCatalogueError):
    """Raised when configuration is invalid or an object cannot be constructed from it."""
    pass


class ValidationError(PatternCatalogueError):
    """Raised when a value fails validation."""
    pass


# Pattern Exceptions
class PatternError(PatternCatalogueError):
    """Base exception for errors raised by pattern participants."""
    pass


class IllegalTransitionError(PatternError):
    """Raised by a strict state machine when a request is not allowed in the current state."""
    pass


class PrototypeNotFoundError(PatternError):
    """Raised when a prototype registry has no entry for a name."""
    pass


# Catalogue Exceptions
class DemoError(PatternCatalogueError):
    """Raised when a demo cannot be found or run."""
    pass
