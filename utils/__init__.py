"""
Utility modules for the pattern catalogue.
"""
from .logging_config import get_logger, LoggerFactory, LogContext, StructuredFormatter
from .exceptions import *
from .error_handlers import ErrorContext

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'StructuredFormatter',
    'ErrorContext',
    'PatternCatalogueError',
    'ConfigurationError',
    'ValidationError',
    'PatternError',
    'IllegalTransitionError',
    'PrototypeNotFoundError',
    'DemoError',
]
