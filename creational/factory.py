"""
Factory pattern: message loggers created from a closed set of logger types.

Every :class:`LoggerType` member maps to exactly one registered constructor.
The mapping is checked when this module is imported, so a new member without
a constructor fails immediately rather than at the first ``create`` call.
"""
import sys
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TextIO
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError

logger = get_logger(__name__)


class Factory(ABC):
    """Abstract factory base class keyed by a tag."""

    _registry: Dict[Any, Callable] = {}

    @classmethod
    def register(cls, key: Any, implementation: Callable):
        """Register an implementation under a key."""
        cls._registry[key] = implementation
        logger.debug(f"Registered {key} in {cls.__name__}")

    @classmethod
    def create(cls, key: Any, **kwargs) -> Any:
        """Create an instance by key."""
        if key not in cls._registry:
            raise ConfigurationError(
                f"Unknown type: {key}",
                details={'available_types': [str(k) for k in cls._registry]}
            )

        implementation = cls._registry[key]
        return implementation(**kwargs)

    @classmethod
    def list_available(cls) -> list:
        """List all registered keys."""
        return list(cls._registry.keys())


class LoggerType(Enum):
    CONSOLE = 'console'
    FILE = 'file'


class MessageLogger(ABC):
    """Something that records one message at a time."""

    @abstractmethod
    def log(self, message: str):
        pass


class MessageLoggerFactory(Factory):
    """Factory for creating message loggers."""
    _registry: Dict[Any, Callable] = {}

    @classmethod
    def create(cls, key: Any, **kwargs) -> MessageLogger:
        if isinstance(key, str):
            try:
                key = LoggerType(key)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid logger type: {key}",
                    details={'available_types': [t.value for t in LoggerType]}
                ) from None
        return super().create(key, **kwargs)

    @classmethod
    def check_exhaustive(cls):
        """Fail if some LoggerType has no registered constructor."""
        missing = [t.value for t in LoggerType if t not in cls._registry]
        if missing:
            raise ConfigurationError(
                "Logger types without a constructor",
                details={'missing': missing}
            )


def register_logger(logger_type: LoggerType):
    """Decorator for registering logger constructors."""
    def decorator(cls):
        MessageLoggerFactory.register(logger_type, cls)
        return cls
    return decorator


@register_logger(LoggerType.CONSOLE)
class ConsoleLogger(MessageLogger):

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def log(self, message: str):
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(f"[Console] {message}\n")


@register_logger(LoggerType.FILE)
class FileLogger(MessageLogger):
    """Appends lines to a UTF-8 text file, creating it when absent."""

    def __init__(self, file_path: Optional[str] = None):
        if not file_path:
            raise ConfigurationError(
                "File path is missing for FileLogger.",
                details={'logger_type': LoggerType.FILE.value}
            )
        self.file_path = Path(file_path)

    def log(self, message: str):
        with open(self.file_path, 'a', encoding='utf-8') as f:
            f.write(f"[File] {message}\n")


MessageLoggerFactory.check_exhaustive()


def main(log_file: str = "logs.txt"):
    console_logger = MessageLoggerFactory.create(LoggerType.CONSOLE)
    console_logger.log("This is a console log.")

    file_logger = MessageLoggerFactory.create(LoggerType.FILE, file_path=log_file)
    file_logger.log("This is a file log.")
    print(f"Appended a line to {log_file}")


if __name__ == "__main__":
    main()
