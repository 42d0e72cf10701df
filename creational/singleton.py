"""
Singleton pattern with an explicit instance registry.

Instead of a class that polices its own construction, an
:class:`InstanceRegistry` hands out one shared instance per class. The
registry is created by the caller and passed to whatever needs the shared
objects, so its lifetime (and a test's isolation) is explicit.
"""
import threading
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar
from utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


class InstanceRegistry:
    """Thread-safe map from class to its single shared instance."""

    def __init__(self):
        self._instances: Dict[type, Any] = {}
        self._lock = threading.Lock()

    def get(self, cls: Type[T], factory: Optional[Callable[[], T]] = None) -> T:
        """Return the shared instance of ``cls``, creating it on first access."""
        if cls not in self._instances:
            with self._lock:
                # Double-checked locking
                if cls not in self._instances:
                    self._instances[cls] = factory() if factory else cls()
                    logger.debug(f"Created shared instance of {cls.__name__}")

        return self._instances[cls]

    def __contains__(self, cls: type) -> bool:
        return cls in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def reset(self):
        """Forget every shared instance."""
        with self._lock:
            self._instances.clear()


class Database:
    """A resource that should exist once per registry."""

    def __init__(self):
        self.queries: List[str] = []

    def query(self, sql: str) -> str:
        self.queries.append(sql)
        return f"Querying database: {sql}"


def main():
    registry = InstanceRegistry()

    database = registry.get(Database)
    print(database.query("SELECT * FROM users"))

    database2 = registry.get(Database)
    if database is database2:
        print("The same instance of Database was returned. The Singleton pattern works!")
    else:
        print("A new instance of Database was returned. The Singleton pattern failed.")


if __name__ == "__main__":
    main()
