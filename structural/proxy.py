"""
Proxy pattern: a caching proxy in front of a server.
"""
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import List, Optional
from utils.logging_config import get_logger
from validation.validators import validate_positive

logger = get_logger(__name__)


class Server(ABC):

    @abstractmethod
    def request(self, resource: str) -> str:
        pass


class RealServer(Server):
    """The expensive subject; records every request it actually serves."""

    def __init__(self):
        self.handled: List[str] = []

    def request(self, resource: str) -> str:
        self.handled.append(resource)
        return f"RealServer: Handling request for resource '{resource}'."


class ProxyServer(Server):
    """
    Same interface as the real server, answering repeats from an LRU cache.

    With no capacity the cache is unbounded; otherwise the least recently
    used resource is evicted when a new one would exceed it.
    """

    def __init__(self, real_server: Server, capacity: Optional[int] = None):
        self.real_server = real_server
        self.capacity = validate_positive(capacity, name='capacity') if capacity is not None else None
        self.cache: 'OrderedDict[str, str]' = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.logger = get_logger(self.__class__.__name__)

    def request(self, resource: str) -> str:
        if resource in self.cache:
            self.hits += 1
            self.cache.move_to_end(resource)
            return f"ProxyServer: Serving resource '{resource}' from cache."

        self.misses += 1
        response = self.real_server.request(resource)

        if self.capacity is not None and len(self.cache) >= self.capacity:
            evicted, _ = self.cache.popitem(last=False)
            self.logger.debug(f"Evicted '{evicted}' from proxy cache")

        self.cache[resource] = response
        return response

    def clear(self):
        """Clear the cache and its counters."""
        self.cache.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> dict:
        """Get cache statistics."""
        total = self.hits + self.misses
        hit_rate = self.hits / total if total > 0 else 0.0
        return {
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': hit_rate,
            'size': len(self.cache),
            'capacity': self.capacity
        }


def main(cache_capacity: Optional[int] = None):
    real_server = RealServer()
    proxy_server = ProxyServer(real_server, capacity=cache_capacity)

    print("Client: Sending requests to the real server:")
    print(real_server.request("/data1"))
    print(real_server.request("/data2"))

    print()
    print("Client: Sending requests to the proxy server:")
    for resource in ("/data1", "/data3", "/data1"):
        print(proxy_server.request(resource))

    print(f"ProxyServer: {proxy_server.stats()['hits']} cache hits")


if __name__ == "__main__":
    main()
