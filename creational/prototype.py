"""
Prototype pattern: new objects made by cloning configured templates.

The registry of templates is an ordinary object the caller creates and
passes around; nothing is cached at module level.
"""
import copy
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from utils.logging_config import get_logger
from utils.exceptions import PrototypeNotFoundError

logger = get_logger(__name__)


class Prototype(ABC):

    @abstractmethod
    def clone(self) -> 'Prototype':
        pass


class CircleShape(Prototype):

    def __init__(self, radius: float):
        self.radius = radius

    def clone(self) -> 'CircleShape':
        return CircleShape(self.radius)

    def draw(self) -> str:
        return f"Drawing Circle with radius: {self.radius}"


class RectangleShape(Prototype):

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def clone(self) -> 'RectangleShape':
        return RectangleShape(self.width, self.height)

    def draw(self) -> str:
        return f"Drawing Rectangle with width: {self.width} and height: {self.height}"


class ContractDocument(Prototype):
    """A document template that is cloned and then customised."""

    def __init__(self, content: str = "Standard Contract Template", clauses: Optional[List[str]] = None):
        self.content = content
        self.clauses = list(clauses or [])

    def clone(self) -> 'ContractDocument':
        return copy.deepcopy(self)

    def render(self) -> str:
        return self.content


class PrototypeRegistry:
    """Named templates; every lookup hands out a fresh clone."""

    def __init__(self):
        self._prototypes: Dict[str, Prototype] = {}
        self.logger = get_logger(self.__class__.__name__)

    def register(self, name: str, prototype: Prototype):
        self._prototypes[name] = prototype
        self.logger.debug(f"Registered prototype {name}")

    def names(self) -> List[str]:
        return list(self._prototypes)

    def load_defaults(self) -> 'PrototypeRegistry':
        self.register("Circle", CircleShape(10))
        self.register("Rectangle", RectangleShape(10, 5))
        return self

    def get(self, name: str) -> Prototype:
        if name not in self._prototypes:
            raise PrototypeNotFoundError(
                f"No prototype registered as '{name}'",
                details={'available': self.names()}
            )
        return self._prototypes[name].clone()


def main():
    registry = PrototypeRegistry().load_defaults()
    print(registry.get("Circle").draw())
    print(registry.get("Rectangle").draw())

    standard_contract = ContractDocument()
    customized_contract = standard_contract.clone()
    customized_contract.content = "Customized Contract Content"
    print(customized_contract.render())
    print(standard_contract.render())


if __name__ == "__main__":
    main()
