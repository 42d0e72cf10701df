"""
Command pattern: a waiter queueing dish orders for the chef.
"""
from abc import ABC, abstractmethod
from typing import Any, List
from utils.logging_config import get_logger

logger = get_logger(__name__)


class Command(ABC):
    """A request wrapped as an object."""

    @abstractmethod
    def execute(self) -> Any:
        """Carry out the request."""
        pass


class Chef:
    """Receiver: knows how to actually prepare dishes."""

    def __init__(self):
        self.prepared: List[str] = []

    def prepare_dish(self, dish: str) -> str:
        self.prepared.append(dish)
        return f"Chef: Preparing {dish}..."


class PrepareDishCommand(Command):

    def __init__(self, chef: Chef, dish: str):
        self.chef = chef
        self.dish = dish

    def execute(self) -> str:
        return self.chef.prepare_dish(self.dish)


class Waiter:
    """Invoker: collects orders and hands them to the kitchen in one go."""

    def __init__(self):
        self._orders: List[Command] = []
        self.logger = get_logger(self.__class__.__name__)

    @property
    def pending(self) -> int:
        return len(self._orders)

    def take_order(self, command: Command):
        self._orders.append(command)
        self.logger.debug(f"Queued order #{len(self._orders)}")

    def place_orders(self) -> List[Any]:
        """Execute queued orders first-in first-out and empty the queue."""
        orders, self._orders = self._orders, []
        self.logger.info(f"Placing {len(orders)} orders")
        return [order.execute() for order in orders]


def main():
    chef = Chef()
    waiter = Waiter()

    for dish in ("Pizza", "Pasta", "Salad"):
        waiter.take_order(PrepareDishCommand(chef, dish))

    print("Waiter: Placing orders to the kitchen...")
    for result in waiter.place_orders():
        print(result)


if __name__ == "__main__":
    main()
