"""
Decorator pattern: condiments wrapping beverages to change description and cost.
"""
from abc import ABC, abstractmethod
from decimal import Decimal


class Beverage(ABC):

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def cost(self) -> Decimal:
        pass


class Espresso(Beverage):

    @property
    def description(self) -> str:
        return "Espresso"

    def cost(self) -> Decimal:
        return Decimal("1.99")


class HouseBlend(Beverage):

    @property
    def description(self) -> str:
        return "House Blend Coffee"

    def cost(self) -> Decimal:
        return Decimal("0.89")


class CondimentDecorator(Beverage):
    """Wraps a beverage and adds a named extra at a fixed price."""

    name = "Condiment"
    price = Decimal("0")

    def __init__(self, beverage: Beverage):
        self.beverage = beverage

    @property
    def description(self) -> str:
        return f"{self.beverage.description}, {self.name}"

    def cost(self) -> Decimal:
        return self.beverage.cost() + self.price


class Milk(CondimentDecorator):
    name = "Milk"
    price = Decimal("0.10")


class Mocha(CondimentDecorator):
    name = "Mocha"
    price = Decimal("0.20")


def describe(beverage: Beverage) -> str:
    return f"DESCRIPTION: {beverage.description}\nCOST: ${beverage.cost()}"


def main():
    espresso = Espresso()
    print("Client: I've got an Espresso:")
    print(describe(espresso))
    print()

    print("Client: I've got a House Blend Coffee:")
    print(describe(HouseBlend()))
    print()

    mocha_espresso = Mocha(espresso)
    print("Client: Now I've got a Mocha Espresso:")
    print(describe(mocha_espresso))
    print()

    print("Client: Now I've got a Milk Mocha Espresso:")
    print(describe(Milk(mocha_espresso)))


if __name__ == "__main__":
    main()
