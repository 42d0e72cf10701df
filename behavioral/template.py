"""
Template pattern without inheritance: the brewing skeleton is a plain
function and beverages only supply the steps that differ.
"""
from abc import ABC, abstractmethod
from typing import List


class BrewingSteps(ABC):
    """The customizable steps of making a hot beverage."""

    @abstractmethod
    def brew(self) -> str:
        pass

    @abstractmethod
    def add_condiments(self) -> str:
        pass


class TeaSteps(BrewingSteps):

    def brew(self) -> str:
        return "Steeping the tea leaves..."

    def add_condiments(self) -> str:
        return "Adding lemon..."


class CoffeeSteps(BrewingSteps):

    def brew(self) -> str:
        return "Dripping coffee through filter..."

    def add_condiments(self) -> str:
        return "Adding sugar and milk..."


def boil_water() -> str:
    return "Boiling water..."


def pour_in_cup() -> str:
    return "Pouring into cup..."


def make_beverage(steps: BrewingSteps) -> List[str]:
    """Run the fixed recipe with the given steps; returns one line per step."""
    return [
        boil_water(),
        steps.brew(),
        pour_in_cup(),
        steps.add_condiments(),
    ]


def main():
    for label, steps in (("tea", TeaSteps()), ("coffee", CoffeeSteps())):
        print(f"Making {label}:")
        print("Making beverage:")
        for line in make_beverage(steps):
            print(line)
        print()


if __name__ == "__main__":
    main()
