"""
Builder pattern for assembling computers step by step.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional
from utils.logging_config import get_logger

logger = get_logger(__name__)


class Builder(ABC):
    """Abstract builder base class."""

    @abstractmethod
    def reset(self):
        """Reset the builder."""
        pass

    @abstractmethod
    def build(self) -> Any:
        """Build and return the final product."""
        pass


@dataclass
class Computer:
    processor: Optional[str] = None
    ram: Optional[str] = None
    hard_drive: Optional[str] = None
    graphics_card: Optional[str] = None


class ComputerBuilder(Builder):
    """Fluent builder; every build starts from a blank computer."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)
        self.reset()

    def reset(self):
        """Reset the builder state."""
        self._computer = Computer()

    def set_processor(self, processor: str) -> 'ComputerBuilder':
        self._computer.processor = processor
        return self

    def set_ram(self, ram: str) -> 'ComputerBuilder':
        self._computer.ram = ram
        return self

    def set_hard_drive(self, hard_drive: str) -> 'ComputerBuilder':
        self._computer.hard_drive = hard_drive
        return self

    def set_graphics_card(self, graphics_card: str) -> 'ComputerBuilder':
        self._computer.graphics_card = graphics_card
        return self

    def build(self) -> Computer:
        """Return the assembled computer and start over with a blank one."""
        computer = self._computer
        self.reset()
        self.logger.debug(f"Built {computer}")
        return computer


class ComputerDirector:
    """Knows the build recipes for standard configurations."""

    def __init__(self, builder: Optional[ComputerBuilder] = None):
        self.builder = builder or ComputerBuilder()

    def build_office_pc(self) -> Computer:
        return (
            self.builder
            .set_processor("Intel Core i5")
            .set_ram("16GB")
            .set_hard_drive("512GB SSD")
            .build()
        )

    def build_gaming_pc(self) -> Computer:
        return (
            self.builder
            .set_processor("AMD Ryzen 7")
            .set_ram("32GB")
            .set_hard_drive("1TB SSD")
            .set_graphics_card("Nvidia RTX 3070")
            .build()
        )


def main():
    builder = ComputerBuilder()
    custom_pc = (
        builder
        .set_processor("AMD Ryzen 7")
        .set_ram("32GB")
        .set_hard_drive("1TB SSD")
        .set_graphics_card("Nvidia RTX 3070")
        .build()
    )
    print(custom_pc)

    director = ComputerDirector(builder)
    print(director.build_office_pc())


if __name__ == "__main__":
    main()
