"""
Abstract Factory pattern: families of GUI widgets per platform.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Type
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError

logger = get_logger(__name__)


class Button(ABC):

    @abstractmethod
    def render(self) -> str:
        pass


class Checkbox(ABC):

    @abstractmethod
    def render(self) -> str:
        pass


class WindowsButton(Button):

    def render(self) -> str:
        return "Rendering a Windows button"


class MacOSButton(Button):

    def render(self) -> str:
        return "Rendering a macOS button"


class WindowsCheckbox(Checkbox):

    def render(self) -> str:
        return "Rendering a Windows checkbox"


class MacOSCheckbox(Checkbox):

    def render(self) -> str:
        return "Rendering a macOS checkbox"


class GUIFactory(ABC):
    """Creates a matching set of widgets; products from one factory belong together."""

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass


class WindowsFactory(GUIFactory):

    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacOSFactory(GUIFactory):

    def create_button(self) -> Button:
        return MacOSButton()

    def create_checkbox(self) -> Checkbox:
        return MacOSCheckbox()


class Platform(Enum):
    WINDOWS = 'windows'
    MACOS = 'macos'


_FACTORIES: Dict[Platform, Type[GUIFactory]] = {
    Platform.WINDOWS: WindowsFactory,
    Platform.MACOS: MacOSFactory,
}


def factory_for(platform) -> GUIFactory:
    """Return the widget factory for a platform (enum member or its value)."""
    try:
        platform = Platform(platform)
    except ValueError:
        raise ConfigurationError(
            f"Unknown platform: {platform}",
            details={'available_platforms': [p.value for p in Platform]}
        ) from None
    logger.debug(f"Selected widget factory for {platform.value}")
    return _FACTORIES[platform]()


def render_widgets(factory: GUIFactory) -> List[str]:
    """Client code: works only through the abstract factory and products."""
    button = factory.create_button()
    checkbox = factory.create_checkbox()
    return [button.render(), checkbox.render()]


def main():
    print("Client: Testing client code with the Windows factory...")
    for line in render_widgets(factory_for(Platform.WINDOWS)):
        print(line)

    print()

    print("Client: Testing client code with the MacOS factory...")
    for line in render_widgets(factory_for(Platform.MACOS)):
        print(line)


if __name__ == "__main__":
    main()
