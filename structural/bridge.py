"""
Bridge pattern: remote controls (abstraction) driving devices (implementation).
"""
from abc import ABC, abstractmethod
from utils.logging_config import get_logger

logger = get_logger(__name__)

MIN_VOLUME = 0
MAX_VOLUME = 100
VOLUME_STEP = 10


class Device(ABC):
    """Implementation side: primitive operations only."""

    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def enable(self):
        pass

    @abstractmethod
    def disable(self):
        pass

    @abstractmethod
    def get_volume(self) -> int:
        pass

    @abstractmethod
    def set_volume(self, volume: int):
        pass


class BaseDevice(Device):
    """Device state shared by the concrete devices; volume is clamped to 0-100."""

    initial_volume = 50

    def __init__(self):
        self._enabled = False
        self._volume = self.initial_volume

    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self):
        self._enabled = True

    def disable(self):
        self._enabled = False

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, volume: int):
        clamped = max(MIN_VOLUME, min(MAX_VOLUME, volume))
        if clamped != volume:
            logger.debug(f"{self.__class__.__name__} volume {volume} clamped to {clamped}")
        self._volume = clamped


class TV(BaseDevice):
    initial_volume = 50


class Radio(BaseDevice):
    initial_volume = 30


class RemoteControl:
    """Abstraction side: higher-level operations built on a Device."""

    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self) -> str:
        if self.device.is_enabled():
            self.device.disable()
            return "RemoteControl: Turning off the device."
        self.device.enable()
        return "RemoteControl: Turning on the device."

    def volume_up(self) -> str:
        self.device.set_volume(self.device.get_volume() + VOLUME_STEP)
        return f"RemoteControl: Increasing volume to {self.device.get_volume()}."

    def volume_down(self) -> str:
        self.device.set_volume(self.device.get_volume() - VOLUME_STEP)
        return f"RemoteControl: Decreasing volume to {self.device.get_volume()}."


class AdvancedRemoteControl(RemoteControl):

    def mute(self) -> str:
        self.device.set_volume(MIN_VOLUME)
        return "AdvancedRemoteControl: Muting the device."


def exercise_remote(remote: RemoteControl):
    print(remote.toggle_power())
    print(remote.volume_up())
    print(remote.volume_down())
    print(remote.volume_down())


def main():
    print("Client: Testing TV remote control...")
    exercise_remote(RemoteControl(TV()))

    print()

    print("Client: Testing Radio remote control...")
    radio_remote = AdvancedRemoteControl(Radio())
    exercise_remote(radio_remote)
    print(radio_remote.mute())


if __name__ == "__main__":
    main()
