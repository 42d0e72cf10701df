"""
State pattern: a TCP connection whose behaviour depends on its current state.

Requests that make no sense in the current state (sending on a closed
connection, opening an open one) leave the state unchanged. By default they
are reported as a diagnostic message and a warning; a connection created with
``strict=True`` raises :class:`IllegalTransitionError` instead.
"""
from abc import ABC, abstractmethod
from typing import List, Tuple
from utils.logging_config import get_logger
from utils.exceptions import IllegalTransitionError

logger = get_logger(__name__)


class TCPState(ABC):
    """A state of a TCP connection; every request returns a message."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def open(self, connection: 'TCPConnection') -> str:
        pass

    @abstractmethod
    def close(self, connection: 'TCPConnection') -> str:
        pass

    @abstractmethod
    def send(self, connection: 'TCPConnection', data: str) -> str:
        pass

    @abstractmethod
    def acknowledge(self, connection: 'TCPConnection') -> str:
        pass


class ClosedState(TCPState):

    def open(self, connection: 'TCPConnection') -> str:
        connection.set_state(EstablishedState())
        return "Opening the connection..."

    def close(self, connection: 'TCPConnection') -> str:
        return connection.reject("close", "Connection is already closed.")

    def send(self, connection: 'TCPConnection', data: str) -> str:
        return connection.reject("send", "Cannot send data. Connection is closed.")

    def acknowledge(self, connection: 'TCPConnection') -> str:
        return connection.reject("acknowledge", "Cannot acknowledge. Connection is closed.")


class EstablishedState(TCPState):

    def open(self, connection: 'TCPConnection') -> str:
        return connection.reject("open", "Connection is already open.")

    def close(self, connection: 'TCPConnection') -> str:
        connection.set_state(ClosedState())
        return "Closing the connection..."

    def send(self, connection: 'TCPConnection', data: str) -> str:
        connection.bytes_sent += len(data.encode('utf-8'))
        return f"Sending data: {data}"

    def acknowledge(self, connection: 'TCPConnection') -> str:
        return connection.reject(
            "acknowledge", "No pending acknowledgment. Nothing to acknowledge."
        )


class TCPConnection:
    """Context that delegates every request to its current state."""

    def __init__(self, strict: bool = False):
        self._state: TCPState = ClosedState()
        self.strict = strict
        self.transitions: List[Tuple[str, str]] = []
        self.bytes_sent = 0
        self.logger = get_logger(self.__class__.__name__)

    @property
    def state(self) -> TCPState:
        return self._state

    @property
    def state_name(self) -> str:
        return self._state.name

    def set_state(self, state: TCPState):
        """Switch to a new state and record the transition."""
        self.logger.info(f"Connection state transition: {self._state.name} -> {state.name}")
        self.transitions.append((self._state.name, state.name))
        self._state = state

    def reject(self, request: str, message: str) -> str:
        """Report a request that is not allowed in the current state."""
        if self.strict:
            raise IllegalTransitionError(
                message,
                details={'state': self._state.name, 'request': request}
            )
        self.logger.warning(f"{request} ignored in {self._state.name}: {message}")
        return message

    def open(self) -> str:
        return self._state.open(self)

    def close(self) -> str:
        return self._state.close(self)

    def send(self, data: str) -> str:
        return self._state.send(self, data)

    def acknowledge(self) -> str:
        return self._state.acknowledge(self)


def main():
    """Open, send, close, then try to send on the closed connection."""
    connection = TCPConnection()

    print(connection.open())
    print(connection.send("Hello, server!"))
    print(connection.close())
    print(connection.send("This data won't be sent."))

    for source, target in connection.transitions:
        print(f"Connection state transition: {source} -> {target}")


if __name__ == "__main__":
    main()
