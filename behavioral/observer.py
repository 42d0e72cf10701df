"""
Observer pattern: a news agency pushing headlines to its subscribers.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Tuple
from utils.logging_config import get_logger

logger = get_logger(__name__)


class Observer(ABC):
    """Abstract observer base class."""

    @abstractmethod
    def update(self, payload: Any):
        """Called by the subject with its current payload."""
        pass


class Subject:
    """
    Subject that notifies observers of changes.

    Observers are notified synchronously in attachment order. An exception
    raised by one observer is logged and does not stop delivery to the rest.
    """

    def __init__(self, payload: Any = None):
        self._observers: List[Observer] = []
        self._payload = payload
        self.logger = get_logger(self.__class__.__name__)

    @property
    def observers(self) -> Tuple[Observer, ...]:
        """Registered observers in notification order."""
        return tuple(self._observers)

    @property
    def payload(self) -> Any:
        return self._payload

    def attach(self, observer: Observer):
        """Attach an observer; attaching twice has no effect."""
        if observer not in self._observers:
            self._observers.append(observer)
            self.logger.debug(f"Attached observer {observer.__class__.__name__}")

    def detach(self, observer: Observer):
        """Detach an observer; detaching a non-member is a no-op."""
        if observer in self._observers:
            self._observers.remove(observer)
            self.logger.debug(f"Detached observer {observer.__class__.__name__}")

    def set_payload(self, value: Any) -> int:
        """Store a new payload and notify every observer of it."""
        self._payload = value
        return self.notify()

    def notify(self) -> int:
        """
        Send the current payload to all observers.

        Returns:
            Number of observers that handled the update without raising
        """
        self.logger.debug(f"Notifying {len(self._observers)} observers")

        delivered = 0
        for observer in list(self._observers):
            try:
                observer.update(self._payload)
                delivered += 1
            except Exception as e:
                self.logger.error(
                    f"Error notifying observer {observer.__class__.__name__}: {e}",
                    exc_info=True
                )
        return delivered


class NewsAgency(Subject):
    """Subject whose payload is the latest headline."""

    def __init__(self):
        super().__init__(payload="")

    @property
    def news(self) -> str:
        return self._payload

    def add_news(self, news: str) -> int:
        """Publish a headline to every subscriber."""
        self.logger.info(f"News added: {news}")
        return self.set_payload(news)


class Subscriber(Observer):
    """Observer that records every headline and echoes it to an output callable."""

    def __init__(self, name: str, output: Optional[Callable[[str], Any]] = print):
        self.name = name
        self.output = output
        self.received: List[str] = []

    def update(self, payload: Any):
        self.received.append(payload)
        if self.output is not None:
            self.output(f'{self.name}: Received news - "{payload}"')


class CallbackObserver(Observer):
    """Observer that calls a callback function."""

    def __init__(self, callback: Callable[[Any], Any]):
        self.callback = callback

    def update(self, payload: Any):
        """Call the callback function."""
        self.callback(payload)


def main():
    """Attach two subscribers, publish, detach one, publish again."""
    agency = NewsAgency()
    subscriber_a = Subscriber("SubscriberA")
    subscriber_b = Subscriber("SubscriberB")

    for subscriber in (subscriber_a, subscriber_b):
        agency.attach(subscriber)
        print("NewsAgency: Subscriber attached.")

    for headline in (
        "Breaking news: COVID-19 vaccine approved!",
        "Weather forecast: Sunny with a chance of rain.",
    ):
        print("NewsAgency: News added.")
        print("NewsAgency: Notifying subscribers.")
        agency.add_news(headline)

    agency.detach(subscriber_b)
    print("NewsAgency: Subscriber detached.")

    print("NewsAgency: News added.")
    print("NewsAgency: Notifying subscribers.")
    agency.add_news("Traffic update: Heavy traffic on the highways.")


if __name__ == "__main__":
    main()
