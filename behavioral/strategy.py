"""
Strategy pattern for interchangeable payment methods.
"""
from abc import ABC, abstractmethod
from typing import Union
from utils.logging_config import get_logger

logger = get_logger(__name__)

Amount = Union[int, float]


class PaymentStrategy(ABC):
    """Abstract payment strategy."""

    @abstractmethod
    def pay(self, amount: Amount) -> str:
        """Pay the amount and describe what happened."""
        pass


class CreditCardStrategy(PaymentStrategy):

    def __init__(self, card_number: str, expiry_date: str, cvv: str):
        self.card_number = card_number
        self.expiry_date = expiry_date
        self.cvv = cvv

    def pay(self, amount: Amount) -> str:
        return f"CreditCardStrategy: Paying {amount} via credit card ({self.card_number})..."


class PayPalStrategy(PaymentStrategy):

    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    def pay(self, amount: Amount) -> str:
        return f"PayPalStrategy: Paying {amount} via PayPal ({self.email})..."


class PaymentContext:
    """Context that uses a payment strategy."""

    def __init__(self, strategy: PaymentStrategy):
        self._strategy = strategy
        self.logger = get_logger(self.__class__.__name__)

    @property
    def strategy(self) -> PaymentStrategy:
        """Get current strategy."""
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: PaymentStrategy):
        """Set new strategy."""
        self.logger.info(f"Switching strategy to {strategy.__class__.__name__}")
        self._strategy = strategy

    def make_payment(self, amount: Amount) -> str:
        """Execute the current strategy."""
        self.logger.debug(f"Initiating payment of {amount}")
        return self._strategy.pay(amount)


def main():
    context = PaymentContext(CreditCardStrategy("1234 5678 9012 3456", "12/25", "123"))
    print("Client: Payment strategy is set to Credit Card.")
    print("PaymentContext: Initiating payment process...")
    print(context.make_payment(100))

    print()

    print("Client: Changing payment strategy to PayPal.")
    context.strategy = PayPalStrategy("example@example.com", "password")
    print("PaymentContext: Initiating payment process...")
    print(context.make_payment(200))


if __name__ == "__main__":
    main()
