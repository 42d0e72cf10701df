"""
Facade pattern: one entry point in front of several payment gateways.

Unknown payment methods are reported in the returned message rather than
raised, since choosing a method is a runtime decision of the caller.
"""
from typing import Dict, List, Union
from utils.logging_config import get_logger

logger = get_logger(__name__)

Amount = Union[int, float]


class PayPalGateway:

    def make_payment(self, amount: Amount) -> str:
        return f"Payment made using PayPal: ${amount}"


class StripeGateway:

    def make_payment(self, amount: Amount) -> str:
        return f"Payment made using Stripe: ${amount}"


class PaymentGatewayFacade:

    def __init__(self):
        self._gateways: Dict[str, Union[PayPalGateway, StripeGateway]] = {
            'paypal': PayPalGateway(),
            'stripe': StripeGateway(),
        }
        self.logger = get_logger(self.__class__.__name__)

    @property
    def methods(self) -> List[str]:
        return list(self._gateways)

    def process_payment(self, method: str, amount: Amount) -> str:
        gateway = self._gateways.get(method)
        if gateway is None:
            self.logger.warning(f"Invalid payment method requested: {method}")
            return f"Invalid payment method: {method}"

        self.logger.info(f"Processing {amount} via {method}")
        return gateway.make_payment(amount)


def main():
    payment_gateway = PaymentGatewayFacade()
    print(payment_gateway.process_payment("paypal", 100))
    print(payment_gateway.process_payment("stripe", 150))


if __name__ == "__main__":
    main()
