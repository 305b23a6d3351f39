"""
Payment methods.

Simulated: a payment is reported on the console, nothing is charged.
All methods share one contract, so any of them can be handed to
InvoiceProcessingService.process_invoice().
"""

import logging
from typing import TextIO

logger = logging.getLogger(__name__)


class CreditCardPayment:
    """Pay by credit card"""

    method_name = "Credit Card"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def pay(self, amount: float) -> None:
        print(f"Paid {amount} using {self.method_name}.", file=self.stream)
        logger.info("Payment executed", extra={"payment_method": self.method_name, "amount": amount})


class UPIPayment:
    """Pay through UPI (Unified Payments Interface)"""

    method_name = "UPI"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def pay(self, amount: float) -> None:
        print(f"Paid {amount} using {self.method_name}.", file=self.stream)
        logger.info("Payment executed", extra={"payment_method": self.method_name, "amount": amount})
