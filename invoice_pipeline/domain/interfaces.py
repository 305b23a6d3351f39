"""
Capability interfaces for the invoice pipeline.

Each interface is a Protocol: any class with matching methods satisfies it
(structural subtyping), so concrete strategies never inherit from these.
Consumers such as InvoiceProcessingService depend only on the types below.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Discount(Protocol):
    """Produces the amount to charge from a base amount. Must be pure."""

    def apply_discount(self, amount: float) -> float: ...


@runtime_checkable
class Payment(Protocol):
    """Executes (reports) a payment for a non-negative amount."""

    def pay(self, amount: float) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """Delivers a message over some channel."""

    def send(self, message: str) -> None: ...


@runtime_checkable
class Printable(Protocol):
    def print(self) -> None: ...


@runtime_checkable
class EmailSendable(Protocol):
    def send_email(self) -> None: ...
