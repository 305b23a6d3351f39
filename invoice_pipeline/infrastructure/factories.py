"""
Factory for creating strategy instances from configuration names.

Centralizes the name -> implementation mapping so the composition root can
switch discount, payment and notifier without code changes. Adding a new
variant means adding it to the matching registry below.
"""

import logging
from typing import Dict, TextIO, Type

from invoice_pipeline.config import Settings
from invoice_pipeline.domain.discounts import LoyaltyDiscount, NoDiscount, SeasonalDiscount
from invoice_pipeline.domain.exceptions import UnknownStrategyError
from invoice_pipeline.domain.interfaces import Discount, Notifier, Payment
from invoice_pipeline.infrastructure.notifiers import EmailNotifier, SMSNotifier
from invoice_pipeline.infrastructure.payments import CreditCardPayment, UPIPayment
from invoice_pipeline.services.processing import InvoiceProcessingService

logger = logging.getLogger(__name__)


DISCOUNTS: Dict[str, Type[Discount]] = {
    "none": NoDiscount,
    "seasonal": SeasonalDiscount,
    "loyalty": LoyaltyDiscount,
}

PAYMENTS: Dict[str, Type[Payment]] = {
    "credit_card": CreditCardPayment,
    "upi": UPIPayment,
}

NOTIFIERS: Dict[str, Type[Notifier]] = {
    "email": EmailNotifier,
    "sms": SMSNotifier,
}


def _lookup(registry: Dict[str, type], kind: str, name: str) -> type:
    key = name.strip().lower()
    if key not in registry:
        raise UnknownStrategyError(kind, name, sorted(registry))
    return registry[key]


def create_discount(name: str) -> Discount:
    """
    Create a discount strategy.

    Raises:
        UnknownStrategyError: If no discount is registered under name
    """
    return _lookup(DISCOUNTS, "discount", name)()


def create_payment(name: str, stream: TextIO | None = None) -> Payment:
    """
    Create a payment method.

    Raises:
        UnknownStrategyError: If no payment method is registered under name
    """
    return _lookup(PAYMENTS, "payment", name)(stream=stream)


def create_notifier(name: str, stream: TextIO | None = None) -> Notifier:
    """
    Create a notifier.

    Raises:
        UnknownStrategyError: If no notifier is registered under name
    """
    return _lookup(NOTIFIERS, "notifier", name)(stream=stream)


def build_service(settings: Settings, stream: TextIO | None = None) -> InvoiceProcessingService:
    """Wire an InvoiceProcessingService from configured strategy names"""
    logger.debug(
        "Building invoice service",
        extra={"discount": settings.discount, "notifier": settings.notifier},
    )
    return InvoiceProcessingService(
        discount=create_discount(settings.discount),
        notifier=create_notifier(settings.notifier, stream=stream),
    )
