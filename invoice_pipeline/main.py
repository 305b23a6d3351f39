"""Composition root: wires concrete strategies and runs the invoice demo"""

import logging
import sys
from typing import TextIO

from invoice_pipeline.config import Settings, settings as default_settings
from invoice_pipeline.domain.exceptions import DomainException
from invoice_pipeline.domain.models import Invoice
from invoice_pipeline.infrastructure.factories import build_service, create_payment
from invoice_pipeline.infrastructure.observability.logging import setup_logging
from invoice_pipeline.infrastructure.reporting import InvoicePrinter, InvoiceReport
from invoice_pipeline.infrastructure.repositories import InvoiceRepository


def run_demo(settings: Settings, stream: TextIO | None = None) -> None:
    """
    Run one invoice end to end.

    Flow:
    1. Resolve the configured discount, payment and notifier
    2. Save and print the invoice
    3. Process it through the service
    4. Print and email the invoice report

    Raises:
        UnknownStrategyError: Before anything is written, if a strategy name is not registered
    """
    invoice = Invoice(settings.demo_invoice_id, settings.demo_invoice_amount)

    # 1. Resolve strategies first so bad configuration produces no output
    service = build_service(settings, stream=stream)
    payment = create_payment(settings.payment_method, stream=stream)

    # 2. Save and print
    repo = InvoiceRepository(stream=stream)
    printer = InvoicePrinter(stream=stream)
    repo.save(invoice)
    printer.print(invoice)

    # 3. Discount, pay, notify
    service.process_invoice(invoice, payment)

    report = InvoiceReport(stream=stream)
    report.print()
    report.send_email()


def main(settings: Settings | None = None) -> int:
    """Console entry point; returns the process exit code"""
    if settings is None:
        settings = default_settings
    setup_logging(settings.log_level, service_name=settings.service_name)

    try:
        run_demo(settings)
    except DomainException as e:
        logging.error(f"Invoice demo failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
