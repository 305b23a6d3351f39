"""Invoice processing service - discount, pay, notify"""

import time

from invoice_pipeline.domain.interfaces import Discount, Notifier, Payment
from invoice_pipeline.domain.models import Invoice, ProcessingResult
from invoice_pipeline.infrastructure.observability.logging import log_invoice_processed
from invoice_pipeline.infrastructure.observability.metrics import record_invoice_processed


class InvoiceProcessingService:
    """
    Runs invoices through a discount, a payment and a notification.

    The discount and notifier are injected once and fixed for the lifetime of
    the service; the payment method is chosen per invoice by the caller.
    """

    def __init__(self, discount: Discount, notifier: Notifier):
        self._discount = discount
        self._notifier = notifier

    @property
    def discount(self) -> Discount:
        return self._discount

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def process_invoice(self, invoice: Invoice, payment: Payment) -> ProcessingResult:
        """
        Process one invoice.

        Flow:
        1. Apply discount to the invoice amount
        2. Pay the discounted amount
        3. Notify with the invoice id and the amount paid

        Steps run in order and any exception aborts the remaining ones;
        nothing is retried or rolled back.
        """
        start_time = time.time()

        # 1. Discount (computed once, reused below)
        final_amount = self._discount.apply_discount(invoice.amount)

        # 2. Payment
        payment.pay(final_amount)

        # 3. Notification
        message = f"Invoice {invoice.id} processed. Final Amount: {final_amount}"
        self._notifier.send(message)

        # Record metrics and logs
        duration_ms = (time.time() - start_time) * 1000
        discount_name = type(self._discount).__name__
        # method_name and channel are optional labels, not part of the protocols
        payment_method = getattr(payment, "method_name", type(payment).__name__)
        channel = getattr(self._notifier, "channel", type(self._notifier).__name__)
        record_invoice_processed(discount_name, payment_method, channel, final_amount)
        log_invoice_processed(
            invoice.id,
            invoice.amount,
            final_amount,
            discount_name,
            payment_method,
            channel,
            duration_ms,
        )

        return ProcessingResult(
            invoice_id=invoice.id,
            original_amount=invoice.amount,
            final_amount=final_amount,
            message=message,
        )
