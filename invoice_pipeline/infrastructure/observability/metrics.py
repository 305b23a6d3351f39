"""Prometheus metrics for monitoring processed invoices and charged amounts"""

from prometheus_client import Counter, Histogram

invoice_processed_counter = Counter(
    "invoice_processed",
    "Total invoices run through the processing pipeline",
    ["discount", "payment_method", "notifier"],
)

final_amount_histogram = Histogram(
    "invoice_final_amount",
    "Amount charged per invoice after discount",
    buckets=[0, 10, 50, 100, 250, 500, 1000, 5000, 10000],
)


def record_invoice_processed(discount: str, payment_method: str, notifier: str, final_amount: float) -> None:
    """Record one successfully processed invoice"""
    invoice_processed_counter.labels(
        discount=discount,
        payment_method=payment_method,
        notifier=notifier,
    ).inc()
    final_amount_histogram.observe(float(final_amount))
