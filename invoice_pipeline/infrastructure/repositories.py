"""Data access layer for invoices"""

from typing import TextIO
from invoice_pipeline.domain.models import Invoice


class InvoiceRepository:
    """Repository for invoices. Saving is reported, not persisted."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def save(self, invoice: Invoice) -> None:
        """Save invoice to the database"""
        print(f"Invoice {invoice.id} saved to database.", file=self.stream)
