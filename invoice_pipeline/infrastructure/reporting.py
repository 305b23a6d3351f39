"""Invoice printing and reports"""

from typing import TextIO
from invoice_pipeline.domain.models import Invoice


class InvoicePrinter:
    """Prints a single invoice"""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def print(self, invoice: Invoice) -> None:
        print(f"Invoice {invoice.id} printed with amount: {invoice.amount}", file=self.stream)


class InvoiceReport:
    """
    Summary report that can be printed and emailed.

    Satisfies both the Printable and EmailSendable protocols; callers that
    only print never see send_email() and vice versa.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def print(self) -> None:
        print("Printing invoice report...", file=self.stream)

    def send_email(self) -> None:
        print("Sending invoice report via Email...", file=self.stream)
