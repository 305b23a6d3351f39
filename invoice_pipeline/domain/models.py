"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Invoice:
    """Invoice to be processed. Immutable once constructed."""

    id: str
    amount: int | float


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of running one invoice through the processing pipeline"""

    invoice_id: str
    original_amount: int | float
    final_amount: int | float
    message: str  # exact text handed to the notifier
