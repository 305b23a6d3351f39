"""Structured JSON logging for the invoice pipeline"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, TextIO
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "invoice-pipeline", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(
    level: str = "INFO",
    stream: TextIO | None = None,
    service_name: str = "invoice-pipeline",
) -> None:
    """
    Configure structured JSON logging.

    Records go to stderr by default; stdout carries the pipeline's console lines.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_invoice_processed(
    invoice_id: str,
    original_amount: float,
    final_amount: float,
    discount: str,
    payment_method: str,
    notifier: str,
    duration_ms: float,
) -> None:
    """Log structured processing outcome for analysis"""
    logging.info(
        "Invoice processed",
        extra={
            "invoice_id": invoice_id,
            "step": "invoice_processed",
            "original_amount": original_amount,
            "final_amount": final_amount,
            "discount": discount,
            "payment_method": payment_method,
            "notifier": notifier,
            "duration_ms": duration_ms,
        },
    )
