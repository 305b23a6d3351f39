"""Pytest fixtures for testing"""

import logging
import pytest
from typing import Generator
from unittest.mock import Mock
from invoice_pipeline.config import Settings
from invoice_pipeline.domain.models import Invoice


@pytest.fixture
def sample_invoice() -> Invoice:
    """Invoice used by the reference scenario"""
    return Invoice("INV001", 1000)


@pytest.fixture
def recording_payment() -> Mock:
    """Payment double that records the amounts it was asked to pay"""
    payment = Mock(spec=["pay", "method_name"])
    payment.method_name = "Recording"
    return payment


@pytest.fixture
def recording_notifier() -> Mock:
    """Notifier double that records the messages it was asked to send"""
    notifier = Mock(spec=["send", "channel"])
    notifier.channel = "Recording"
    return notifier


@pytest.fixture
def demo_settings() -> Settings:
    """Settings matching the default demo, isolated from the environment and .env"""
    return Settings(
        _env_file=None,
        demo_invoice_id="INV001",
        demo_invoice_amount=1000,
        discount="seasonal",
        payment_method="credit_card",
        notifier="sms",
    )


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo setup_logging() so later tests keep pytest's capture handlers"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
