"""Unit tests for payment methods and notifiers"""

import io
import logging
import pytest
from invoice_pipeline.domain.discounts import NoDiscount
from invoice_pipeline.domain.interfaces import Notifier, Payment
from invoice_pipeline.infrastructure.notifiers import EmailNotifier, SMSNotifier
from invoice_pipeline.infrastructure.payments import CreditCardPayment, UPIPayment
from invoice_pipeline.services.processing import InvoiceProcessingService


@pytest.mark.parametrize(
    "payment_cls, expected",
    [
        (CreditCardPayment, "Paid 900.0 using Credit Card.\n"),
        (UPIPayment, "Paid 900.0 using UPI.\n"),
    ],
)
def test_payment_reports_method(payment_cls, expected, capsys):
    """Test each payment method tags its output with its own name"""
    result = payment_cls().pay(900.0)

    assert result is None
    assert capsys.readouterr().out == expected


@pytest.mark.parametrize("payment_cls", [CreditCardPayment, UPIPayment])
def test_payments_are_substitutable(payment_cls):
    """Test every payment method accepts zero and fractional amounts alike"""
    stream = io.StringIO()
    payment = payment_cls(stream=stream)

    payment.pay(0)
    payment.pay(12.5)

    assert isinstance(payment, Payment)
    assert stream.getvalue().splitlines() == [
        f"Paid 0 using {payment.method_name}.",
        f"Paid 12.5 using {payment.method_name}.",
    ]


def test_payment_logs_execution(caplog):
    """Test a structured record is logged per payment"""
    caplog.set_level(logging.INFO)

    UPIPayment(stream=io.StringIO()).pay(42)

    record = next(r for r in caplog.records if r.getMessage() == "Payment executed")
    assert record.payment_method == "UPI"
    assert record.amount == 42


@pytest.mark.parametrize(
    "notifier_cls, expected",
    [
        (EmailNotifier, "Email sent: hello\n"),
        (SMSNotifier, "SMS sent: hello\n"),
    ],
)
def test_notifier_reports_channel(notifier_cls, expected, capsys):
    """Test each notifier prefixes the message with its channel"""
    notifier_cls().send("hello")

    assert capsys.readouterr().out == expected


@pytest.mark.parametrize("notifier_cls", [EmailNotifier, SMSNotifier])
def test_notifiers_satisfy_protocol(notifier_cls):
    notifier = notifier_cls()

    assert isinstance(notifier, Notifier)
    assert Notifier not in type(notifier).__mro__


def test_notifier_writes_to_injected_stream(capsys):
    """Test output goes to the given stream instead of stdout"""
    stream = io.StringIO()

    SMSNotifier(stream=stream).send("Invoice A processed. Final Amount: 1")

    assert stream.getvalue() == "SMS sent: Invoice A processed. Final Amount: 1\n"
    assert capsys.readouterr().out == ""


def test_protocols_require_only_the_call():
    """Test a payment with just pay() and a notifier with just send() satisfy the protocols"""

    class GiftCardPayment:
        def pay(self, amount):
            pass

    class PagerNotifier:
        def send(self, message):
            pass

    assert isinstance(GiftCardPayment(), Payment)
    assert isinstance(PagerNotifier(), Notifier)


def test_service_labels_strategies_without_names(sample_invoice, caplog):
    """Test strategies lacking method_name and channel are labelled by class name"""
    caplog.set_level(logging.INFO)

    class GiftCardPayment:
        def pay(self, amount):
            pass

    class PagerNotifier:
        def send(self, message):
            pass

    service = InvoiceProcessingService(discount=NoDiscount(), notifier=PagerNotifier())
    service.process_invoice(sample_invoice, GiftCardPayment())

    record = next(r for r in caplog.records if r.getMessage() == "Invoice processed")
    assert record.payment_method == "GiftCardPayment"
    assert record.notifier == "PagerNotifier"
