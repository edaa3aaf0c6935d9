from datetime import datetime
from decimal import Decimal
from io import BytesIO

import pytest
from PyPDF2 import PdfReader

from payment_reports.schemas.payment import PaymentRecord
from payment_reports.schemas.report_config import ReportConfigBuilder
from payment_reports.services.report_service import PaymentReportService
from payment_reports.utils.pdf_generator import PaymentReportGenerator

FIXED_NOW = datetime(2024, 3, 5, 14, 30, 9)


def fixed_clock():
    return FIXED_NOW


def read_pdf(pdf_bytes: bytes) -> PdfReader:
    return PdfReader(BytesIO(pdf_bytes))


def pdf_text(pdf_bytes: bytes) -> str:
    reader = read_pdf(pdf_bytes)
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def page_size(pdf_bytes: bytes):
    box = read_pdf(pdf_bytes).pages[0].mediabox
    return round(float(box.width), 2), round(float(box.height), 2)


@pytest.fixture
def payment() -> PaymentRecord:
    return PaymentRecord.create(
        transaction_id="TX1",
        amount=Decimal("99.9"),
        payment_method="CARD",
        customer_name="Alice",
    )


@pytest.fixture
def default_config():
    return ReportConfigBuilder().build()


@pytest.fixture
def generator() -> PaymentReportGenerator:
    return PaymentReportGenerator(clock=fixed_clock, invariant=True)


@pytest.fixture
def service(generator) -> PaymentReportService:
    return PaymentReportService(generator=generator, clock=fixed_clock)


@pytest.fixture
def valid_payload() -> dict:
    return {
        "title": "Receipt",
        "theme": "DARK",
        "format": "LETTER",
        "transactionId": "TX1",
        "amount": 99.9,
        "paymentMethod": "CARD",
        "customerName": "Alice",
        "includeLogo": False,
        "includeUserInfo": True,
        "includePaymentDetails": True,
        "includeTimestamp": False,
        "footerMessage": "",
    }
