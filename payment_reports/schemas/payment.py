"""
Payment Schemas
PaymentRecord value object and the request body of the payment report endpoints
"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from ..utils.helpers import Number, to_decimal


@dataclass(frozen=True)
class PaymentRecord:
    """The four payment fields rendered into a report"""
    transaction_id: str
    amount: Decimal
    payment_method: str
    customer_name: str

    @classmethod
    def create(cls, transaction_id: str, amount: Number, payment_method: str, customer_name: str) -> "PaymentRecord":
        """Validate and normalize the fields. Raises ValueError."""
        for field_name, value in (
            ("transaction_id", transaction_id),
            ("payment_method", payment_method),
            ("customer_name", customer_name),
        ):
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{field_name} must be a non-empty string")

        decimal_amount = to_decimal(amount)
        if not decimal_amount.is_finite() or decimal_amount <= 0:
            raise ValueError("amount must be positive")

        return cls(
            transaction_id=transaction_id,
            amount=decimal_amount,
            payment_method=payment_method,
            customer_name=customer_name,
        )


class PaymentReportRequest(BaseModel):
    """Body of POST /api/reports/payment: report options plus payment data"""
    # Report options
    includeLogo: bool = False
    title: str = Field(..., min_length=1)
    includePaymentDetails: bool = True
    includeUserInfo: bool = True
    theme: str = Field(..., min_length=1, description="LIGHT or DARK")
    includeTimestamp: bool = True
    footerMessage: str = ""
    format: str = Field(..., min_length=1, description="A4 or LETTER")

    # Payment data
    transactionId: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    paymentMethod: str = Field(..., min_length=1)
    customerName: str = Field(..., min_length=1)

    @field_validator('title', 'transactionId', 'paymentMethod', 'customerName')
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator('theme', 'format')
    @classmethod
    def strip_enum_name(cls, v):
        stripped = v.strip()
        if not stripped:
            raise ValueError("is required")
        return stripped

    def to_payment_record(self) -> PaymentRecord:
        return PaymentRecord.create(
            transaction_id=self.transactionId,
            amount=self.amount,
            payment_method=self.paymentMethod,
            customer_name=self.customerName,
        )
