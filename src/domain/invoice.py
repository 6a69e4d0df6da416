"""Invoice Domain Entity

Invoices raised against customers from the dashboard forms.
Amounts are stored as integer cents.
"""

import datetime
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import Date, ForeignKey, Integer, String, CheckConstraint
from src.domain.base import BaseModel, generate_uuid

CENTS_PER_UNIT = Decimal("100")
MAX_AMOUNT_CENTS = 2_147_483_647  # 32-bit INTEGER column

# Bounds in major units that round to 1 .. MAX_AMOUNT_CENTS cents
MIN_AMOUNT = Decimal("0.005")
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS) / CENTS_PER_UNIT


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "pending"
    PAID = "paid"


def to_cents(amount: Decimal) -> int:
    """
    Convert a currency amount to integer cents

    Rounds half-up to the nearest cent, so 19.99 -> 1999 and 0.005 -> 1.
    Callers keep amounts within MIN_AMOUNT..MAX_AMOUNT; far larger values
    exceed the decimal context and raise InvalidOperation.

    Args:
        amount: Amount in major units (e.g. dollars)

    Returns:
        Amount in minor units
    """
    cents = (Decimal(amount) * CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


class Invoice(BaseModel, table=True):
    """
    Invoice - Amount owed by a customer

    Domain Rules:
    - amount is stored in cents and is always > 0
    - status is either pending or paid, any transition between them is allowed
    - id and date are assigned on creation and never change
    - customer_id must reference an existing customer (enforced by the database)
    """

    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint('amount > 0', name='amount_positive'),
        Index('ix_invoices_customer_id', 'customer_id'),
        Index('ix_invoices_status', 'status'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True, default=generate_uuid),
        description="Unique invoice identifier (UUID)"
    )

    customer_id: str = Field(
        sa_column=Column(String(36), ForeignKey("customers.id"), nullable=False),
        description="Customer the invoice is raised against"
    )

    amount: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Invoice amount in cents"
    )

    status: InvoiceStatus = Field(
        sa_column=Column(String(20), nullable=False),
        description="Invoice status (pending, paid)"
    )

    date: datetime.date = Field(
        sa_column=Column(Date, nullable=False),
        description="Issue date, assigned on creation"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
                "customer_id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
                "amount": 15795,
                "status": "pending",
                "date": "2022-12-06",
            }
        }
