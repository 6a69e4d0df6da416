"""Unit tests for Invoice domain entity and cents conversion"""

import pytest
from datetime import date
from decimal import Decimal

from src.domain.invoice import (
    Invoice,
    InvoiceStatus,
    MAX_AMOUNT,
    MAX_AMOUNT_CENTS,
    MIN_AMOUNT,
    to_cents,
)


class TestToCents:
    """Test dollars -> cents conversion"""

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("19.99"), 1999),
            (Decimal("100"), 10000),
            (Decimal("0.01"), 1),
            (Decimal("0.005"), 1),
            (Decimal("0.015"), 2),
            (Decimal("1234.565"), 123457),
        ],
    )
    def test_to_cents(self, amount, expected):
        assert to_cents(amount) == expected

    def test_to_cents_returns_int(self):
        assert isinstance(to_cents(Decimal("5.5")), int)

    def test_amount_bounds_map_onto_cents_column(self):
        assert to_cents(MIN_AMOUNT) == 1
        assert to_cents(MAX_AMOUNT) == MAX_AMOUNT_CENTS
        assert MAX_AMOUNT == Decimal("21474836.47")


class TestInvoiceCreation:
    """Test Invoice entity creation"""

    def test_create_invoice_with_valid_data(self):
        # Arrange & Act
        invoice = Invoice(
            customer_id="cust_1",
            amount=1999,
            status=InvoiceStatus.PAID,
            date=date(2024, 1, 15),
        )

        # Assert
        assert invoice.customer_id == "cust_1"
        assert invoice.amount == 1999
        assert invoice.status == InvoiceStatus.PAID
        assert invoice.date == date(2024, 1, 15)

    def test_id_is_generated(self):
        first = Invoice(customer_id="c", amount=1, status=InvoiceStatus.PENDING, date=date.today())
        second = Invoice(customer_id="c", amount=1, status=InvoiceStatus.PENDING, date=date.today())

        assert first.id and second.id
        assert first.id != second.id

    def test_status_values(self):
        assert {s.value for s in InvoiceStatus} == {"pending", "paid"}
