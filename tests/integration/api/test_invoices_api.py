"""Integration tests for Invoice form API endpoints"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from httpx import AsyncClient
from sqlmodel import select

from config import ApplicationConfig
from src.domain import Invoice, InvoiceStatus


@pytest.fixture
def revalidation_service():
    """Spy standing in for the page cache"""
    service = MagicMock()
    service.revalidate_path = AsyncMock(return_value=True)
    return service


async def fetch_invoices(db_session):
    result = await db_session.execute(select(Invoice).execution_options(populate_existing=True))
    return list(result.scalars().all())


class TestInvoicesAPIIntegration:
    """Integration test suite for invoice form endpoints"""

    @pytest.mark.asyncio
    async def test_create_invoice_redirects_to_listing(
        self, client: AsyncClient, db_session, customer, revalidation_service
    ):
        # Act
        response = await client.post(
            "/invoices",
            data={"customerId": customer.id, "amount": "100", "status": "pending"},
        )

        # Assert
        assert response.status_code == 303
        assert response.headers["location"] == "/dashboard/invoices"
        revalidation_service.revalidate_path.assert_called_once_with("/dashboard/invoices")

        invoices = await fetch_invoices(db_session)
        assert len(invoices) == 1
        assert invoices[0].amount == 10000

    @pytest.mark.asyncio
    async def test_create_invoice_validation_error(
        self, client: AsyncClient, db_session, customer, revalidation_service
    ):
        # Act
        response = await client.post(
            "/invoices",
            data={"customerId": customer.id, "amount": "-3", "status": "overdue"},
        )

        # Assert
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Missing Fields. Failed to Create Invoice."
        assert error["details"] == {
            "amount": ["Please enter an amount greater than $0."],
            "status": ["Please select an invoice status."],
        }
        assert "reason" not in error

        revalidation_service.revalidate_path.assert_not_called()
        assert await fetch_invoices(db_session) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["1e30", "0.004"])
    async def test_create_invoice_amount_out_of_range(
        self, client: AsyncClient, db_session, customer, revalidation_service, amount
    ):
        # Act
        response = await client.post(
            "/invoices",
            data={"customerId": customer.id, "amount": amount, "status": "pending"},
        )

        # Assert
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert list(error["details"]) == ["amount"]

        revalidation_service.revalidate_path.assert_not_called()
        assert await fetch_invoices(db_session) == []

    @pytest.mark.asyncio
    async def test_create_invoice_database_error(
        self, client: AsyncClient, customer, revalidation_service
    ):
        # Act - customer does not exist
        response = await client.post(
            "/invoices",
            data={"customerId": "ghost", "amount": "100", "status": "pending"},
        )

        # Assert
        assert response.status_code == 500
        assert response.json() == {
            "error": {
                "code": "DATABASE_ERROR",
                "message": "Database Error: Failed to Create Invoice.",
            }
        }
        revalidation_service.revalidate_path.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_invoice(self, client: AsyncClient, db_session, customer, revalidation_service):
        # Arrange
        await client.post(
            "/invoices",
            data={"customerId": customer.id, "amount": "100", "status": "pending"},
        )
        invoice_id = (await fetch_invoices(db_session))[0].id

        # Act
        response = await client.post(
            f"/invoices/{invoice_id}",
            data={"customerId": customer.id, "amount": "75.25", "status": "paid"},
        )

        # Assert
        assert response.status_code == 303
        assert response.headers["location"] == "/dashboard/invoices"
        assert revalidation_service.revalidate_path.call_count == 2

        invoice = (await fetch_invoices(db_session))[0]
        assert invoice.amount == 7525
        assert invoice.status == InvoiceStatus.PAID

    @pytest.mark.asyncio
    async def test_update_unknown_invoice_is_silent(self, client: AsyncClient, customer):
        response = await client.post(
            "/invoices/unknown-id",
            data={"customerId": customer.id, "amount": "1", "status": "paid"},
        )

        assert response.status_code == 303

    @pytest.mark.asyncio
    async def test_update_unknown_invoice_reported(self, client: AsyncClient, customer, monkeypatch):
        monkeypatch.setattr(ApplicationConfig, "REPORT_MISSING_INVOICE", True)

        response = await client.post(
            "/invoices/unknown-id",
            data={"customerId": customer.id, "amount": "1", "status": "paid"},
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_invoice_twice(self, client: AsyncClient, db_session, customer, revalidation_service):
        # Arrange
        await client.post(
            "/invoices",
            data={"customerId": customer.id, "amount": "100", "status": "pending"},
        )
        invoice_id = (await fetch_invoices(db_session))[0].id

        # Act
        first = await client.post(f"/invoices/{invoice_id}/delete")
        second = await client.post(f"/invoices/{invoice_id}/delete")

        # Assert
        assert first.status_code == 200
        assert first.json() == {"invoice_id": invoice_id, "message": "Invoice Deleted."}
        assert second.status_code == 200
        assert second.json()["message"] == "Invoice Deleted."
        assert await fetch_invoices(db_session) == []

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
