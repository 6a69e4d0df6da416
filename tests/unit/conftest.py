import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoices.validation import InvoiceFormValidator

LISTING_PATH = "/dashboard/invoices"


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_invoice_repo():
    """Mock invoice repository"""
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda invoice: invoice.id)
    repo.update = AsyncMock(return_value=1)
    repo.delete = AsyncMock(return_value=1)
    return repo


@pytest.fixture
def validator():
    return InvoiceFormValidator()


@pytest.fixture
def listing_path():
    return LISTING_PATH


@pytest.fixture
def valid_form():
    """Form as submitted by the create/edit invoice page"""
    return {"customerId": "abc", "amount": "100", "status": "pending"}
