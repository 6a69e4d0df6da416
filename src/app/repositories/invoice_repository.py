"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Each method issues exactly one statement against the store.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> str:
        """
        Insert a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Identifier of the inserted invoice
        """
        pass

    @abstractmethod
    async def update(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> int:
        """
        Update customer, amount and status of an existing invoice

        Args:
            invoice_id: Invoice identifier
            customer_id: New customer reference
            amount: New amount in cents
            status: New status

        Returns:
            Number of rows affected (0 when the invoice does not exist)
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: str) -> int:
        """
        Delete an invoice

        Args:
            invoice_id: Invoice identifier

        Returns:
            Number of rows affected (0 when the invoice does not exist)
        """
        pass
