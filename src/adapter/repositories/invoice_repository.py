"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from sqlalchemy import insert, update, delete
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Issues single INSERT/UPDATE/DELETE statements with bound parameters.
    Transaction boundaries belong to the unit of work.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> str:
        statement = insert(Invoice).values(
            id=invoice.id,
            customer_id=invoice.customer_id,
            amount=invoice.amount,
            status=InvoiceStatus(invoice.status).value,
            date=invoice.date,
        )
        await self.session.execute(statement)
        return invoice.id

    async def update(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> int:
        statement = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(
                customer_id=customer_id,
                amount=amount,
                status=InvoiceStatus(status).value,
            )
        )
        result = await self.session.execute(statement)
        return result.rowcount

    async def delete(self, invoice_id: str) -> int:
        statement = delete(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.rowcount
