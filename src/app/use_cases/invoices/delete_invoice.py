"""DeleteInvoice Use Case

Removes an invoice and refreshes the listing page.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import EffectDTO, InvoiceActionResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice

    Deleting an id that no longer exists succeeds, so repeated deletes are
    harmless, unless report_missing is set.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        listing_path: str,
        report_missing: bool = False,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.listing_path = listing_path
        self.report_missing = report_missing

    async def execute(self, invoice_id: str) -> Result[InvoiceActionResponseDTO]:
        try:
            affected = await self.invoice_repo.delete(invoice_id)
            await self.uow.commit()
        except (SQLAlchemyError, OSError) as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Database Error: Failed to Delete Invoice.",
                    reason=str(e),
                )
            )

        if affected == 0:
            logger.warning(f"Delete matched no invoice with id {invoice_id}")
            if self.report_missing:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message="Invoice not found.",
                        reason=f"No invoice with id {invoice_id}",
                    )
                )

        return Return.ok(
            InvoiceActionResponseDTO(
                invoice_id=invoice_id,
                message="Invoice Deleted.",
                effects=[EffectDTO.refresh(self.listing_path)],
            )
        )
