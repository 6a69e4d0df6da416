"""UpdateInvoice Use Case

Validates the edit invoice form and rewrites customer, amount and status.
"""

import logging
from typing import Any, Mapping
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import to_cents
from .dtos import EffectDTO, InvoiceActionResponseDTO
from .validation import InvoiceFormValidator

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Update invoice from submitted form

    Business Rules:
    1. Same form validation as creation
    2. Only customer, amount and status change; id and date are kept
    3. Any status may replace any other
    4. Unknown ids are a silent no-op unless report_missing is set

    Flow:
    1. Validate form fields
    2. Update and commit
    3. Return refresh + redirect effects for the listing page
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        validator: InvoiceFormValidator,
        listing_path: str,
        report_missing: bool = False,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.validator = validator
        self.listing_path = listing_path
        self.report_missing = report_missing

    async def execute(self, invoice_id: str, form: Mapping[str, Any]) -> Result[InvoiceActionResponseDTO]:
        """
        Execute invoice update

        Args:
            invoice_id: Identifier taken from the request path
            form: Raw form fields (customerId, amount, status)

        Returns:
            Result[InvoiceActionResponseDTO]: effects to apply, or an error
        """
        # Step 1: Validate form fields
        validated = self.validator.validate(form)
        if validated.is_err():
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Missing Fields. Failed to Update Invoice.",
                    reason=validated.error.reason,
                    details=validated.error.details,
                )
            )

        fields = validated.value

        # Step 2: Update and commit
        try:
            affected = await self.invoice_repo.update(
                invoice_id=invoice_id,
                customer_id=fields.customer_id,
                amount=to_cents(fields.amount),
                status=fields.status,
            )
            await self.uow.commit()
        except (SQLAlchemyError, OSError) as e:
            await self.uow.rollback()
            logger.error(f"Failed to update invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Database Error: Failed to Update Invoice.",
                    reason=str(e),
                )
            )

        if affected == 0:
            logger.warning(f"Update matched no invoice with id {invoice_id}")
            if self.report_missing:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message="Invoice not found.",
                        reason=f"No invoice with id {invoice_id}",
                    )
                )

        # Step 3: Refresh and leave the form
        return Return.ok(
            InvoiceActionResponseDTO(
                invoice_id=invoice_id,
                effects=[
                    EffectDTO.refresh(self.listing_path),
                    EffectDTO.redirect(self.listing_path),
                ],
            )
        )
