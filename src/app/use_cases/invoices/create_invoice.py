"""CreateInvoice Use Case

Validates the create invoice form and inserts a new pending or paid invoice.
"""

import logging
from datetime import datetime
from typing import Any, Mapping
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, to_cents
from .dtos import EffectDTO, InvoiceActionResponseDTO
from .validation import InvoiceFormValidator

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create invoice from submitted form

    Business Rules:
    1. Form must pass validation, nothing is written otherwise
    2. Amount is stored in cents
    3. Issue date is the current UTC date
    4. Identifier is generated on creation

    Flow:
    1. Validate form fields
    2. Build invoice with cents amount and today's date
    3. Insert and commit
    4. Return refresh + redirect effects for the listing page
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        validator: InvoiceFormValidator,
        listing_path: str,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.validator = validator
        self.listing_path = listing_path

    async def execute(self, form: Mapping[str, Any]) -> Result[InvoiceActionResponseDTO]:
        """
        Execute invoice creation

        Args:
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
                    message="Missing Fields. Failed to Create Invoice.",
                    reason=validated.error.reason,
                    details=validated.error.details,
                )
            )

        fields = validated.value

        # Step 2: Build invoice
        invoice = Invoice(
            customer_id=fields.customer_id,
            amount=to_cents(fields.amount),
            status=fields.status,
            date=datetime.utcnow().date(),
        )

        # Step 3: Insert and commit
        try:
            invoice_id = await self.invoice_repo.create(invoice)
            await self.uow.commit()
        except (SQLAlchemyError, OSError) as e:
            await self.uow.rollback()
            logger.error(f"Failed to create invoice for customer {fields.customer_id}: {e}")
            return Return.err(
                Error(
                    code="DATABASE_ERROR",
                    message="Database Error: Failed to Create Invoice.",
                    reason=str(e),
                )
            )

        logger.info(f"Created invoice {invoice_id} ({invoice.amount} cents, {invoice.status.value})")

        # Step 4: Refresh and leave the form
        return Return.ok(
            InvoiceActionResponseDTO(
                invoice_id=invoice_id,
                effects=[
                    EffectDTO.refresh(self.listing_path),
                    EffectDTO.redirect(self.listing_path),
                ],
            )
        )
