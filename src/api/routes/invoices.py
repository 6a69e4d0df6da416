"""Invoice API Routes

FastAPI routes backing the dashboard invoice forms (create, edit, delete).
Bodies are submitted as HTML form data.
"""

from fastapi import APIRouter, Depends, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from libs.result import Error
from src.app.services.revalidation_service import RevalidationService
from src.app.use_cases.invoices import (
    CreateInvoice,
    UpdateInvoice,
    DeleteInvoice,
    InvoiceFormValidator,
)
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_revalidation_service
from src.api.effects import apply_effects
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])

STATUS_BY_ERROR_CODE = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVOICE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DATABASE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

ERROR_RESPONSES = {
    422: {
        "description": "Invalid form fields",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "VALIDATION_ERROR",
                        "message": "Missing Fields. Failed to Create Invoice.",
                        "details": {"amount": ["Please enter an amount greater than $0."]}
                    }
                }
            }
        }
    },
    500: {
        "description": "Database error",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "DATABASE_ERROR",
                        "message": "Database Error: Failed to Create Invoice."
                    }
                }
            }
        }
    }
}


def _raise_for_error(error: Error):
    raise ClientError(
        error,
        status_code=STATUS_BY_ERROR_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


@router.post(
    "",
    status_code=status.HTTP_303_SEE_OTHER,
    responses={303: {"description": "Invoice created, redirect to listing"}, **ERROR_RESPONSES},
)
async def create_invoice(
    request: Request,
    session: AsyncSession = Depends(get_session),
    revalidation_service: RevalidationService = Depends(get_revalidation_service),
):
    """
    Create an invoice from the dashboard form.

    **Form fields:**
    - `customerId` (required): Customer identifier
    - `amount` (required): Amount in dollars (must be > 0)
    - `status` (required): `pending` or `paid`

    **Returns:**
    - 303: Invoice created, listing page revalidated, redirect to listing
    - 422: Invalid form fields
    - 500: Database error
    """
    config = request.app.state.config
    form = await request.form()

    use_case = CreateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        validator=InvoiceFormValidator(),
        listing_path=config.INVOICES_LISTING_PATH,
    )
    result = await use_case.execute(form)

    if result.is_err():
        _raise_for_error(result.error)

    return await apply_effects(result.value, revalidation_service)


@router.post(
    "/{invoice_id}",
    status_code=status.HTTP_303_SEE_OTHER,
    responses={
        303: {"description": "Invoice updated, redirect to listing"},
        404: {"description": "Invoice not found (only when REPORT_MISSING_INVOICE is set)"},
        **ERROR_RESPONSES,
    },
)
async def update_invoice(
    invoice_id: str,
    request: Request,
    session: AsyncSession = Depends(get_session),
    revalidation_service: RevalidationService = Depends(get_revalidation_service),
):
    """
    Update customer, amount and status of an invoice from the edit form.

    **Path parameters:**
    - `invoice_id` (required): Invoice ID

    **Returns:**
    - 303: Invoice updated, listing page revalidated, redirect to listing
    - 404: Invoice not found
    - 422: Invalid form fields
    - 500: Database error
    """
    config = request.app.state.config
    form = await request.form()

    use_case = UpdateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        validator=InvoiceFormValidator(),
        listing_path=config.INVOICES_LISTING_PATH,
        report_missing=config.REPORT_MISSING_INVOICE,
    )
    result = await use_case.execute(invoice_id, form)

    if result.is_err():
        _raise_for_error(result.error)

    return await apply_effects(result.value, revalidation_service)


@router.post(
    "/{invoice_id}/delete",
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Invoice deleted",
            "content": {"application/json": {"example": {"invoice_id": "3958dc9e", "message": "Invoice Deleted."}}}
        },
        404: {"description": "Invoice not found (only when REPORT_MISSING_INVOICE is set)"},
        500: ERROR_RESPONSES[500],
    },
)
async def delete_invoice(
    invoice_id: str,
    request: Request,
    session: AsyncSession = Depends(get_session),
    revalidation_service: RevalidationService = Depends(get_revalidation_service),
):
    """
    Delete an invoice.

    **Path parameters:**
    - `invoice_id` (required): Invoice ID

    **Returns:**
    - 200: Invoice deleted, listing page revalidated
    - 404: Invoice not found
    - 500: Database error
    """
    config = request.app.state.config

    use_case = DeleteInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        listing_path=config.INVOICES_LISTING_PATH,
        report_missing=config.REPORT_MISSING_INVOICE,
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        _raise_for_error(result.error)

    return await apply_effects(result.value, revalidation_service)
