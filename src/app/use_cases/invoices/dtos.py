"""Data Transfer Objects for Invoice Use Cases

Pydantic models for form inputs and action outputs.
"""

from decimal import Decimal
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from src.domain.invoice import InvoiceStatus, MIN_AMOUNT, MAX_AMOUNT


class InvoiceFormDTO(BaseModel):
    """
    Validated invoice form fields

    Field aliases match the names submitted by the dashboard form.
    """

    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(
        ...,
        alias="customerId",
        min_length=1,
        description="Customer identifier (required, non-empty)"
    )

    amount: Decimal = Field(
        ...,
        ge=MIN_AMOUNT,
        le=MAX_AMOUNT,
        description="Amount in dollars (at least one cent once rounded, at most MAX_AMOUNT)"
    )

    status: InvoiceStatus = Field(
        ...,
        description="Invoice status (pending, paid)"
    )


class EffectKind(str, Enum):
    """What the calling layer must do after a successful action"""
    REDIRECT = "redirect"
    REFRESH = "refresh"


class EffectDTO(BaseModel):
    """Navigation or cache side effect to be applied by the caller"""

    kind: EffectKind
    path: str

    @classmethod
    def redirect(cls, path: str) -> "EffectDTO":
        return cls(kind=EffectKind.REDIRECT, path=path)

    @classmethod
    def refresh(cls, path: str) -> "EffectDTO":
        return cls(kind=EffectKind.REFRESH, path=path)


class InvoiceActionResponseDTO(BaseModel):
    """
    Response DTO for invoice actions

    Returned by CreateInvoice, UpdateInvoice and DeleteInvoice.
    """

    invoice_id: Optional[str] = Field(
        default=None,
        description="Identifier of the affected invoice"
    )

    message: Optional[str] = Field(
        default=None,
        description="Message to display to the user"
    )

    effects: List[EffectDTO] = Field(
        default_factory=list,
        description="Effects the caller applies in order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
                "message": None,
                "effects": [
                    {"kind": "refresh", "path": "/dashboard/invoices"},
                    {"kind": "redirect", "path": "/dashboard/invoices"},
                ],
            }
        }
