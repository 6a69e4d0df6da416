"""Invoice form action use cases"""
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .validation import InvoiceFormValidator
from .dtos import (
    InvoiceFormDTO,
    EffectKind,
    EffectDTO,
    InvoiceActionResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
    "InvoiceFormValidator",
    "InvoiceFormDTO",
    "EffectKind",
    "EffectDTO",
    "InvoiceActionResponseDTO",
]
