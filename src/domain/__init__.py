from .base import BaseModel, generate_uuid
from .customer import Customer
from .invoice import Invoice, InvoiceStatus, to_cents

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Customer",
    "Invoice",
    "InvoiceStatus",
    "to_cents",
]
