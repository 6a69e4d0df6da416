"""Customer Domain Entity

Customers are managed outside the invoice forms; invoices only reference them.
"""

from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid


class Customer(BaseModel, table=True):
    """Customer - Party an invoice is raised against"""

    __tablename__ = "customers"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True, default=generate_uuid),
        description="Unique customer identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer display name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer email address"
    )

    image_url: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Avatar image URL"
    )
