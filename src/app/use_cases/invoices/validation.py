"""Invoice form validation

Turns raw form fields into an InvoiceFormDTO or a field-keyed error map.
"""

from typing import Any, Dict, List, Mapping
from pydantic import ValidationError
from libs.result import Result, Return, Error
from src.domain.invoice import MAX_AMOUNT
from .dtos import InvoiceFormDTO

FORM_FIELDS = ("customerId", "amount", "status")

FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}

# Overrides of FIELD_MESSAGES keyed by (field, pydantic error type)
ERROR_MESSAGES = {
    ("amount", "less_than_equal"): f"Please enter an amount no greater than ${MAX_AMOUNT:,}.",
}


class InvoiceFormValidator:
    """
    Validates the create/update invoice form

    Rules:
    - customerId is present and non-empty
    - amount coerces to a finite number worth at least one cent once rounded,
      and fits the cents column (at most MAX_AMOUNT)
    - status is one of pending, paid

    Fields other than customerId, amount and status are ignored.
    """

    def validate(self, raw: Mapping[str, Any]) -> Result[InvoiceFormDTO]:
        """
        Validate raw form input

        Args:
            raw: Submitted form fields keyed by form field name

        Returns:
            Result[InvoiceFormDTO]: validated fields, or VALIDATION_ERROR with
            details mapping each failing field to its messages
        """
        data = {name: raw.get(name) for name in FORM_FIELDS if raw.get(name) is not None}

        try:
            return Return.ok(InvoiceFormDTO.model_validate(data))
        except ValidationError as e:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Invalid form fields",
                    reason=str(e),
                    details=self._field_errors(e),
                )
            )

    @staticmethod
    def _field_errors(exc: ValidationError) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        for item in exc.errors():
            field = str(item["loc"][0]) if item["loc"] else "form"
            message = ERROR_MESSAGES.get(
                (field, item["type"]), FIELD_MESSAGES.get(field, item["msg"])
            )
            messages = errors.setdefault(field, [])
            if message not in messages:
                messages.append(message)
        return errors
