from .unit_of_work import UnitOfWork
from .revalidation_service import RevalidationService

__all__ = [
    "UnitOfWork",
    "RevalidationService",
]
