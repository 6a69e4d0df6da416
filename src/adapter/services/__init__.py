from .unit_of_work import SqlAlchemyUnitOfWork
from .revalidation_service import (
    LoggingRevalidationService,
    RedisRevalidationService,
    WebhookRevalidationService,
    CompositeRevalidationService,
    create_revalidation_service,
)

__all__ = [
    "SqlAlchemyUnitOfWork",
    "LoggingRevalidationService",
    "RedisRevalidationService",
    "WebhookRevalidationService",
    "CompositeRevalidationService",
    "create_revalidation_service",
]
