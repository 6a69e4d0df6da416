from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.revalidation_service import create_revalidation_service
from src.app.services.revalidation_service import RevalidationService


def build_engine(config) -> AsyncEngine:
    return create_async_engine(config.DB_URI, echo=False, future=True)


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


def build_revalidation_service(config) -> RevalidationService:
    return create_revalidation_service(
        backend=config.CACHE_BACKEND,
        redis_url=config.REDIS_URL,
        key_prefix=config.CACHE_KEY_PREFIX,
        webhook_url=config.REVALIDATION_WEBHOOK_URL,
        webhook_secret=config.REVALIDATION_SECRET,
    )


async def get_session(request: Request) -> AsyncSession:
    async with request.app.state.session_factory() as session:
        yield session


def get_revalidation_service(request: Request) -> RevalidationService:
    return request.app.state.revalidation_service
