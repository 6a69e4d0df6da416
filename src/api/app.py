import logging
from contextlib import asynccontextmanager
import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.api.error import ClientError, client_error_handler
from src.api.middleware import LoggingMiddleware
from src.api.routes import invoices
from src.depends import build_engine, build_session_factory, build_revalidation_service

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if config.ENABLE_SENTRY:
        sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)

    engine = build_engine(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            import src.domain  # noqa: F401  registers tables on SQLModel.metadata

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables created")
        yield
        await engine.dispose()

    app = FastAPI(title="Invoice Actions", lifespan=lifespan)
    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.revalidation_service = build_revalidation_service(config)

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(ClientError, client_error_handler)
    app.include_router(invoices.router)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
