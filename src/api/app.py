"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers table metadata
from src.adapter.repositories.pricing_config_repository import SqlAlchemyPricingConfigRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import setup_exception_handlers
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import admin, carwash, topups
from src.app.use_cases.pricing.seed_pricing_config import SeedPricingConfig
from src.depends import AsyncSessionLocal, engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Step 1: Create tables
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables initialized")

    # Step 2: Pricing must exist before any credit-consuming action
    async with AsyncSessionLocal() as session:
        await SeedPricingConfig(
            SqlAlchemyUnitOfWork(session), SqlAlchemyPricingConfigRepository(session)
        ).execute()

    yield

    await engine.dispose()


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Cawash Credit Ledger Service",
        version="1.0.0",
        description="Prepaid credit ledger for carwash tenants: job cards, expenses and top-ups.",
        lifespan=lifespan,
    )
    app.state.config = config

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["GET", "POST", "PUT", "OPTIONS"],
            allow_headers=["Content-Type", "X-Principal-Id", "X-Admin-API-Key"],
        )

    setup_exception_handlers(app)

    app.include_router(carwash.router, prefix=config.API_PREFIX)
    app.include_router(topups.router, prefix=config.API_PREFIX)
    app.include_router(admin.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
