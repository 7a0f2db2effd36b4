"""FastAPI application factory."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from linkhub import __version__
from linkhub.api.router import api_router
from linkhub.core.config import settings
from linkhub.core.exceptions import register_exception_handlers
from linkhub.core.logging import configure_logging
from linkhub.db.session import dispose_engine
from linkhub.services.limits import close_client


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL, json_logs=settings.is_production)
    if settings.PLAN_TEST_MODE_ENABLED:
        logger.warning("Plan test mode is enabled; X-Test-Plan overrides are honoured")
    logger.info(f"{settings.PROJECT_NAME} {__version__} starting (env={settings.ENV})")
    yield
    await close_client()
    await dispose_engine()
    logger.info(f"{settings.PROJECT_NAME} stopped")


def create_application() -> FastAPI:
    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=__version__,
        lifespan=lifespan,
    )
    register_exception_handlers(application)
    application.include_router(api_router, prefix=f"{settings.API_PREFIX}/v1")

    @application.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "env": settings.ENV}

    return application


app = create_application()
