"""Base ID FastAPI application."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from baseid.core.config import Settings, get_settings
from baseid.core.logging_config import setup_logging
from baseid.db.create_tables import init_store
from baseid.db.session import get_engine
from baseid.repositories.did_repository import DidRepository
from baseid.routers import did as did_router
from baseid.routers import pages as pages_router
from baseid.routers.deps import StoreNotReadyError
from baseid.services.did_service import DidService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    database_url = app.state.settings.database_url
    # Data routes answer 503 until the table exists.
    await run_in_threadpool(init_store, database_url)
    app.state.store_ready = True
    logger.info("Store ready, serving requests")
    try:
        yield
    finally:
        app.state.store_ready = False
        get_engine(database_url).dispose()


async def _store_not_ready(request: Request, exc: StoreNotReadyError) -> PlainTextResponse:
    return PlainTextResponse("Service is starting, try again shortly", status_code=503)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app; uvicorn/gunicorn can use it as a factory."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title="Base ID API", lifespan=_lifespan)
    app.state.settings = settings
    app.state.store_ready = False
    app.state.did_service = DidService(DidRepository(settings.database_url))
    app.add_exception_handler(StoreNotReadyError, _store_not_ready)

    # pages first so /healthz is not captured by /{did_id}
    app.include_router(pages_router.router)
    app.include_router(did_router.router)
    return app
