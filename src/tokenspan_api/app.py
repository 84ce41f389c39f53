from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import redis.asyncio as aioredis
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tokenspan_api.api.middleware.correlation_id import CorrelationIdMiddleware
from tokenspan_api.api.middleware.timing import RequestTimingMiddleware
from tokenspan_api.api.v1.routers import (
    api_keys,
    executions,
    health,
    models,
    parameters,
    providers,
    threads,
    users,
)
from tokenspan_api.application.exceptions import AppError
from tokenspan_api.config import settings
from tokenspan_api.infrastructure.db.session import engine
from tokenspan_api.logging_config import configure_logging
from tokenspan_api.pagination import PaginationError, StaleCursorError

logger = logging.getLogger(__name__)

ROUTERS = (health, providers, models, api_keys, threads, parameters, executions, users)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.LOG_LEVEL)

    app.state.redis = aioredis.from_url(settings.REDIS_URL)
    logger.info("%s starting; cache at %s", settings.APP_NAME, settings.REDIS_URL)

    try:
        yield
    finally:
        await app.state.redis.aclose()
        await engine.dispose()
        logger.info("Connection pools closed")


def create_app() -> FastAPI:
    app = FastAPI(title="Tokenspan API", version="0.1.0", lifespan=lifespan)

    # Last added runs first: the request id must exist before timing logs
    app.add_middleware(RequestTimingMiddleware, slow_ms=settings.SLOW_REQUEST_MS)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, _app_error)
    app.add_exception_handler(PaginationError, _pagination_error)

    for module in ROUTERS:
        app.include_router(module.router)

    return app


async def _app_error(_req: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, AppError)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


async def _pagination_error(_req: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, PaginationError)
    # A vanished anchor is a state conflict; everything else is a bad argument
    status_code = 409 if isinstance(exc, StaleCursorError) else 422
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.detail, "code": exc.code},
    )
