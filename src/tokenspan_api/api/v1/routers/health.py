from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from tokenspan_api.config import settings
from tokenspan_api.infrastructure.db.session import AsyncSessionLocal

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


async def _ping_postgres() -> None:
    async with AsyncSessionLocal() as session:
        await session.execute(text("SELECT 1"))


async def _probe(name: str, check: Awaitable[object]) -> str | None:
    """Run one dependency check; return an error string, or None when healthy."""
    try:
        await asyncio.wait_for(check, timeout=settings.HEALTH_CHECK_TIMEOUT_SECONDS)
    except TimeoutError:
        return f"{name}: timed out"
    except (SQLAlchemyError, RedisError, OSError) as exc:
        return f"{name}: {exc}"
    return None


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(request: Request) -> JSONResponse:
    results = await asyncio.gather(
        _probe("postgres", _ping_postgres()),
        _probe("redis", request.app.state.redis.ping()),
    )
    errors = [r for r in results if r is not None]
    if errors:
        logger.warning("Not ready: %s", "; ".join(errors))
        return JSONResponse(status_code=503, content={"status": "unavailable", "errors": errors})
    return JSONResponse(content={"status": "ready"})
