"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated, AsyncIterator

import jwt
from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.application.ports.auth import TokenVerifier
from tokenspan_api.application.ports.cache import Cache
from tokenspan_api.config import settings
from tokenspan_api.domain.entities.api_key import ApiKey
from tokenspan_api.domain.entities.model import Model
from tokenspan_api.infrastructure.auth.hs256_verifier import HS256Verifier
from tokenspan_api.infrastructure.auth.jwks_verifier import JWKSVerifier
from tokenspan_api.infrastructure.cache.redis_cache import RedisCache
from tokenspan_api.infrastructure.db.session import AsyncSessionLocal
from tokenspan_api.infrastructure.db.uow import SqlAlchemyUoW
from tokenspan_api.pagination import PageRequest

_bearer_scheme = HTTPBearer()


async def get_uow() -> AsyncIterator[SqlAlchemyUoW]:
    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)
        try:
            yield uow
        finally:
            await session.close()


UoWDep = Annotated[SqlAlchemyUoW, Depends(get_uow)]


def _build_verifier() -> TokenVerifier:
    if settings.JWT_VERIFY_MODE == "jwks":
        return JWKSVerifier(
            settings.JWKS_URL or "",
            audience=settings.JWT_AUDIENCE,
            leeway=settings.JWT_LEEWAY_SECONDS,
        )
    return HS256Verifier(
        settings.JWT_SECRET,
        settings.JWT_ALGORITHM,
        audience=settings.JWT_AUDIENCE,
        leeway=settings.JWT_LEEWAY_SECONDS,
    )


_verifier: TokenVerifier | None = None


def get_verifier() -> TokenVerifier:
    global _verifier  # noqa: PLW0603
    if _verifier is None:
        _verifier = _build_verifier()
    return _verifier


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(_bearer_scheme)],
    verifier: Annotated[TokenVerifier, Depends(get_verifier)],
) -> Principal:
    try:
        return await verifier.verify(credentials.credentials)
    except jwt.PyJWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def get_current_admin(principal: CurrentPrincipal) -> Principal:
    if not principal.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return principal


CurrentAdmin = Annotated[Principal, Depends(get_current_admin)]


def get_page_request(
    first: int | None = Query(None, description="Page size when paging forward"),
    after: str | None = Query(None, description="Return rows after this cursor"),
    last: int | None = Query(None, description="Page size when paging backward"),
    before: str | None = Query(None, description="Return rows before this cursor"),
) -> PageRequest:
    # Bounds are checked by the planner so errors carry a pagination code
    return PageRequest.from_args(
        first=first,
        after=after,
        last=last,
        before=before,
        default_take=settings.PAGINATION_DEFAULT_TAKE,
    )


PageRequestDep = Annotated[PageRequest, Depends(get_page_request)]


def get_model_cache(request: Request) -> Cache[Model]:
    return RedisCache(request.app.state.redis, "model", Model, settings.CACHE_TTL_SECONDS)


def get_api_key_cache(request: Request) -> Cache[ApiKey]:
    return RedisCache(request.app.state.redis, "api_key", ApiKey, settings.CACHE_TTL_SECONDS)


ModelCacheDep = Annotated[Cache[Model], Depends(get_model_cache)]
ApiKeyCacheDep = Annotated[Cache[ApiKey], Depends(get_api_key_cache)]
