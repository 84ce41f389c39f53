from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tokenspan_api.config import Settings, settings


def build_engine(cfg: Settings) -> AsyncEngine:
    """Pooled asyncpg engine tagged with the service name in ``pg_stat_activity``."""
    return create_async_engine(
        cfg.database_url,
        pool_size=cfg.DB_POOL_SIZE,
        max_overflow=cfg.DB_MAX_OVERFLOW,
        pool_recycle=cfg.DB_POOL_RECYCLE,
        pool_pre_ping=True,
        echo=cfg.DB_ECHO,
        connect_args={"server_settings": {"application_name": cfg.APP_NAME}},
    )


engine = build_engine(settings)

# Entities are mapped out of ORM rows before commit; no lazy reloads needed
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
