from __future__ import annotations

from typing import Literal, Self

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "tokenspan-api"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    # Postgres
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 300
    DB_ECHO: bool = False

    # Redis-backed entity cache
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_TTL_SECONDS: int = 300

    # Bearer auth
    JWT_SECRET: str = ""
    JWT_VERIFY_MODE: Literal["hs256", "jwks"] = "hs256"
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str | None = None
    JWT_LEEWAY_SECONDS: int = 0
    JWKS_URL: str | None = None

    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    SLOW_REQUEST_MS: float = 500.0
    HEALTH_CHECK_TIMEOUT_SECONDS: float = 2.0

    # List endpoints
    PAGINATION_DEFAULT_TAKE: int = 20
    PAGINATION_MAX_TAKE: int = 100
    PAGINATION_STALE_CURSOR: Literal["degrade", "strict"] = "degrade"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @model_validator(mode="after")
    def _check_page_sizes(self) -> Self:
        if self.PAGINATION_MAX_TAKE < 1:
            raise ValueError("PAGINATION_MAX_TAKE must be at least 1")
        if not 0 <= self.PAGINATION_DEFAULT_TAKE <= self.PAGINATION_MAX_TAKE:
            raise ValueError("PAGINATION_DEFAULT_TAKE must be between 0 and PAGINATION_MAX_TAKE")
        return self

    @model_validator(mode="after")
    def _check_jwt_mode(self) -> Self:
        if self.JWT_VERIFY_MODE == "jwks" and not self.JWKS_URL:
            raise ValueError("JWKS_URL must be set when JWT_VERIFY_MODE=jwks")
        return self

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()  # type: ignore[call-arg]
