"""Run the API with uvicorn: ``python -m tokenspan_api``."""
from __future__ import annotations

import uvicorn

from tokenspan_api.config import settings


def main() -> None:
    uvicorn.run(
        "tokenspan_api.app:create_app",
        factory=True,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
