"""
province_registry.api.__main__

Entrypoint for running the FastAPI application via `python -m province_registry.api`.
"""

from __future__ import annotations

import uvicorn

from province_registry.api.app import create_app
from province_registry.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
