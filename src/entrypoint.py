from __future__ import annotations

import logging

import uvicorn

from .config import load_settings
from .index import create_app
from .logging_config import setup_logging

settings = load_settings()
setup_logging(settings)

logger = logging.getLogger(__name__)

app = create_app(settings)


def main() -> None:
    logger.info(f"Starting todo service on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":  # pragma: no cover
    main()
