"""Run the API with uvicorn."""

import logging

import uvicorn

from project_api.core.config import get_settings
from project_api.core.logging_safety import configure_logging

logger = logging.getLogger("project_api")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("server.starting host=%s port=%d", settings.host, settings.port)
    uvicorn.run(
        "project_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
