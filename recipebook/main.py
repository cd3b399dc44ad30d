import logging

import uvicorn

from .app import create_app
from .config import Settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Server starting on %s:%d", settings.host, settings.port)
    # uvicorn exits the process if startup (database or socket) fails
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_config=None,
    )


if __name__ == "__main__":
    main()
