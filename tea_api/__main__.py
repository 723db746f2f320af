"""Run the API with uvicorn: ``python -m tea_api``."""

import logging

import uvicorn

from tea_api.config import get_settings
from tea_api.main import configure_logging, create_app

logger = logging.getLogger("tea_api")


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    app = create_app(settings=settings)

    logger.info(f"Tea API running at http://localhost:{settings.port}")
    logger.info(f"TIF signature: http://localhost:{settings.port}/brew")

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
