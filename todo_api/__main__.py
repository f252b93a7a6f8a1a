# todo_api/__main__.py
"""Run the task API with uvicorn: ``python -m todo_api`` or ``todo-api``."""

import logging

import uvicorn

from todo_api.config import Settings
from todo_api.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Todo API server starting on port %d", settings.port)
    logger.info("API address: http://localhost:%d", settings.port)
    logger.info("Database: %s", settings.database_path)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
