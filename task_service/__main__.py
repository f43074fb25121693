"""Run the Task Service under uvicorn."""

import logging

import uvicorn

from task_service.config import get_settings
from task_service.main import app

logger = logging.getLogger("task_service")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server is running on port :%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
