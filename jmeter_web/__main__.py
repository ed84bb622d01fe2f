import logging

import uvicorn

from jmeter_web.core.config import settings
from jmeter_web.main import app

logger = logging.getLogger(__name__)


def main():
    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
