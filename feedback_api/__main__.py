"""
Käynnistys: `feedback-api` tai `python -m feedback_api`.
"""

import logging

import uvicorn

from feedback_api.config import Settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def run() -> None:
    settings = Settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info("🚀 Server starting on port %s", settings.port)
    uvicorn.run(
        "feedback_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
