import logging
import sys
import time

from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from services.feedback_service.app.config.log_config import configure_logging
from services.feedback_service.app.models.database import engine, Base
# Registers the feedbacks table on Base.metadata
from services.feedback_service.app.models import feedback  # noqa: F401

logger = logging.getLogger("init_db")

RETRIES = 5
RETRY_DELAY_SECONDS = 5


def connect_to_db(retries: int = RETRIES, delay: float = RETRY_DELAY_SECONDS) -> None:
    while retries > 0:
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            logger.info("Database connection successful")
            return
        except OperationalError:
            retries -= 1
            logger.warning("Database not ready, %d retries left", retries)
            if retries:
                time.sleep(delay)
    raise RuntimeError("Could not connect to the database")


def init_db() -> None:
    connect_to_db()
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized.")


if __name__ == "__main__":
    configure_logging()
    try:
        init_db()
    except RuntimeError as exc:
        logger.error("%s", exc)
        sys.exit(1)
