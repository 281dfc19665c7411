# utils/helpers.py
import logging
from datetime import datetime, timezone
from typing import Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
SINK_LOGGER_NAME = "waitlist"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logging once and return the application logger"""
    level = level or settings.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT
    )
    # basicConfig is a no-op once the host server has configured the root logger
    logging.getLogger(SINK_LOGGER_NAME).setLevel(level)
    return logging.getLogger("foresyte")


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string"""
    return datetime.now(timezone.utc).isoformat()
