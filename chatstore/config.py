import logging
import os
from typing import Optional

class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./DB.sqlite")
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    APP_NAME: str = "chatstore"
    VERSION: str = "1.0.0"

settings = Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger = logging.getLogger(settings.APP_NAME)
    logger.setLevel(level or settings.LOG_LEVEL)
    return logger
