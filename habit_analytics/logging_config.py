from __future__ import annotations

import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
SERVICE_LOGGER = "habit_analytics"
ENGINE_LOGGER = "habit_analytics.analytics"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=settings.LOG_MAX_BYTES,
                backupCount=settings.LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(log_file: Optional[str] = None) -> Logger:
    """Attach handlers to the service logger and set router/engine levels.

    Previous handlers are closed and replaced on every call.
    """
    service_logger = logging.getLogger(SERVICE_LOGGER)
    for handler in list(service_logger.handlers):
        service_logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(log_file or settings.LOG_FILE):
        service_logger.addHandler(handler)
    service_logger.setLevel(_level(settings.LOG_LEVEL))
    service_logger.propagate = False
    logging.getLogger(ENGINE_LOGGER).setLevel(_level(settings.ENGINE_LOG_LEVEL))
    return service_logger
