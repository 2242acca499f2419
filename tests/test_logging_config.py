import logging

from habit_analytics.config import settings
from habit_analytics.logging_config import ENGINE_LOGGER, SERVICE_LOGGER, setup_logging


def _flush(logger):
    for handler in logger.handlers:
        handler.flush()


def test_setup_logging_writes_to_rotating_file(tmp_path):
    log_file = tmp_path / "logs" / "analytics.log"
    logger = setup_logging(str(log_file))
    try:
        logging.getLogger("habit_analytics.routers.analytics").warning("rejected analytics request: test")
        _flush(logger)
        content = log_file.read_text(encoding="utf-8")
        assert "| WARNING | habit_analytics.routers.analytics | rejected analytics request: test" in content
    finally:
        setup_logging()


def test_setup_logging_replaces_handlers():
    setup_logging()
    logger = setup_logging()
    assert logger.name == SERVICE_LOGGER
    assert len(logger.handlers) == 1
    assert logger.propagate is False
    assert logger.level == getattr(logging, settings.LOG_LEVEL.upper())
    assert logging.getLogger(ENGINE_LOGGER).level == getattr(logging, settings.ENGINE_LOG_LEVEL.upper())
