"""
Logging Setup Tests
"""

import logging
import logging.handlers

import pytest

from core.logging_setup import setup_logging


@pytest.fixture
def root_logger():
    """Restore root logger handlers and level after each test"""
    logger = logging.getLogger()
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


@pytest.mark.unit
def test_console_only(root_logger):
    before = len(root_logger.handlers)

    setup_logging(level="DEBUG", log_to_file=False)

    assert len(root_logger.handlers) == before + 1
    assert root_logger.level == logging.DEBUG


@pytest.mark.unit
def test_rotating_file_handler(root_logger, tmp_path):
    setup_logging(level="INFO", log_dir=tmp_path / "logs")

    file_handlers = [
        h for h in root_logger.handlers
        if isinstance(h, logging.handlers.TimedRotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert (tmp_path / "logs").is_dir()

    logging.getLogger("tests.logging").info("hello")
    file_handlers[0].flush()
    assert "hello" in (tmp_path / "logs" / "upload.log").read_text()
