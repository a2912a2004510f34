"""Tests for site_core.logger_config."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from site_core.logger_config import LOG_BACKUP_COUNT, setup_logger


class TestSetupLogger:
    def test_rotating_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "site.log"
        logger = setup_logger("portfolio.test.file", logging.DEBUG, "%(levelname)s %(message)s",
                              file_path=log_file, use_rotation=True)
        try:
            assert isinstance(logger.handlers[0], RotatingFileHandler)
            assert logger.handlers[0].backupCount == LOG_BACKUP_COUNT
            logger.debug("catalog loaded")
            logger.handlers[0].flush()
            assert "DEBUG catalog loaded" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()

    def test_repeated_setup_does_not_duplicate_handlers(self):
        name = "portfolio.test.console"
        setup_logger(name, logging.INFO, "%(message)s", console_output=True)
        logger = setup_logger(name, logging.INFO, "%(message)s", console_output=True)
        assert len(logger.handlers) == 1
        logger.handlers.clear()

    def test_plain_file_handler(self, tmp_path):
        logger = setup_logger("portfolio.test.plain", logging.INFO, "%(message)s",
                              file_path=tmp_path / "plain.log")
        try:
            assert type(logger.handlers[0]) is logging.FileHandler
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
