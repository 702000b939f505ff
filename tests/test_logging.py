"""Tests for cinex.logging module."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from cinex.logging import configure_logging, logger


class TestConfigureLogging:
    def test_levels(self) -> None:
        configure_logging(verbose=True)
        assert logger.level == logging.DEBUG
        configure_logging()
        assert logger.level == logging.WARNING

    def test_single_handler(self) -> None:
        configure_logging()
        configure_logging(verbose=True)
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert logger.propagate is False
