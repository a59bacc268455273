"""Logging configuration tests."""

import logging

from rich.logging import RichHandler

from maikor_asm.log_setup import setup_logging


class TestSetupLogging:
    def test_rich_console_handler(self):
        logger = setup_logging("maikor_asm.test.rich", console_level=logging.INFO)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.handlers[0].level == logging.INFO

    def test_log_file(self, tmp_path):
        path = tmp_path / "logs" / "asm.log"
        logger = setup_logging("maikor_asm.test.file", log_file=path, rich_console=False)
        logger.debug("assembled %d bytes", 12)
        for handler in logger.handlers:
            handler.flush()
        assert "assembled 12 bytes" in path.read_text(encoding="utf-8")

    def test_second_call_reconfigures(self, tmp_path):
        name = "maikor_asm.test.repeat"
        setup_logging(name, console_level=logging.WARNING, rich_console=False)
        path = tmp_path / "second.log"
        logger = setup_logging(name, console_level=logging.INFO, log_file=path,
                               rich_console=False)
        assert len(logger.handlers) == 2
        assert logger.handlers[-1].level == logging.INFO
        assert isinstance(logger.handlers[0], logging.FileHandler)
        assert path.exists()
