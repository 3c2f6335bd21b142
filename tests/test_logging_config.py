"""Tests for the catalog logging setup."""

import logging

from app.logging_config import configure_logging


class TestConfigureLogging:

    def test_writes_to_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "catalog.log"

        configure_logging(str(log_file), "INFO")
        logging.getLogger("app.test").info("Deleted image a.png")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "app.test - INFO - Deleted image a.png" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_does_not_stack_handlers(self, tmp_path):
        configure_logging(str(tmp_path / "one.log"), "INFO")
        configure_logging(str(tmp_path / "two.log"), "WARNING")

        root = logging.getLogger()
        ours = [h for h in root.handlers if getattr(h, "catalog_handler", False)]
        assert len(ours) == 2
        assert root.level == logging.WARNING
