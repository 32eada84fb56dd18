"""Log handler setup."""

import logging
from logging.handlers import RotatingFileHandler

from app.config import settings
from app.logging_config import build_handlers, setup_logging


def test_build_handlers_writes_to_log_dir(tmp_path):
    log_dir = tmp_path / "nested" / "logs"

    handlers = build_handlers(log_dir, "DEBUG")

    try:
        file_handler = next(h for h in handlers if isinstance(h, RotatingFileHandler))
        assert log_dir.is_dir()
        assert file_handler.baseFilename == str(log_dir / "app.log")
        assert file_handler.maxBytes == 5 * 1024 * 1024
        assert all(h.level == logging.DEBUG for h in handlers)
    finally:
        for h in handlers:
            h.close()


def test_setup_logging_level_from_settings(monkeypatch):
    root = logging.getLogger()
    old_level = root.level
    monkeypatch.setattr(settings, "LOG_LEVEL", "warning")

    try:
        setup_logging()
        assert root.level == logging.WARNING
    finally:
        root.setLevel(old_level)


def test_settings_log_dir_comes_from_env():
    # conftest points LOG_DIR at a temp dir before the app is imported
    assert "mts-logs-" in settings.LOG_DIR
