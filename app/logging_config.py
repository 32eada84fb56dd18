import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from app.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_handlers(log_dir: Path, level: str) -> list[logging.Handler]:
    """Console handler plus <log_dir>/app.log, rotated at 5MB x 5."""
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler()
    file_handler = RotatingFileHandler(
        log_dir / "app.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )

    handlers = [console, file_handler]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(log_dir: Optional[str] = None, level: Optional[str] = None):
    level = (level or settings.LOG_LEVEL).upper()

    root = logging.getLogger()
    root.setLevel(level)

    # already configured (uvicorn reload, tests)
    if root.handlers:
        return

    for handler in build_handlers(Path(log_dir or settings.LOG_DIR), level):
        root.addHandler(handler)
