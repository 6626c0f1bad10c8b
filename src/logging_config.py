"""Root logger setup for the command-line runners."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from src.team_balancer.config import (
    LOG_BACKUP_COUNT,
    LOG_DATE_FORMAT,
    LOG_DIR,
    LOG_FILE_NAME,
    LOG_FORMAT,
    LOG_MAX_BYTES,
)

FILE_HANDLER_NAME = "team_balancer.file"
CONSOLE_HANDLER_NAME = "team_balancer.console"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(h.get_name() == name for h in logger.handlers)


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Attach the rotating file and console handlers to the root logger.

    Handlers are identified by name, so handlers installed by something
    else (e.g. a test runner) don't stop setup, and repeated calls don't
    stack duplicates.

    Args:
        log_level: Level name for the root logger and console output.
            Unknown names fall back to INFO.
        log_dir: Directory for the log file. Defaults to ``LOG_DIR``.

    Returns:
        Path of the log file.
    """
    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    if _has_handler(root_logger, FILE_HANDLER_NAME):
        return log_file

    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if not _has_handler(root_logger, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(
        "Logging initialized (level=%s, file=%s)", log_level, log_file,
    )
    return log_file
