"""
Logging Setup

Console + rotating file logging shared by scripts and services.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from config.settings import LOG_BACKUP_DAYS, LOG_DIR, LOG_FILE, LOG_LEVEL


def setup_logging(
    level: str = LOG_LEVEL,
    log_dir: Optional[Path] = None,
    log_to_file: bool = True,
) -> None:
    """
    Setup logging with rotation.

    Logs to both console and file with rotation:
    - Daily rotation
    - Keep LOG_BACKUP_DAYS days of logs

    Args:
        level: Root log level name ("INFO", "DEBUG", ...)
        log_dir: Directory for log files (None = LOG_DIR from settings)
        log_to_file: If False, only log to console
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s | %(name)s"))
    logger.addHandler(console_handler)

    if not log_to_file:
        return

    file_format = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s | %(name)s",
    )
    target_dir = Path(log_dir) if log_dir else LOG_DIR

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        file_handler = _create_file_handler(target_dir / LOG_FILE)
    except (PermissionError, FileNotFoundError):
        # Fallback to local logs directory if target not writable
        fallback_dir = Path("logs")
        fallback_dir.mkdir(exist_ok=True)
        fallback_log = fallback_dir / LOG_FILE
        logger.warning(
            f"Cannot write to {target_dir}, using fallback: {fallback_log}",
        )
        file_handler = _create_file_handler(fallback_log)

    file_handler.setLevel(level)
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)


def _create_file_handler(path: Path) -> logging.Handler:
    return logging.handlers.TimedRotatingFileHandler(
        str(path),
        when="midnight",
        interval=1,
        backupCount=LOG_BACKUP_DAYS,
        encoding="utf-8",
    )
