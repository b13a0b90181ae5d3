"""Logging configuration and setup.

Store lookups log through the root logger with module-level
``logging.<level>()`` calls, each message prefixed with ``[store <n>]``.
Applications call setup_logging() once at startup, usually through
Settings.configure_logging() so ACE_LOG_FILE and ACE_LOG_LEVEL apply.
"""

import logging
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Union

from acestore.shared.constants import LOGGING
from acestore.shared.errors import ConfigError

__all__ = [
    'resolve_level',
    'setup_logging',
]


_logging_lock = threading.Lock()


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name ('debug', 'INFO', ...) or number into a logging level.

    Raises:
        ConfigError: If the name is not a standard logging level
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ConfigError(f"Unknown log level: {level!r}")
    return resolved


def _store_file_handlers(root_logger: logging.Logger, log_path: Path) -> List[RotatingFileHandler]:
    target = str(log_path.absolute())
    return [
        h for h in root_logger.handlers
        if isinstance(h, RotatingFileHandler) and h.baseFilename == target
    ]


def _has_console_handler(root_logger: logging.Logger) -> bool:
    # FileHandler subclasses StreamHandler
    return any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in root_logger.handlers
    )


def setup_logging(
    log_file: Union[str, Path] = LOGGING.DEFAULT_FILE,
    max_bytes: int = LOGGING.MAX_BYTES,
    backup_count: int = LOGGING.BACKUP_COUNT,
    level: Union[int, str] = LOGGING.LEVEL,
) -> None:
    """Attach a rotating store-lookup log file and a console handler to the root logger.

    Repeated calls do not stack handlers. A handler already writing to
    log_file is kept when its rotation settings match and replaced when
    they differ.

    Args:
        log_file: Path to log file (ACE_LOG_FILE)
        max_bytes: Maximum file size before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
        level: Root logger level, as a number or a name (ACE_LOG_LEVEL)

    Raises:
        ConfigError: If level is an unknown level name
    """
    resolved_level = resolve_level(level)
    log_path = Path(log_file)

    with _logging_lock:
        root_logger = logging.getLogger()
        root_logger.setLevel(resolved_level)
        formatter = logging.Formatter(LOGGING.FORMAT)

        current = _store_file_handlers(root_logger, log_path)
        keep = [h for h in current if h.maxBytes == max_bytes and h.backupCount == backup_count]
        for handler in current:
            if handler not in keep[:1]:
                root_logger.removeHandler(handler)
                handler.close()

        if not keep:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8',
            )
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logging.debug(f"[logging] Writing store lookup log to {log_path}")

        if not _has_console_handler(root_logger):
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)
