"""Centralized constants for the store info client.

This module provides frozen dataclass-based configuration groups for the
numbers used throughout the codebase. Using dataclasses provides:
- Type safety and IDE autocompletion
- Immutability (frozen=True prevents accidental modification)
- Clear documentation via docstrings

Usage:
    from acestore.shared.constants import HTTP, CACHE

    timeout = HTTP.TIMEOUT
    lifetime = CACHE.STORE_LIFETIME_SECONDS
"""

from dataclasses import dataclass

__all__ = [
    'CACHE',
    'CacheDefaults',
    'HTTP',
    'HttpDefaults',
    'LOGGING',
    'LoggingDefaults',
]


@dataclass(frozen=True)
class HttpDefaults:
    """HTTP request configuration defaults.

    These values control the single GET issued per store lookup.
    They can be overridden through Settings (ACE_TIMEOUT).
    """

    TIMEOUT: int = 30
    """Request timeout in seconds."""

    SUCCESS_STATUS: int = 200
    """The only status code accepted from the store locator."""

    USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    """User agent sent with store locator requests."""


@dataclass(frozen=True)
class CacheDefaults:
    """Cache expiry settings.

    Controls how long a cached store locator response remains valid
    before it is fetched again.
    """

    STORE_LIFETIME_SECONDS: int = 7 * 24 * 24 * 60
    """Seconds a cached store response stays fresh (241920)."""

    FILE_SUFFIX: str = ".json"
    """Suffix of per-store cache files."""


@dataclass(frozen=True)
class LoggingDefaults:
    """Logging configuration.

    Controls the store lookup log file, its rotation and the log level.
    They can be overridden through Settings (ACE_LOG_FILE, ACE_LOG_LEVEL).
    """

    MAX_BYTES: int = 10 * 1024 * 1024
    """Maximum log file size before rotation (10MB)."""

    BACKUP_COUNT: int = 5
    """Number of backup log files to keep."""

    FORMAT: str = '%(asctime)s - %(levelname)s - %(message)s'
    """Format string shared by file and console handlers."""

    DEFAULT_FILE: str = "logs/acestore.log"
    """Log file used when ACE_LOG_FILE is not set."""

    LEVEL: str = "INFO"
    """Root logger level used when ACE_LOG_LEVEL is not set."""


# Singleton instances for easy import
HTTP = HttpDefaults()
CACHE = CacheDefaults()
LOGGING = LoggingDefaults()
