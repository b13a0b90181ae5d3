"""Runtime settings for store lookups.

Settings are built once at startup, either explicitly or from environment
variables, and passed to load_store(). Nothing here is global.

Environment variables:
    ACE_CACHE_FOLDER    Directory for cached responses (unset: no caching)
    ACE_CACHE_LIFETIME  Cache lifetime in seconds
    ACE_CONFIG          Mapping configuration, as a file path or inline YAML
    ACE_HOST            Store locator host
    ACE_TIMEOUT         Request timeout in seconds
    ACE_LOG_FILE        Rotating log file written by configure_logging()
    ACE_LOG_LEVEL       Root log level name (DEBUG, INFO, WARNING, ...)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from config import ace_config
from acestore.shared.cache import CachePolicy
from acestore.shared.config_provider import ConfigProvider
from acestore.shared.constants import CACHE, HTTP, LOGGING
from acestore.shared.errors import ConfigError
from acestore.shared.logging_config import resolve_level, setup_logging

__all__ = [
    'Settings',
]


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer number of seconds, got {raw!r}") from e


@dataclass
class Settings:
    """Configuration for store lookups"""

    # Caching
    cache_folder: Optional[Path] = None
    cache_lifetime: int = CACHE.STORE_LIFETIME_SECONDS

    # Mapping configuration: path or inline YAML (None: shipped default file)
    config_source: Optional[str] = None

    # Request settings
    host: str = ace_config.DEFAULT_HOST
    timeout: int = HTTP.TIMEOUT

    # Logging
    log_file: Path = Path(LOGGING.DEFAULT_FILE)
    log_level: str = LOGGING.LEVEL

    @classmethod
    def from_env(cls, dotenv_path: Optional[Union[str, Path]] = None, load_env_file: bool = True) -> "Settings":
        """Create settings from environment variables.

        Args:
            dotenv_path: Optional .env file to load first (searched for when omitted)
            load_env_file: If False, only the process environment is read

        Raises:
            ConfigError: If a numeric variable is not an integer, or
                ACE_LOG_LEVEL is not a logging level name
        """
        if load_env_file:
            load_dotenv(dotenv_path)

        cache_folder = os.getenv("ACE_CACHE_FOLDER", "").strip()
        log_file = os.getenv("ACE_LOG_FILE", "").strip()
        log_level = os.getenv("ACE_LOG_LEVEL", "").strip() or LOGGING.LEVEL
        resolve_level(log_level)

        return cls(
            cache_folder=Path(cache_folder) if cache_folder else None,
            cache_lifetime=_int_from_env("ACE_CACHE_LIFETIME", CACHE.STORE_LIFETIME_SECONDS),
            config_source=os.getenv("ACE_CONFIG") or None,
            host=os.getenv("ACE_HOST", "").strip() or ace_config.DEFAULT_HOST,
            timeout=_int_from_env("ACE_TIMEOUT", HTTP.TIMEOUT),
            log_file=Path(log_file) if log_file else Path(LOGGING.DEFAULT_FILE),
            log_level=log_level.upper(),
        )

    def configure_logging(self) -> None:
        """Install the store lookup log handlers for these settings."""
        setup_logging(self.log_file, level=self.log_level)

    def cache_policy(self) -> CachePolicy:
        """Build the cache policy for these settings."""
        folder = Path(self.cache_folder) if self.cache_folder is not None else None
        return CachePolicy(cache_folder=folder, cache_lifetime=self.cache_lifetime)

    def load_config(self) -> ConfigProvider:
        """Load the mapping configuration.

        An existing file path is read as a file; any other value is parsed
        as inline YAML. Without a source the shipped default file is used.
        """
        if self.config_source is None:
            return ConfigProvider.from_path(ace_config.DEFAULT_MAPPINGS_PATH)
        if _is_existing_file(self.config_source):
            return ConfigProvider.from_path(self.config_source)
        return ConfigProvider.from_string(self.config_source)


def _is_existing_file(source: str) -> bool:
    # Long inline YAML can exceed the OS path length limit
    try:
        return Path(source).is_file()
    except (OSError, ValueError):
        return False
