"""Shared building blocks for store lookups"""

from .cache import (
    CachePolicy,
    StoreCache,
    fetch_or_load,
)

from .config_provider import (
    ConfigProvider,
    FEATURE_CATEGORIES,
    MappingTables,
)

from .constants import (
    CACHE,
    HTTP,
    LOGGING,
)

from .errors import (
    ConfigError,
    DecodeError,
    FetchError,
    StoreInfoError,
)

from .formatters import (
    format_address,
    format_chain,
    format_hours,
    format_owner,
    format_phone_number,
    format_staff,
    format_time,
)

from .http import (
    HttpResult,
    fetch_url,
)

from .logging_config import resolve_level, setup_logging

from .normalization import (
    map_value,
    normalize_feature_lists,
    normalize_features,
)

from .settings import Settings

from .store_record import (
    RawStoreRecord,
    decode_store_record,
)

__all__ = [
    # Cache manager
    'CachePolicy',
    'StoreCache',
    'fetch_or_load',
    # Mapping configuration
    'ConfigProvider',
    'FEATURE_CATEGORIES',
    'MappingTables',
    # Constants
    'CACHE',
    'HTTP',
    'LOGGING',
    # Errors
    'ConfigError',
    'DecodeError',
    'FetchError',
    'StoreInfoError',
    # Formatters
    'format_address',
    'format_chain',
    'format_hours',
    'format_owner',
    'format_phone_number',
    'format_staff',
    'format_time',
    # Fetcher
    'HttpResult',
    'fetch_url',
    # Logging
    'resolve_level',
    'setup_logging',
    # Field normalization
    'map_value',
    'normalize_feature_lists',
    'normalize_features',
    # Settings
    'Settings',
    # Store record
    'RawStoreRecord',
    'decode_store_record',
]
