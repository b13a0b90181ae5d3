"""Ace Hardware store information.

Looks up one store through the store locator (or the local response
cache) and exposes an application-friendly view of it: formatted hours
and phone number, a single address string, and merged, remapped feature
lists.

Usage:
    settings = Settings.from_env()
    store = load_store(5784, settings)
    store.hours['Monday']     # '7:00am - 8:00pm'
    store.departments         # ['Paint', 'Hardware', ...]
"""

import logging
from dataclasses import asdict, dataclass
from functools import partial
from typing import Any, Dict, List, Optional, Tuple

from config import ace_config
from acestore.shared.cache import StoreCache, fetch_or_load
from acestore.shared.config_provider import ConfigProvider, MappingTables
from acestore.shared.formatters import (
    format_address,
    format_chain,
    format_hours,
    format_owner,
    format_phone_number,
    format_staff,
    map_coords,
)
from acestore.shared.http import Fetcher, fetch_url
from acestore.shared.normalization import normalize_features
from acestore.shared.settings import Settings
from acestore.shared.store_record import RawStoreRecord, decode_store_record

__all__ = [
    'AceStore',
    'load_store',
]


@dataclass(frozen=True)
class AceStore:
    """Normalized view of one Ace Hardware store.

    Every field is derived from a single RawStoreRecord and the mapping
    tables in effect, so two views built from identical inputs are equal.
    """

    store_number: int
    location_name: Optional[str]
    address: str
    city: Optional[str]
    state_code: Optional[str]
    postal_code: Optional[str]
    phone_number: Any
    store_info_url: str
    store_biography: Optional[str]
    owner: str
    staff: List[Dict[str, Any]]
    map_coords: Tuple[Any, Any]
    hours: Dict[str, str]
    departments: List[Any]
    services: List[Any]
    brands: List[Any]
    chain: List[Dict[str, Any]]

    @classmethod
    def from_record(
        cls,
        store_number: int,
        record: RawStoreRecord,
        tables: Optional[MappingTables] = None,
        host: str = ace_config.DEFAULT_HOST,
    ) -> 'AceStore':
        """Derive a store view from a decoded record.

        Args:
            store_number: Store number the record was requested for
            record: Decoded store locator record
            tables: Feature mapping tables (None: no remapping)
            host: Host used for the landing page fallback URL

        Returns:
            AceStore with every field computed
        """
        tables = tables or MappingTables()

        return cls(
            store_number=store_number,
            location_name=record.location_name,
            address=format_address(record.address_lines),
            city=record.city,
            state_code=record.state_code,
            postal_code=record.postal_code,
            phone_number=format_phone_number(record.phone_number),
            store_info_url=record.store_info_url or ace_config.build_landing_page_url(store_number, host),
            store_biography=record.store_biography,
            owner=format_owner(record.owners),
            staff=format_staff(record.staff),
            map_coords=map_coords(record.latitude, record.longitude),
            hours=format_hours(record.hours),
            departments=normalize_features(record, 'departments', tables),
            services=normalize_features(record, 'services', tables),
            brands=normalize_features(record, 'brands', tables),
            chain=format_chain(record.store_chain),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for export."""
        return asdict(self)


def _validate_store_number(store_number: Any) -> int:
    if isinstance(store_number, bool) or not isinstance(store_number, int):
        raise ValueError(f"Store number must be a positive integer, got {store_number!r}")
    if store_number <= 0:
        raise ValueError(f"Store number must be a positive integer, got {store_number}")
    return store_number


def load_store(
    store_number: int,
    settings: Optional[Settings] = None,
    fetcher: Optional[Fetcher] = None,
    config: Optional[ConfigProvider] = None,
    force_refresh: bool = False,
) -> AceStore:
    """Fetch (or load from cache) and normalize one store.

    Args:
        store_number: Positive store number
        settings: Cache, host and timeout settings (defaults: no caching)
        fetcher: Optional callable returning an HttpResult for a URL;
            defaults to fetch_url() with the configured timeout
        config: Optional mapping configuration; loaded from settings when
            omitted
        force_refresh: If True, bypass a fresh cache file

    Returns:
        AceStore for the store

    Raises:
        ValueError: If store_number is not a positive integer
        FetchError: If the store locator returns a non-success status or
            the request fails
        DecodeError: If the response body is not a JSON object
        ConfigError: If the mapping configuration cannot be parsed
    """
    store_number = _validate_store_number(store_number)
    settings = settings or Settings()
    if config is None:
        config = settings.load_config()
    if fetcher is None:
        fetcher = partial(fetch_url, timeout=settings.timeout)

    url = ace_config.build_request_url(store_number, settings.host)
    cache = StoreCache(settings.cache_policy())

    body = fetch_or_load(store_number, url, cache, fetcher, force_refresh=force_refresh)
    record = decode_store_record(body)

    store = AceStore.from_record(store_number, record, config.mapping_tables(), settings.host)
    logging.debug(f"[store {store_number}] Loaded {store.location_name!r}")
    return store
