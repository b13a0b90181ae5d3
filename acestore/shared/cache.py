"""File cache for raw store locator responses.

One file per store number, ``<cache_folder>/<store_number>.json``, holding
the response body verbatim. Freshness is judged from the file's
modification time against the configured lifetime.

Usage:
    cache = StoreCache(CachePolicy(cache_folder=Path('cache')))
    body = fetch_or_load(5784, url, cache, fetcher)
"""

import logging
import os
import tempfile
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from acestore.shared.constants import CACHE, HTTP
from acestore.shared.errors import FetchError
from acestore.shared.http import Fetcher, sanitize_url

__all__ = [
    'CachePolicy',
    'StoreCache',
    'fetch_or_load',
]


@dataclass(frozen=True)
class CachePolicy:
    """Where store responses are cached and for how long.

    Attributes:
        cache_folder: Directory holding cache files; None disables caching
        cache_lifetime: Seconds after which a cached file is stale
    """

    cache_folder: Optional[Path] = None
    cache_lifetime: int = CACHE.STORE_LIFETIME_SECONDS

    @property
    def enabled(self) -> bool:
        return self.cache_folder is not None


class StoreCache:
    """Read, write, and age-check cached store responses.

    Files are never deleted; a stale file is simply overwritten by the
    next successful fetch.

    Args:
        policy: Cache location and lifetime
        clock: Returns the current time in epoch seconds
    """

    def __init__(self, policy: CachePolicy, clock: Callable[[], float] = time.time):
        self.policy = policy
        self.clock = clock

    def path_for(self, store_number: int) -> Optional[Path]:
        """Get path to the cache file for a store, or None when caching is disabled."""
        if not self.policy.enabled:
            return None
        return Path(self.policy.cache_folder) / f"{store_number}{CACHE.FILE_SUFFIX}"

    def _modified_at(self, store_number: int) -> Optional[float]:
        path = self.path_for(store_number)
        if path is None:
            return None
        try:
            return path.stat().st_mtime
        except OSError:
            return None

    def is_fresh(self, store_number: int) -> bool:
        """Check if a readable cache file exists and is within its lifetime.

        A file exactly ``cache_lifetime`` seconds old is still fresh.
        """
        mtime = self._modified_at(store_number)
        if mtime is None:
            return False
        if not os.access(self.path_for(store_number), os.R_OK):
            return False
        return self.clock() - mtime <= self.policy.cache_lifetime

    def read(self, store_number: int) -> Optional[bytes]:
        """Load the cached body for a store.

        Returns:
            Cached bytes, or None if caching is disabled or the file
            cannot be read
        """
        path = self.path_for(store_number)
        if path is None:
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            logging.warning(f"[store {store_number}] Error reading cache file {path}: {e}")
            return None

    def write(self, store_number: int, body: bytes) -> bool:
        """Persist a response body for a store.

        The body is written to a temporary file in the cache folder and
        then moved over the cache file, so a failed write never leaves a
        truncated cache file behind. The cache folder is not created.

        Returns:
            True if the cache file was written, False otherwise
        """
        path = self.path_for(store_number)
        if path is None:
            return False

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{store_number}.", suffix=".tmp", dir=str(path.parent)
            )
            with os.fdopen(fd, 'wb') as f:
                f.write(body)
            os.replace(tmp_name, path)
        except OSError as e:
            logging.warning(f"[store {store_number}] Failed to save cache file {path}: {e}")
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
            return False

        logging.debug(f"[store {store_number}] Saved {len(body)} bytes to cache: {path}")
        return True

    def get_metadata(self, store_number: int) -> Optional[Dict[str, Any]]:
        """Get cache metadata without loading the body.

        Returns:
            Dict with 'path', 'modified_at', 'age_seconds', 'expired' or
            None if there is no cache file
        """
        mtime = self._modified_at(store_number)
        if mtime is None:
            return None
        age = self.clock() - mtime
        return {
            'path': str(self.path_for(store_number)),
            'modified_at': datetime.fromtimestamp(mtime).isoformat(),
            'age_seconds': age,
            'expired': age > self.policy.cache_lifetime,
        }

    def miss_reason(self, store_number: int) -> str:
        """Describe why a lookup would bypass the cache (for logging)."""
        if not self.policy.enabled:
            return "caching disabled"
        mtime = self._modified_at(store_number)
        if mtime is None:
            return "no cache file"
        if not os.access(self.path_for(store_number), os.R_OK):
            return "cache file unreadable"
        return f"cache file stale ({int(self.clock() - mtime)}s old, max: {self.policy.cache_lifetime}s)"


def fetch_or_load(
    store_number: int,
    url: str,
    cache: StoreCache,
    fetcher: Fetcher,
    force_refresh: bool = False,
) -> bytes:
    """Return the response body for a store, from cache when fresh.

    On a miss the fetcher is called once; a non-success status raises
    FetchError. A successful body is written to the cache on a best-effort
    basis: a write failure is logged and the fetched body is still
    returned.

    Args:
        store_number: Store being looked up
        url: Store locator request URL
        cache: Cache to consult and update
        fetcher: Callable returning an HttpResult for a URL
        force_refresh: If True, ignore any cached body

    Returns:
        Raw response body

    Raises:
        FetchError: If the endpoint returns a non-success status or the
            request fails
    """
    if not force_refresh and cache.is_fresh(store_number):
        body = cache.read(store_number)
        if body is not None:
            logging.debug(f"[store {store_number}] Loaded response from cache")
            return body

    reason = "refresh requested" if force_refresh else cache.miss_reason(store_number)
    logging.info(f"[store {store_number}] Cache miss ({reason}), fetching from store locator")

    result = fetcher(url)
    if result.status_code != HTTP.SUCCESS_STATUS:
        safe_url = sanitize_url(url)
        logging.error(f"[store {store_number}] Store locator returned HTTP {result.status_code} for {safe_url}")
        raise FetchError(result.status_code, url=safe_url)

    cache.write(store_number, result.body)
    return result.body
