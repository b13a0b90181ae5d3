"""HTTP fetching for the store locator endpoint.

This module provides the default Fetcher: a single blocking GET that
returns the status code and raw body. There is no retry:
a failed fetch is terminal for the lookup that issued it.

Any callable with the signature ``(url) -> HttpResult`` can stand in for
fetch_url(), which is how tests and alternate transports plug in.
"""

import logging
from typing import Callable, Dict, NamedTuple, Optional
from urllib.parse import urlparse

import requests

from acestore.shared.constants import HTTP
from acestore.shared.errors import FetchError

__all__ = [
    'Fetcher',
    'HttpResult',
    'fetch_url',
    'get_headers',
    'sanitize_url',
]


class HttpResult(NamedTuple):
    """Status code and body of a completed HTTP exchange."""

    status_code: int
    body: bytes


Fetcher = Callable[[str], HttpResult]


def sanitize_url(url: str) -> str:
    """Redact query parameters from URL for safe logging.

    Store locator URLs carry an access token in the query string. The
    sanitized URL keeps scheme, host, and path and replaces the query
    with [REDACTED].

    Args:
        url: URL to sanitize

    Returns:
        Sanitized URL with query parameters redacted
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return "[INVALID_URL]"
    safe_url = f"{parsed.scheme}://{parsed.netloc}{parsed.path}"
    if parsed.query:
        safe_url += "?[REDACTED]"
    return safe_url


def get_headers(user_agent: Optional[str] = None) -> Dict[str, str]:
    """Get headers for a store locator request.

    Args:
        user_agent: User agent string (HTTP.USER_AGENT if not provided)

    Returns:
        Dictionary of HTTP headers
    """
    return {
        "User-Agent": user_agent or HTTP.USER_AGENT,
        "Accept": "application/json, text/javascript, */*;q=0.1",
        "Accept-Language": "en-US,en;q=0.5",
        "Connection": "keep-alive",
    }


def fetch_url(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: int = HTTP.TIMEOUT,
) -> HttpResult:
    """Issue one GET request and return its status and body.

    Non-success statuses are returned, not raised; the caller decides what
    counts as success. Headers are passed per request so a shared session
    is never mutated.

    Args:
        url: URL to fetch
        session: Optional requests.Session to reuse. A temporary session is
            created (and closed) when omitted.
        timeout: Request timeout in seconds

    Returns:
        HttpResult with the status code and raw body bytes

    Raises:
        FetchError: With status_code=None when the request itself fails
            (connection error, timeout, invalid URL)
    """
    safe_url = sanitize_url(url)
    owns_session = session is None
    if owns_session:
        session = requests.Session()

    try:
        response = session.get(url, headers=get_headers(), timeout=timeout)
    except requests.exceptions.RequestException as e:
        logging.error(f"Request error for {safe_url}: {type(e).__name__}")
        raise FetchError(None, url=safe_url) from e
    finally:
        if owns_session:
            session.close()

    logging.debug(f"Fetched {safe_url} (HTTP {response.status_code}, {len(response.content)} bytes)")
    return HttpResult(status_code=response.status_code, body=response.content)
