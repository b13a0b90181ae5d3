"""Exception types raised while loading store information."""

from typing import Optional

__all__ = [
    'ConfigError',
    'DecodeError',
    'FetchError',
    'StoreInfoError',
]


class StoreInfoError(Exception):
    """Base class for all store info errors."""


class FetchError(StoreInfoError):
    """The store locator did not return a usable response.

    Attributes:
        status_code: HTTP status returned by the endpoint, or None when the
            request failed before a response was received
        url: URL that was requested (query string redacted)
    """

    def __init__(self, status_code: Optional[int], url: str = "", message: str = ""):
        self.status_code = status_code
        self.url = url
        if not message:
            if status_code is None:
                message = f"Request failed for {url}"
            else:
                message = f"Error {status_code}"
        super().__init__(message)


class DecodeError(StoreInfoError):
    """The response body is not a JSON object."""


class ConfigError(StoreInfoError):
    """Mapping configuration or settings could not be loaded."""
