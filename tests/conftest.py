"""Pytest configuration and fixtures for store lookup tests"""

import copy
import json
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from unittest.mock import Mock

from acestore.shared.http import HttpResult


SAMPLE_STORE_JSON = {
    "locationName": "Westside Ace Hardware",
    "storeNumber": "05784",
    "address1": "123 Main St",
    "address2": "Suite 4",
    "city": "Springfield",
    "stateCode": "IL",
    "postalCode": "62704",
    "latitude": 39.7817,
    "longitude": -89.6501,
    "phoneNumber": "2175551234",
    "storeInfoURL": "",
    "storeBiography": "Family owned since 1952.",
    "owner": [
        {"fullName": "Pat Smith"},
        {"fullName": "Jordan Lee"},
    ],
    "storeStaff": [
        {
            "fullName": "Sam Rivera",
            "personTitle": "Store Manager",
            "personImageUrl": "http://example.com/sam.jpg",
            "personBio": "Paint expert",
        },
        {
            "fullName": "Alex Kim",
            "personTitle": "Assistant Manager",
        },
    ],
    "hours": {
        "openingTimeMon": 700, "closingTimeMon": 2000,
        "openingTimeTue": 700, "closingTimeTue": 2000,
        "openingTimeWed": 700, "closingTimeWed": 2000,
        "openingTimeThu": 700, "closingTimeThu": 2000,
        "openingTimeFri": 700, "closingTimeFri": 2000,
        "openingTimeSat": 800, "closingTimeSat": 1800,
        "openingTimeSun": 900, "closingTimeSun": 1730,
    },
    "departments": [
        {"featureLongDesc": "Paint"},
        {"featureLongDesc": "Tools"},
    ],
    "customDepartments": [
        {"featureLongDesc": "Tools"},
        {"featureLongDesc": "Keys"},
    ],
    "standardServices": [
        {"featureLongDesc": "Key Cutting"},
        {"featureLongDesc": "Propane Exchange"},
    ],
    "customServices": {"featureLongDesc": "Not a list"},
    "specialtyBrands": [
        {"featureLongDesc": "Weber"},
    ],
    "customSpecialtyBrand": None,
    "storeChain": [
        {"locationName": "Downtown", "locationCode": "42"},
    ],
    "regionCode": "MW",
}


@pytest.fixture
def store_json():
    """A complete store locator record (deep copy, safe to mutate)."""
    return copy.deepcopy(SAMPLE_STORE_JSON)


@pytest.fixture
def store_body(store_json):
    """The sample record encoded as a response body."""
    return json.dumps(store_json).encode('utf-8')


@pytest.fixture
def stub_fetcher():
    """Factory for fetchers that record requested URLs.

    Usage:
        fetcher = stub_fetcher(body=b'{}')
        fetcher = stub_fetcher(status_code=503)
        fetcher.calls  # list of URLs requested
    """
    def _create_fetcher(body: bytes = b'{}', status_code: int = 200):
        def fetcher(url):
            fetcher.calls.append(url)
            return HttpResult(status_code=status_code, body=body)
        fetcher.calls = []
        return fetcher

    return _create_fetcher


@pytest.fixture
def mock_response_factory():
    """Factory for creating mock HTTP responses.

    Usage:
        response = mock_response_factory(status_code=200, content=b'{}')
        response = mock_response_factory(status_code=404, text="Not Found")
    """
    def _create_response(
        status_code: int = 200,
        text: str = "",
        content: Optional[bytes] = None,
        headers: Optional[dict] = None,
    ):
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.headers = headers or {}

        if content is not None:
            response.content = content
        else:
            response.content = text.encode('utf-8') if text else b''

        return response

    return _create_response


@pytest.fixture
def clean_env(monkeypatch):
    """Remove ACE_* settings from the environment.

    Each variable is recorded before removal so values added later (e.g.
    by load_dotenv) are also cleared at teardown.
    """
    for name in (
        "ACE_CACHE_FOLDER", "ACE_CACHE_LIFETIME", "ACE_CONFIG", "ACE_HOST", "ACE_TIMEOUT",
        "ACE_LOG_FILE", "ACE_LOG_LEVEL",
    ):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
