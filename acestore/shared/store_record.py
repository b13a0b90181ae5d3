"""Decoded store locator record.

The store locator returns a loosely shaped JSON object: fields may be
missing, lists may arrive as objects or null, and hour values may be
strings. decode_store_record() checks shapes once, at decode time, so the
formatters and the store view can rely on typed fields with empty
defaults. The full decoded mapping is kept (read-only) so unknown fields
remain available through RawStoreRecord.get().
"""

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from config import ace_config
from acestore.shared.errors import DecodeError
from acestore.shared.formatters import collect_address_lines

__all__ = [
    'RawStoreRecord',
    'decode_store_record',
]


def _empty_mapping() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class RawStoreRecord:
    """One store's decoded locator response.

    Scalar fields are None when absent. Collections default to empty.
    """

    # Identity
    location_name: Optional[str] = None
    store_number: Any = None

    # Location
    address_lines: Tuple[Any, ...] = ()
    city: Optional[str] = None
    state_code: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Any = None
    longitude: Any = None

    # Contact
    phone_number: Optional[str] = None
    store_info_url: Optional[str] = None

    # Narrative
    store_biography: Optional[str] = None
    owners: Tuple[Dict[str, Any], ...] = ()
    staff: Tuple[Dict[str, Any], ...] = ()

    # Scheduling: openingTime<Day>/closingTime<Day> -> HMM/HHMM integer
    hours: Mapping[str, int] = field(default_factory=_empty_mapping)

    # category -> (standard items, custom items)
    features: Mapping[str, Tuple[Tuple[Dict[str, Any], ...], Tuple[Dict[str, Any], ...]]] = field(
        default_factory=_empty_mapping
    )

    store_chain: Tuple[Dict[str, Any], ...] = ()

    # Everything the endpoint sent, including fields not modeled above
    raw: Mapping[str, Any] = field(default_factory=_empty_mapping, repr=False)

    def get(self, key: str, default: Any = None) -> Any:
        """Get any raw field by its JSON name."""
        return self.raw.get(key, default)

    def feature_items(self, category: str) -> Tuple[Tuple[Dict[str, Any], ...], Tuple[Dict[str, Any], ...]]:
        """Get the (standard, custom) feature lists for a category."""
        return self.features.get(category, ((), ()))


def _object_list(value: Any) -> Tuple[Dict[str, Any], ...]:
    """Keep only the objects of a list; anything but a list is empty."""
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, dict))


def _hour_value(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _hours(value: Any) -> Mapping[str, int]:
    if not isinstance(value, dict):
        return MappingProxyType({})
    hours = {}
    for key, raw in value.items():
        parsed = _hour_value(raw)
        if parsed is not None:
            hours[key] = parsed
    return MappingProxyType(hours)


def decode_store_record(body: Union[bytes, str]) -> RawStoreRecord:
    """Parse a store locator response body.

    Args:
        body: Raw response body (UTF-8 JSON)

    Returns:
        RawStoreRecord with shape-checked fields

    Raises:
        DecodeError: If the body is not valid UTF-8 JSON or is not a JSON object
    """
    try:
        if isinstance(body, bytes):
            body = body.decode('utf-8')
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Store locator response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"Store locator response must be a JSON object, got {type(data).__name__}")

    features = {
        category: (_object_list(data.get(standard)), _object_list(data.get(custom)))
        for category, (standard, custom) in ace_config.FEATURE_FIELDS.items()
    }

    record = RawStoreRecord(
        location_name=data.get('locationName'),
        store_number=data.get('storeNumber'),
        address_lines=collect_address_lines(data),
        city=data.get('city'),
        state_code=data.get('stateCode'),
        postal_code=data.get('postalCode'),
        latitude=data.get('latitude'),
        longitude=data.get('longitude'),
        phone_number=data.get('phoneNumber'),
        store_info_url=data.get('storeInfoURL'),
        store_biography=data.get('storeBiography'),
        owners=_object_list(data.get('owner')),
        staff=_object_list(data.get('storeStaff')),
        hours=_hours(data.get('hours')),
        features=MappingProxyType(features),
        store_chain=_object_list(data.get('storeChain')),
        raw=MappingProxyType(data),
    )

    if record.location_name is None:
        logging.debug("Store locator response has no locationName")
    return record
