"""Display formatting for raw store locator fields.

Pure functions: each takes raw values and returns display-ready values
without touching the network, the cache, or configuration.
"""

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from config import ace_config

__all__ = [
    'collect_address_lines',
    'format_address',
    'format_chain',
    'format_hours',
    'format_owner',
    'format_phone_number',
    'format_staff',
    'format_time',
    'map_coords',
    'parse_location_code',
]

PHONE_PATTERN = re.compile(r'([0-9]{3})([0-9]{3})([0-9]{4})')
LEADING_INT_PATTERN = re.compile(r'^\s*([+-]?\d+)')

HOURS_SEPARATOR = ' - '
ADDRESS_SEPARATOR = ','
OWNER_SEPARATOR = ', '


def format_time(value: Optional[int]) -> str:
    """Format an HMM/HHMM time-of-day integer.

    Values above 1200 are afternoon times: 1200 is subtracted and 'pm'
    appended. Everything else, 1200 included, gets 'am'.

    Examples:
        >>> format_time(900)
        '9:00am'
        >>> format_time(1730)
        '5:30pm'
        >>> format_time(1200)
        '12:00am'
    """
    if value is None:
        return ''
    if value > 1200:
        text = f"{(value - 1200) / 100:.2f}pm"
    else:
        text = f"{value / 100:.2f}am"
    return text.replace('.', ':')


def format_hours(hours: Mapping[str, int]) -> Dict[str, str]:
    """Build 'open - close' strings for every weekday.

    Args:
        hours: openingTime<Day>/closingTime<Day> keys (Day = Mon..Sun)
            mapped to HMM/HHMM integers

    Returns:
        Dict keyed by full weekday name, Monday first, always all seven
        days. A missing time formats as an empty string.
    """
    formatted = {}
    for suffix, day in ace_config.WEEKDAYS:
        opening = format_time(hours.get(f"{ace_config.OPENING_TIME_PREFIX}{suffix}"))
        closing = format_time(hours.get(f"{ace_config.CLOSING_TIME_PREFIX}{suffix}"))
        formatted[day] = f"{opening}{HOURS_SEPARATOR}{closing}"
    return formatted


def format_phone_number(phone: Any) -> Any:
    """Format a 10 digit phone string as (XXX) XXX-XXXX.

    Anything else, non-strings included, is returned unchanged.

    Examples:
        >>> format_phone_number('5555551234')
        '(555) 555-1234'
        >>> format_phone_number('555-1234')
        '555-1234'
    """
    if not isinstance(phone, str):
        return phone
    match = PHONE_PATTERN.fullmatch(phone)
    if not match:
        return phone
    area, exchange, line = match.groups()
    return f"({area}) {exchange}-{line}"


def collect_address_lines(fields: Mapping[str, Any]) -> Tuple[Any, ...]:
    """Collect address1, address2, ... stopping at the first missing index."""
    lines = []
    index = 1
    while f"{ace_config.ADDRESS_FIELD_PREFIX}{index}" in fields:
        lines.append(fields[f"{ace_config.ADDRESS_FIELD_PREFIX}{index}"])
        index += 1
    return tuple(lines)


def format_address(lines: Iterable[Any]) -> str:
    """Join address lines with a bare comma, skipping null lines.

    Empty strings are kept, so they still contribute a separator.

    Examples:
        >>> format_address(['123 Main St', 'Suite 4'])
        '123 Main St,Suite 4'
        >>> format_address([])
        ''
    """
    return ADDRESS_SEPARATOR.join(str(line) for line in lines if line is not None)


def format_owner(owners: Iterable[Mapping[str, Any]]) -> str:
    """Join owner full names with ', ' in input order."""
    names = [owner.get('fullName') for owner in owners]
    return OWNER_SEPARATOR.join(str(name) for name in names if name)


def format_staff(staff: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Project staff members to fullName, personTitle and personImageUrl."""
    return [
        {
            'fullName': person.get('fullName'),
            'personTitle': person.get('personTitle'),
            'personImageUrl': person.get('personImageUrl'),
        }
        for person in staff
    ]


def parse_location_code(value: Any) -> int:
    """Coerce a chain location code to int.

    Numeric strings convert directly; otherwise leading digits are used,
    and a value with no leading digits is 0.

    Examples:
        >>> parse_location_code('42')
        42
        >>> parse_location_code('42a')
        42
        >>> parse_location_code(None)
        0
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        match = LEADING_INT_PATTERN.match(value)
        if match:
            return int(match.group(1))
    return 0


def format_chain(chain: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Project chain entries to locationName and an integer locationCode."""
    return [
        {
            'locationName': store.get('locationName'),
            'locationCode': parse_location_code(store.get('locationCode')),
        }
        for store in chain
    ]


def map_coords(latitude: Any, longitude: Any) -> Tuple[Any, Any]:
    """Pair latitude and longitude, unchanged."""
    return (latitude, longitude)
