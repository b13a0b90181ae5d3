"""Feature list normalization (departments, services, brands).

Each feature category arrives as two parallel lists, a standard list and a
custom list, of objects carrying a ``featureLongDesc``. Normalizing a
category merges both lists, remaps each description through the
category's mapping table, drops empty results and removes duplicates.

The same steps apply to every category; only the field pair and the
mapping table differ.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from config import ace_config
from acestore.shared.config_provider import MappingTables
from acestore.shared.store_record import RawStoreRecord

__all__ = [
    'map_value',
    'normalize_feature_lists',
    'normalize_features',
]


def map_value(value: Any, table: Optional[Mapping[str, Any]], exclusive: bool = False) -> Any:
    """Remap a value through a mapping table.

    Args:
        value: Original value
        table: Map of values ('original' -> 'new'); None disables remapping
        exclusive: If True, values missing from the table map to None

    Returns:
        The mapped value, the original value, or None (unmapped and exclusive)

    Examples:
        >>> map_value('Paint', {'Paint': 'Paint & Supplies'})
        'Paint & Supplies'
        >>> map_value('Tools', {'Paint': 'Paint & Supplies'}, exclusive=True) is None
        True
        >>> map_value('Tools', None, exclusive=True)
        'Tools'
    """
    if table is None:
        return value
    try:
        if value in table:
            return table[value]
    except TypeError:
        # Unhashable descriptions can never be table keys
        pass
    if exclusive:
        return None
    return value


def _dedupe(values: Iterable[Any]) -> List[Any]:
    """Remove duplicates, keeping first occurrences in order."""
    seen: Dict[Any, None] = {}
    result = []
    for value in values:
        try:
            if value in seen:
                continue
            seen[value] = None
        except TypeError:
            if value in result:
                continue
        result.append(value)
    return result


def normalize_feature_lists(
    standard: Optional[Iterable[Any]],
    custom: Optional[Iterable[Any]],
    table: Optional[Mapping[str, Any]] = None,
    exclusive: bool = False,
) -> List[Any]:
    """Merge, remap, filter and deduplicate a standard and a custom feature list.

    Args:
        standard: Standard feature objects (None or non-list: empty)
        custom: Custom feature objects (None or non-list: empty)
        table: Category mapping table, or None for pass-through
        exclusive: Drop descriptions missing from the table

    Returns:
        Unique, non-empty descriptions. Order follows first occurrence
        (standard list first), so repeated calls give the same list.
    """
    items = []
    for group in (standard, custom):
        if isinstance(group, (list, tuple)):
            items.extend(group)

    mapped = []
    for item in items:
        description = item.get(ace_config.FEATURE_DESCRIPTION_FIELD) if isinstance(item, dict) else None
        value = map_value(description, table, exclusive)
        if value:
            mapped.append(value)

    return _dedupe(mapped)


def normalize_features(record: RawStoreRecord, category: str, tables: MappingTables) -> List[Any]:
    """Normalize one feature category of a store record.

    Args:
        record: Decoded store record
        category: 'departments', 'services' or 'brands'
        tables: Active mapping tables

    Returns:
        Normalized descriptions for the category
    """
    standard, custom = record.feature_items(category)
    return normalize_feature_lists(
        standard,
        custom,
        table=tables.table_for(category),
        exclusive=tables.exclusive,
    )
