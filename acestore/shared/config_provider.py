"""Mapping configuration for store feature lists.

The configuration is a YAML document with a top-level ``map`` section:

    map:
      exclusive: false
      departments:
        "Paint": "Paint & Supplies"
      services:
        "Key Cutting": "Keys"
      brands: {}

Each category table rewrites raw feature descriptions. With
``exclusive: true`` any description missing from its category's table is
dropped instead of passed through.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from acestore.shared.errors import ConfigError

__all__ = [
    'ConfigProvider',
    'FEATURE_CATEGORIES',
    'MappingTables',
]

FEATURE_CATEGORIES = ('departments', 'services', 'brands')


@dataclass(frozen=True)
class MappingTables:
    """Remapping rules for the three feature categories.

    A category set to None has no table: its values pass through as-is.
    """

    departments: Optional[Mapping[str, str]] = None
    services: Optional[Mapping[str, str]] = None
    brands: Optional[Mapping[str, str]] = None
    exclusive: bool = False

    def table_for(self, category: str) -> Optional[Mapping[str, str]]:
        """Get the table for a category ('departments', 'services' or 'brands')."""
        if category not in FEATURE_CATEGORIES:
            raise ValueError(f"Unknown feature category: {category}. Available: {list(FEATURE_CATEGORIES)}")
        return getattr(self, category)


class ConfigProvider:
    """Read-only hierarchical configuration loaded from YAML."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = data or {}

    @classmethod
    def from_string(cls, text: str) -> "ConfigProvider":
        """Parse an inline YAML document.

        Raises:
            ConfigError: If the YAML is malformed or is not a mapping
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid mapping configuration: {e}") from e

        # Handle empty YAML documents (safe_load returns None)
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Mapping configuration must be a mapping, got {type(data).__name__}"
            )
        return cls(data)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ConfigProvider":
        """Load a YAML file. A missing file gives an empty configuration."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except FileNotFoundError:
            logging.warning(f"Config file {path} not found, feature remapping disabled")
            return cls()
        except OSError as e:
            raise ConfigError(f"Error loading config file {path}: {e}") from e
        return cls.from_string(text)

    def get(self, *keys: str) -> Any:
        """Walk a key path, e.g. get('map', 'departments').

        Returns:
            The value at the path, or None if any segment is missing
        """
        option: Any = self._data
        for key in keys:
            if not isinstance(option, dict) or key not in option:
                return None
            option = option[key]
        return option

    def mapping_tables(self) -> MappingTables:
        """Build the feature remapping rules from the ``map`` section."""
        tables = {}
        for category in FEATURE_CATEGORIES:
            table = self.get('map', category)
            if isinstance(table, dict):
                tables[category] = MappingProxyType(
                    {str(k): v for k, v in table.items()}
                )
            else:
                tables[category] = None

        return MappingTables(
            exclusive=self.get('map', 'exclusive') is True,
            **tables,
        )
