"""Unit tests for feature list normalization."""

import pytest

from acestore.shared.config_provider import MappingTables
from acestore.shared.normalization import (
    map_value,
    normalize_feature_lists,
    normalize_features,
)
from acestore.shared.store_record import decode_store_record


def _features(*descriptions):
    return [{'featureLongDesc': d} for d in descriptions]


class TestMapValue:
    """Test single value remapping."""

    def test_no_table_passes_through(self):
        """Test None table leaves value unchanged, even when exclusive."""
        assert map_value('Paint', None) == 'Paint'
        assert map_value('Paint', None, exclusive=True) == 'Paint'

    def test_mapped_value_substituted(self):
        """Test a table entry replaces the value."""
        assert map_value('Paint', {'Paint': 'Paint & Supplies'}) == 'Paint & Supplies'

    def test_unmapped_non_exclusive_passes_through(self):
        """Test unmapped values survive when exclusive is off."""
        assert map_value('Tools', {'Paint': 'Paint & Supplies'}) == 'Tools'

    def test_unmapped_exclusive_dropped(self):
        """Test unmapped values become None when exclusive is on."""
        assert map_value('Tools', {'Paint': 'Paint & Supplies'}, exclusive=True) is None

    def test_empty_table_exclusive_drops_everything(self):
        """Test an empty table with exclusive drops all values."""
        assert map_value('Paint', {}, exclusive=True) is None

    def test_unhashable_value(self):
        """Test unhashable values are treated as unmapped."""
        assert map_value(['x'], {'x': 'y'}) == ['x']
        assert map_value(['x'], {'x': 'y'}, exclusive=True) is None


class TestNormalizeFeatureLists:
    """Test merging, remapping and deduplication."""

    def test_merge_and_dedupe_without_table(self):
        """Test standard and custom lists merge into a unique set."""
        result = normalize_feature_lists(_features('Paint', 'Tools'), _features('Tools', 'Keys'))

        assert set(result) == {'Paint', 'Tools', 'Keys'}
        assert len(result) == 3

    def test_exclusive_mapping(self):
        """Test only mapped values survive an exclusive table."""
        result = normalize_feature_lists(
            _features('Paint', 'Tools'),
            _features('Tools', 'Keys'),
            table={'Paint': 'Paint & Supplies'},
            exclusive=True,
        )
        assert result == ['Paint & Supplies']

    def test_non_exclusive_mapping(self):
        """Test mapped values substituted and the rest kept."""
        result = normalize_feature_lists(
            _features('Paint', 'Tools'),
            _features('Keys'),
            table={'Paint': 'Paint & Supplies'},
        )
        assert set(result) == {'Paint & Supplies', 'Tools', 'Keys'}

    def test_mapping_collapses_duplicates(self):
        """Test two raw values mapped to one label appear once."""
        result = normalize_feature_lists(
            _features('Lawn', 'Garden'),
            [],
            table={'Lawn': 'Lawn & Garden', 'Garden': 'Lawn & Garden'},
        )
        assert result == ['Lawn & Garden']

    @pytest.mark.parametrize("standard,custom", [
        (None, None),
        ({'featureLongDesc': 'Paint'}, None),
        ('Paint', 42),
        ([], []),
    ])
    def test_missing_or_non_list_inputs_are_empty(self, standard, custom):
        """Test absent or non-list groups are treated as empty."""
        assert normalize_feature_lists(standard, custom) == []

    def test_one_side_missing(self):
        """Test a missing custom list still yields the standard list."""
        assert normalize_feature_lists(_features('Paint'), None) == ['Paint']

    def test_empty_results_removed(self):
        """Test empty descriptions, missing descriptions and empty mappings are dropped."""
        items = _features('', 'Paint') + [{}, 'not an object', {'featureLongDesc': None}]
        result = normalize_feature_lists(items, _features('Drop'), table={'Drop': '', 'Paint': 'Paint'})
        assert result == ['Paint']

    def test_stable_across_calls(self):
        """Test repeated calls on the same input give identical lists."""
        standard = _features('Tools', 'Paint', 'Keys', 'Paint')
        custom = _features('Hardware', 'Tools')

        first = normalize_feature_lists(standard, custom)
        second = normalize_feature_lists(standard, custom)

        assert first == second == ['Tools', 'Paint', 'Keys', 'Hardware']


class TestNormalizeFeatures:
    """Test per-category normalization of a decoded record."""

    @pytest.fixture
    def record(self, store_body):
        return decode_store_record(store_body)

    def test_departments(self, record):
        """Test departments merge departments and customDepartments."""
        result = normalize_features(record, 'departments', MappingTables())
        assert set(result) == {'Paint', 'Tools', 'Keys'}

    def test_services_with_non_list_custom(self, record):
        """Test a custom list sent as an object is ignored."""
        result = normalize_features(record, 'services', MappingTables())
        assert set(result) == {'Key Cutting', 'Propane Exchange'}

    def test_brands_with_null_custom(self, record):
        """Test a null custom brand list is ignored."""
        assert normalize_features(record, 'brands', MappingTables()) == ['Weber']

    def test_category_table_used(self, record):
        """Test each category uses only its own table."""
        tables = MappingTables(
            departments={'Paint': 'Paint & Supplies'},
            services={'Paint': 'Should not apply'},
            exclusive=True,
        )
        assert normalize_features(record, 'departments', tables) == ['Paint & Supplies']
        assert normalize_features(record, 'services', tables) == []
        # No brands table: passes through even though exclusive is set
        assert normalize_features(record, 'brands', tables) == ['Weber']

    def test_unknown_category(self, record):
        """Test unknown category names are rejected."""
        with pytest.raises(ValueError, match="Unknown feature category"):
            normalize_features(record, 'aisles', MappingTables())
