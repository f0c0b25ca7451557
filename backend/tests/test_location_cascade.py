"""Tests for the cascading city -> property -> unit selection."""
import pytest

from backoffice.services.location_cascade import (
    LocationCascadeFilter,
    LocationNode,
    LocationSelection,
)


@pytest.fixture
def cascade():
    """Springfield: Maple (A1, A2), Oak (B1). Shelbyville: Elm (C1)."""
    return LocationCascadeFilter(
        cities=[LocationNode(1, "Springfield"), LocationNode(2, "Shelbyville")],
        properties=[
            LocationNode(10, "Maple Court", 1),
            LocationNode(11, "Oak Plaza", 1),
            LocationNode(20, "Elm Tower", 2),
        ],
        units=[
            LocationNode(100, "A1", 10),
            LocationNode(101, "A2", 10),
            LocationNode(110, "B1", 11),
            LocationNode(200, "C1", 20),
        ],
    )


class TestOptions:
    def test_no_selection_offers_everything(self, cascade):
        assert len(cascade.property_options) == 3
        assert len(cascade.unit_options) == 4

    def test_city_narrows_properties_and_units(self, cascade):
        cascade.select_city(1)

        assert [p.name for p in cascade.property_options] == ["Maple Court", "Oak Plaza"]
        assert [u.name for u in cascade.unit_options] == ["A1", "A2", "B1"]

    def test_property_narrows_units(self, cascade):
        cascade.select_city(1)
        cascade.select_property(10)

        assert [u.id for u in cascade.unit_options] == [100, 101]

    def test_city_without_properties(self):
        cascade = LocationCascadeFilter([LocationNode(5, "Empty Town")], [], [])
        cascade.select_city(5)

        assert cascade.property_options == []
        assert cascade.unit_options == []


class TestSelection:
    def test_changing_city_clears_descendants(self, cascade):
        cascade.apply(1, 10, 100)
        assert cascade.selection == LocationSelection(1, 10, 100)

        cascade.select_city(2)

        assert cascade.selection == LocationSelection(2, None, None)

    def test_changing_property_clears_unit(self, cascade):
        cascade.apply(1, 10, 100)

        cascade.select_property(11)

        assert cascade.selection == LocationSelection(1, 11, None)

    def test_property_outside_city_is_ignored(self, cascade):
        cascade.select_city(1)

        assert cascade.select_property(20) is False
        assert cascade.property_id is None

    def test_unit_outside_property_is_ignored(self, cascade):
        cascade.apply(1, 10)

        assert cascade.select_unit(200) is False
        assert cascade.unit_id is None

    def test_unknown_city_still_clears_descendants(self, cascade):
        cascade.apply(1, 10, 100)

        cascade.select_city(99)

        assert cascade.selection == LocationSelection(99, None, None)
        assert cascade.property_options == []
        assert cascade.unit_options == []
        assert cascade.has_city(99) is False

    def test_apply_keeps_only_the_valid_prefix(self, cascade):
        selection = cascade.apply(2, 10, 100)

        assert selection == LocationSelection(2, None, None)


def test_from_index_accepts_json_keys():
    """Maps decoded from JSON have string keys."""
    cascade = LocationCascadeFilter.from_index(
        cities=[LocationNode(1, "Springfield")],
        properties_by_city={"1": [{"id": 10, "name": "Maple Court"}]},
        units_by_property={"10": [{"id": 100, "unit_name": "A1"}]},
    )

    cascade.apply(1, 10, 100)

    assert cascade.selection == LocationSelection(1, 10, 100)
    assert [u.name for u in cascade.unit_options] == ["A1"]
