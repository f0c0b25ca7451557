"""Cascading city -> property -> unit selection.

Options for each selector are derived from the selection of its ancestor.
Choosing a new city always clears the property and unit, and a property or
unit that is not among the currently narrowed options is ignored.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence


@dataclass(frozen=True)
class LocationNode:
    """A city, property or unit. ``parent_id`` is the owning city/property."""

    id: int
    name: str
    parent_id: Optional[int] = None


@dataclass(frozen=True)
class LocationSelection:
    city_id: Optional[int] = None
    property_id: Optional[int] = None
    unit_id: Optional[int] = None


def _node_from_mapping(item: Mapping[str, Any], parent_id: Optional[int]) -> LocationNode:
    name = item.get("name") or item.get("unit_name") or item.get("property_name") or ""
    return LocationNode(id=int(item["id"]), name=name, parent_id=parent_id)


class LocationCascadeFilter:
    """In-memory cascade over flat location lists."""

    def __init__(
        self,
        cities: Iterable[LocationNode],
        properties: Iterable[LocationNode],
        units: Iterable[LocationNode],
    ):
        self.cities = list(cities)
        self.properties = list(properties)
        self.units = list(units)
        self.city_id: Optional[int] = None
        self.property_id: Optional[int] = None
        self.unit_id: Optional[int] = None

    @classmethod
    def from_index(
        cls,
        cities: Iterable[LocationNode],
        properties_by_city: Mapping[Any, Sequence[Mapping[str, Any]]],
        units_by_property: Mapping[Any, Sequence[Mapping[str, Any]]],
    ) -> "LocationCascadeFilter":
        """Build from the ``propertiesByCity`` / ``unitsByProperty`` maps.

        Map keys may be ints or their string form (JSON object keys).
        """
        properties = [
            _node_from_mapping(item, int(city_id))
            for city_id, items in properties_by_city.items()
            for item in items
        ]
        units = [
            _node_from_mapping(item, int(property_id))
            for property_id, items in units_by_property.items()
            for item in items
        ]
        return cls(cities, properties, units)

    # --- derived option lists ---

    def properties_for_city(self, city_id: Optional[int]) -> list[LocationNode]:
        return [p for p in self.properties if p.parent_id == city_id]

    def units_for_property(self, property_id: Optional[int]) -> list[LocationNode]:
        return [u for u in self.units if u.parent_id == property_id]

    @property
    def property_options(self) -> list[LocationNode]:
        if self.city_id is None:
            return list(self.properties)
        return self.properties_for_city(self.city_id)

    @property
    def unit_options(self) -> list[LocationNode]:
        if self.property_id is not None:
            return self.units_for_property(self.property_id)
        if self.city_id is not None:
            reachable = {p.id for p in self.property_options}
            return [u for u in self.units if u.parent_id in reachable]
        return list(self.units)

    # --- selection ---

    def has_city(self, city_id: Optional[int]) -> bool:
        return any(c.id == city_id for c in self.cities)

    def select_city(self, city_id: Optional[int]) -> None:
        """Always taken; an unknown city simply has no properties."""
        self.city_id = city_id
        self.property_id = None
        self.unit_id = None

    def select_property(self, property_id: Optional[int]) -> bool:
        if property_id is not None and not any(p.id == property_id for p in self.property_options):
            return False
        self.property_id = property_id
        self.unit_id = None
        return True

    def select_unit(self, unit_id: Optional[int]) -> bool:
        if unit_id is not None and not any(u.id == unit_id for u in self.unit_options):
            return False
        self.unit_id = unit_id
        return True

    def apply(
        self,
        city_id: Optional[int] = None,
        property_id: Optional[int] = None,
        unit_id: Optional[int] = None,
    ) -> LocationSelection:
        """Select top-down and return whatever selection survived."""
        self.select_city(city_id)
        self.select_property(property_id)
        self.select_unit(unit_id)
        return self.selection

    @property
    def selection(self) -> LocationSelection:
        return LocationSelection(self.city_id, self.property_id, self.unit_id)
