"""Location lookups: filter options, unit resolution and name filters."""

import logging
from collections import defaultdict
from typing import Any, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backoffice.core.errors import FieldValidationError
from backoffice.models.property import City, Property, Unit
from backoffice.services.location_cascade import LocationCascadeFilter, LocationNode

logger = logging.getLogger(__name__)


def unit_load_option(relationship_attr):
    """Eager-load ``<record>.unit -> property -> city`` for display fields."""
    return selectinload(relationship_attr).selectinload(Unit.property).selectinload(Property.city)


def location_names(unit: Optional[Unit]) -> dict[str, Optional[str]]:
    """Denormalized city/property/unit names for a record's unit."""
    prop = unit.property if unit else None
    city = prop.city if prop else None
    return {
        "city_name": city.name if city else None,
        "property_name": prop.name if prop else None,
        "unit_name": unit.unit_name if unit else None,
    }


def matching_unit_ids(
    city: Optional[str] = None,
    property_name: Optional[str] = None,
    unit: Optional[str] = None,
) -> Optional[Select]:
    """Subquery of unit ids whose names partially match, or None when no filter is set."""
    if not (city or property_name or unit):
        return None

    query = select(Unit.id).join(Property, Unit.property_id == Property.id)
    if city:
        query = query.join(City, Property.city_id == City.id).where(City.name.ilike(f"%{city}%"))
    if property_name:
        query = query.where(Property.name.ilike(f"%{property_name}%"))
    if unit:
        query = query.where(Unit.unit_name.ilike(f"%{unit}%"))
    return query


class LocationService:
    """Reads the city/property/unit hierarchy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _load(self) -> tuple[list[City], list[Property], list[Unit]]:
        cities = (
            await self.db.execute(
                select(City).where(City.is_archived.is_(False)).order_by(City.name)
            )
        ).scalars().all()
        properties = (
            await self.db.execute(
                select(Property).where(Property.is_archived.is_(False)).order_by(Property.name)
            )
        ).scalars().all()
        units = (
            await self.db.execute(
                select(Unit).where(Unit.is_archived.is_(False)).order_by(Unit.unit_name)
            )
        ).scalars().all()
        return list(cities), list(properties), list(units)

    async def options(self) -> dict[str, Any]:
        """Filter options in the shape of ``LocationOptions``."""
        cities, properties, units = await self._load()

        properties_by_city: dict[int, list[dict]] = defaultdict(list)
        for prop in properties:
            if prop.city_id is not None:
                properties_by_city[prop.city_id].append({"id": prop.id, "name": prop.name})

        units_by_property: dict[int, list[dict]] = defaultdict(list)
        for unit in units:
            if unit.property_id is not None:
                units_by_property[unit.property_id].append({"id": unit.id, "unit_name": unit.unit_name})

        return {
            "cities": [{"id": c.id, "name": c.name} for c in cities],
            "properties": [{"id": p.id, "name": p.name, "city_id": p.city_id} for p in properties],
            "units": [{"id": u.id, "unit_name": u.unit_name, "property_id": u.property_id} for u in units],
            "propertiesByCity": dict(properties_by_city),
            "unitsByProperty": dict(units_by_property),
        }

    async def cascade(self) -> LocationCascadeFilter:
        cities, properties, units = await self._load()
        return LocationCascadeFilter(
            cities=[LocationNode(c.id, c.name) for c in cities],
            properties=[LocationNode(p.id, p.name, p.city_id) for p in properties],
            units=[LocationNode(u.id, u.unit_name, u.property_id) for u in units],
        )

    async def get_unit(self, unit_id: int) -> Optional[Unit]:
        result = await self.db.execute(
            select(Unit)
            .options(selectinload(Unit.property).selectinload(Property.city))
            .where(Unit.id == unit_id, Unit.is_archived.is_(False))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def resolve_unit(
        self,
        unit_id: int,
        city_id: Optional[int] = None,
        property_id: Optional[int] = None,
    ) -> Unit:
        """Load a unit and check it is reachable from the submitted city/property."""
        unit = await self.get_unit(unit_id)
        if unit is None:
            raise FieldValidationError("unit_id", "The selected unit must exist and not be archived.")

        if city_id is None and property_id is None:
            return unit

        cascade = await self.cascade()
        if city_id is not None and not cascade.has_city(city_id):
            raise FieldValidationError("city_id", "The selected city does not exist.")
        selection = cascade.apply(city_id, property_id, unit_id)
        if property_id is not None and selection.property_id != property_id:
            raise FieldValidationError(
                "property_id", "The selected property does not belong to the selected city."
            )
        if selection.unit_id != unit_id:
            raise FieldValidationError(
                "unit_id", "The selected unit does not belong to the selected property."
            )
        return unit

    async def find_unit_by_names(
        self,
        city: Optional[str],
        property_name: Optional[str],
        unit_name: str,
    ) -> Unit:
        """Exact (case-insensitive) lookup of a unit by its location names."""
        query = (
            select(Unit)
            .join(Property, Unit.property_id == Property.id)
            .options(selectinload(Unit.property).selectinload(Property.city))
            .where(
                Unit.is_archived.is_(False),
                func.lower(Unit.unit_name) == unit_name.strip().lower(),
            )
        )
        if property_name:
            query = query.where(func.lower(Property.name) == property_name.strip().lower())
        if city:
            query = query.join(City, Property.city_id == City.id).where(
                func.lower(City.name) == city.strip().lower()
            )

        unit = (await self.db.execute(query.limit(1))).scalar_one_or_none()
        if unit is None:
            logger.info(f"[LOCATIONS] No unit for city={city!r} property={property_name!r} unit={unit_name!r}")
            raise FieldValidationError(
                "unit_name", "No unit matches the given city, property and unit names."
            )
        return unit
