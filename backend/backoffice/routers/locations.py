"""Cities, properties and units router, plus the cascade filter options."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backoffice.core.database import get_db
from backoffice.core.errors import FieldValidationError
from backoffice.core.security import require_permission, AuthenticatedUser
from backoffice.models.property import City, Property, Unit
from backoffice.schemas.location import (
    CityCreate,
    CityResponse,
    LocationOptions,
    PropertyCreate,
    PropertyResponse,
    UnitCreate,
    UnitResponse,
)
from backoffice.services.locations import LocationService, location_names

router = APIRouter(tags=["locations"])


def _property_response(prop: Property) -> PropertyResponse:
    return PropertyResponse.model_validate(prop).model_copy(
        update={"city_name": prop.city.name if prop.city else None}
    )


def _unit_response(unit: Unit) -> UnitResponse:
    names = location_names(unit)
    return UnitResponse.model_validate(unit).model_copy(
        update={"property_name": names["property_name"], "city_name": names["city_name"]}
    )


@router.get("/locations/options", response_model=LocationOptions)
async def get_location_options(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("locations.index")),
):
    """Flat city/property/unit lists and the parent -> children maps."""
    return await LocationService(db).options()


# --- Cities ---

@router.post("/cities", response_model=CityResponse, status_code=status.HTTP_201_CREATED)
async def create_city(
    data: CityCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("locations.store")),
):
    """Create a city."""
    city = City(name=data.name)
    db.add(city)
    await db.commit()
    await db.refresh(city)

    return CityResponse.model_validate(city)


@router.get("/cities", response_model=List[CityResponse])
async def list_cities(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("locations.index")),
):
    """List active cities."""
    result = await db.execute(
        select(City).where(City.is_archived.is_(False)).order_by(City.name)
    )
    return [CityResponse.model_validate(c) for c in result.scalars().all()]


# --- Properties ---

@router.post("/properties", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_property(
    data: PropertyCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("locations.store")),
):
    """Create a property inside a city."""
    result = await db.execute(
        select(City).where(City.id == data.city_id, City.is_archived.is_(False))
    )
    city = result.scalar_one_or_none()

    if not city:
        raise FieldValidationError("city_id", "The selected city does not exist.")

    prop = Property(city_id=city.id, name=data.name)
    db.add(prop)
    await db.commit()
    await db.refresh(prop)

    return PropertyResponse.model_validate(prop).model_copy(update={"city_name": city.name})


@router.get("/properties", response_model=List[PropertyResponse])
async def list_properties(
    city_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("locations.index")),
):
    """List active properties, optionally only those in one city."""
    query = (
        select(Property)
        .options(selectinload(Property.city))
        .where(Property.is_archived.is_(False))
    )
    if city_id is not None:
        query = query.where(Property.city_id == city_id)

    result = await db.execute(query.order_by(Property.name))
    return [_property_response(p) for p in result.scalars().all()]


# --- Units ---

@router.post("/units", response_model=UnitResponse, status_code=status.HTTP_201_CREATED)
async def create_unit(
    data: UnitCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("locations.store")),
):
    """Create a unit within a property."""
    result = await db.execute(
        select(Property).where(Property.id == data.property_id, Property.is_archived.is_(False))
    )
    if not result.scalar_one_or_none():
        raise FieldValidationError("property_id", "The selected property does not exist.")

    unit = Unit(
        property_id=data.property_id,
        unit_name=data.unit_name,
        vacant=data.vacant,
        listed=data.listed,
        total_applications=data.total_applications,
    )
    db.add(unit)
    await db.commit()

    return _unit_response(await LocationService(db).get_unit(unit.id))


@router.get("/units", response_model=List[UnitResponse])
async def list_units(
    property_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("locations.index")),
):
    """List active units, optionally only those in one property."""
    query = (
        select(Unit)
        .options(selectinload(Unit.property).selectinload(Property.city))
        .where(Unit.is_archived.is_(False))
    )
    if property_id is not None:
        query = query.where(Unit.property_id == property_id)

    result = await db.execute(query.order_by(Unit.unit_name))
    return [_unit_response(u) for u in result.scalars().all()]
