"""City, Property, Unit and filter-option schemas."""

from typing import Optional

from pydantic import ConfigDict, Field

from backoffice.schemas.base import BaseSchema, IDMixin, TimestampMixin, YesNoValue


class CityCreate(BaseSchema):
    """Create a new city."""

    name: str = Field(..., min_length=1, max_length=255)


class CityResponse(BaseSchema, IDMixin):
    name: str


class PropertyCreate(BaseSchema):
    """Create a new property inside a city."""

    city_id: int
    name: str = Field(..., min_length=1, max_length=255)


class PropertyResponse(BaseSchema, IDMixin):
    city_id: Optional[int] = None
    name: str
    city_name: Optional[str] = None


class UnitCreate(BaseSchema):
    """Create a new unit inside a property."""

    property_id: int
    unit_name: str = Field(..., min_length=1, max_length=255)
    vacant: YesNoValue = "Yes"
    listed: YesNoValue = "No"
    total_applications: int = Field(0, ge=0)


class UnitResponse(BaseSchema, IDMixin, TimestampMixin):
    property_id: Optional[int] = None
    unit_name: str
    tenants: Optional[str] = None
    vacant: str
    listed: str
    total_applications: int
    property_name: Optional[str] = None
    city_name: Optional[str] = None


# --- filter options ---


class CityOption(BaseSchema, IDMixin):
    name: str


class PropertyOption(BaseSchema, IDMixin):
    name: str
    city_id: Optional[int] = None


class UnitOption(BaseSchema, IDMixin):
    unit_name: str
    property_id: Optional[int] = None


class PropertyRef(BaseSchema, IDMixin):
    name: str


class UnitRef(BaseSchema, IDMixin):
    unit_name: str


class LocationOptions(BaseSchema):
    """Flat location lists plus the parent -> children index maps."""

    model_config = ConfigDict(populate_by_name=True)

    cities: list[CityOption] = []
    properties: list[PropertyOption] = []
    units: list[UnitOption] = []
    properties_by_city: dict[int, list[PropertyRef]] = Field(default_factory=dict, alias="propertiesByCity")
    units_by_property: dict[int, list[UnitRef]] = Field(default_factory=dict, alias="unitsByProperty")
