"""Move-out schemas."""

import datetime as dt
from typing import Annotated, Optional

from pydantic import BeforeValidator, Field

from backoffice.models.enums import CleaningStatus, MoveOutFormStatus
from backoffice.schemas.base import (
    BaseSchema,
    IDMixin,
    TimestampMixin,
    LocationDisplayMixin,
    DateValue,
    OptionalId,
    OptionalText,
    OptionalYesNo,
    blank_to_none,
)

OptionalCleaning = Annotated[Optional[CleaningStatus], BeforeValidator(blank_to_none)]
OptionalFormStatus = Annotated[Optional[MoveOutFormStatus], BeforeValidator(blank_to_none)]


class MoveOutFields(BaseSchema):
    tenants_name: OptionalText = Field(None, max_length=255)
    move_out_date: DateValue = None
    lease_status: OptionalText = Field(None, max_length=255)
    date_lease_ending_on_buildium: DateValue = None
    keys_location: OptionalText = Field(None, max_length=255)
    utilities_under_our_name: OptionalYesNo = None
    date_utility_put_under_our_name: DateValue = None
    walkthrough: OptionalText = None
    repairs: OptionalText = None
    send_back_security_deposit: OptionalText = Field(None, max_length=255)
    notes: OptionalText = None
    cleaning: OptionalCleaning = None
    list_the_unit: OptionalText = Field(None, max_length=255)
    move_out_form: OptionalFormStatus = None


class MoveOutCreate(MoveOutFields):
    """Create a move-out."""

    city_id: OptionalId = None
    property_id: OptionalId = None
    unit_id: int


class MoveOutUpdate(MoveOutFields):
    """Update move-out."""

    city_id: OptionalId = None
    property_id: OptionalId = None
    unit_id: OptionalId = None


class MoveOutResponse(BaseSchema, IDMixin, TimestampMixin, LocationDisplayMixin):
    unit_id: Optional[int] = None
    tenants_name: Optional[str] = None
    move_out_date: Optional[dt.date] = None
    lease_status: Optional[str] = None
    date_lease_ending_on_buildium: Optional[dt.date] = None
    keys_location: Optional[str] = None
    utilities_under_our_name: Optional[str] = None
    date_utility_put_under_our_name: Optional[dt.date] = None
    walkthrough: Optional[str] = None
    repairs: Optional[str] = None
    send_back_security_deposit: Optional[str] = None
    notes: Optional[str] = None
    cleaning: Optional[str] = None
    list_the_unit: Optional[str] = None
    move_out_form: Optional[str] = None
