"""Move-in schemas."""

import datetime as dt
from typing import Optional

from pydantic import Field

from backoffice.schemas.base import (
    BaseSchema,
    IDMixin,
    TimestampMixin,
    LocationDisplayMixin,
    DateValue,
    OptionalId,
    OptionalText,
    OptionalYesNo,
    YesNoValue,
)


class MoveInFields(BaseSchema):
    lease_signing_date: DateValue = None
    move_in_date: DateValue = None
    paid_security_deposit_first_month_rent: OptionalYesNo = None
    scheduled_paid_time: DateValue = None
    handled_keys: OptionalYesNo = None
    move_in_form_sent_date: DateValue = None
    filled_move_in_form: OptionalYesNo = None
    date_of_move_in_form_filled: DateValue = None
    submitted_insurance: OptionalYesNo = None
    date_of_insurance_expiration: DateValue = None


class MoveInCreate(MoveInFields):
    """Create a move-in. A first/last name also registers the tenant in the unit."""

    city_id: OptionalId = None
    property_id: OptionalId = None
    unit_id: int
    first_name: OptionalText = Field(None, max_length=255)
    last_name: OptionalText = Field(None, max_length=255)
    tenant_name: OptionalText = Field(None, max_length=255)
    signed_lease: YesNoValue


class MoveInUpdate(MoveInFields):
    """Update move-in. First and last name rebuild the tenant name and register the tenant."""

    city_id: OptionalId = None
    property_id: OptionalId = None
    unit_id: OptionalId = None
    first_name: OptionalText = Field(None, max_length=255)
    last_name: OptionalText = Field(None, max_length=255)
    tenant_name: OptionalText = Field(None, max_length=255)
    signed_lease: OptionalYesNo = None


class MoveInResponse(BaseSchema, IDMixin, TimestampMixin, LocationDisplayMixin):
    unit_id: Optional[int] = None
    tenant_name: Optional[str] = None
    signed_lease: str
    lease_signing_date: Optional[dt.date] = None
    move_in_date: Optional[dt.date] = None
    paid_security_deposit_first_month_rent: Optional[str] = None
    scheduled_paid_time: Optional[dt.date] = None
    handled_keys: Optional[str] = None
    move_in_form_sent_date: Optional[dt.date] = None
    filled_move_in_form: Optional[str] = None
    date_of_move_in_form_filled: Optional[dt.date] = None
    submitted_insurance: Optional[str] = None
    date_of_insurance_expiration: Optional[dt.date] = None
