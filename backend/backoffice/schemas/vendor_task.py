"""Vendor task schemas."""

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
    RequiredDate,
    YesNoValue,
)


class VendorTaskCreate(BaseSchema):
    """Create a vendor task."""

    city_id: OptionalId = None
    property_id: OptionalId = None
    unit_id: int
    vendor_id: OptionalId = None
    task_submission_date: RequiredDate
    assigned_tasks: str = Field(..., min_length=1)
    any_scheduled_visits: DateValue = None
    notes: OptionalText = None
    task_ending_date: DateValue = None
    status: OptionalText = Field(None, max_length=255)
    urgent: YesNoValue


class VendorTaskUpdate(BaseSchema):
    """Update vendor task."""

    city_id: OptionalId = None
    property_id: OptionalId = None
    unit_id: OptionalId = None
    vendor_id: OptionalId = None
    task_submission_date: DateValue = None
    assigned_tasks: Optional[str] = Field(None, min_length=1)
    any_scheduled_visits: DateValue = None
    notes: OptionalText = None
    task_ending_date: DateValue = None
    status: OptionalText = Field(None, max_length=255)
    urgent: OptionalYesNo = None


class VendorTaskResponse(BaseSchema, IDMixin, TimestampMixin, LocationDisplayMixin):
    unit_id: Optional[int] = None
    vendor_id: Optional[int] = None
    vendor_name: Optional[str] = None
    task_submission_date: dt.date
    assigned_tasks: str
    any_scheduled_visits: Optional[dt.date] = None
    notes: Optional[str] = None
    task_ending_date: Optional[dt.date] = None
    status: Optional[str] = None
    urgent: str
