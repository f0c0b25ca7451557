"""Notice and eviction schemas."""

import datetime as dt
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field

from backoffice.models.enums import EvictionOutcome
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


def normalize_outcome(value: Any) -> Any:
    # Older records and forms spell it "Evected".
    value = blank_to_none(value)
    if isinstance(value, str) and value.strip().lower() == "evected":
        return EvictionOutcome.EVICTED.value
    return value


OptionalOutcome = Annotated[Optional[EvictionOutcome], BeforeValidator(normalize_outcome)]


class NoticeAndEvictionFields(BaseSchema):
    tenant_id: OptionalId = None
    status: OptionalText = Field(None, max_length=255)
    date: DateValue = None
    type_of_notice: OptionalText = Field(None, max_length=255)
    have_an_exception: OptionalYesNo = None
    note: OptionalText = None
    sent_to_attorney: OptionalYesNo = None
    hearing_dates: DateValue = None
    evicted_or_payment_plan: OptionalOutcome = None
    if_left: OptionalYesNo = None
    writ_date: DateValue = None


class NoticeAndEvictionCreate(NoticeAndEvictionFields):
    """Create a notice/eviction record. ``evictions`` is always computed."""


class NoticeAndEvictionUpdate(NoticeAndEvictionFields):
    """Update notice/eviction."""


class NoticeAndEvictionResponse(BaseSchema, IDMixin, TimestampMixin, LocationDisplayMixin):
    tenant_id: Optional[int] = None
    tenant_name: Optional[str] = None
    status: Optional[str] = None
    date: Optional[dt.date] = None
    type_of_notice: Optional[str] = None
    have_an_exception: Optional[str] = None
    note: Optional[str] = None
    evictions: Optional[str] = None
    sent_to_attorney: Optional[str] = None
    hearing_dates: Optional[dt.date] = None
    evicted_or_payment_plan: Optional[str] = None
    if_left: Optional[str] = None
    writ_date: Optional[dt.date] = None
