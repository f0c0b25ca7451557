"""Payment schemas."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import Field

from backoffice.schemas.base import (
    BaseSchema,
    IDMixin,
    TimestampMixin,
    LocationDisplayMixin,
    Money,
    OptionalId,
    OptionalMoney,
    OptionalText,
    OptionalYesNo,
    DateValue,
    RequiredDate,
    YesNoValue,
)


class PaymentLocationFields(BaseSchema):
    """Either ``unit_id`` or the city/property/unit names identify the unit."""

    city_id: OptionalId = None
    property_id: OptionalId = None
    unit_id: OptionalId = None
    city: OptionalText = Field(None, max_length=255)
    property_name: OptionalText = Field(None, max_length=255)
    unit_name: OptionalText = Field(None, max_length=255)


class PaymentCreate(PaymentLocationFields):
    """Create a payment. ``left_to_pay`` and ``status`` are computed."""

    date: RequiredDate
    owes: Money
    paid: OptionalMoney = None
    notes: OptionalText = None
    reversed_payments: OptionalText = Field(None, max_length=255)
    permanent: YesNoValue
    has_assistance: bool = False
    assistance_amount: OptionalMoney = None
    assistance_company: OptionalText = Field(None, max_length=255)


class PaymentUpdate(PaymentLocationFields):
    """Update payment. ``is_hidden`` is only changed through hide/unhide."""

    date: DateValue = None
    owes: OptionalMoney = None
    paid: OptionalMoney = None
    notes: OptionalText = None
    reversed_payments: OptionalText = Field(None, max_length=255)
    permanent: OptionalYesNo = None
    has_assistance: Optional[bool] = None
    assistance_amount: OptionalMoney = None
    assistance_company: OptionalText = Field(None, max_length=255)


class PaymentResponse(BaseSchema, IDMixin, TimestampMixin, LocationDisplayMixin):
    date: dt.date
    unit_id: Optional[int] = None
    owes: Decimal
    paid: Decimal
    left_to_pay: Optional[Decimal] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    reversed_payments: Optional[str] = None
    permanent: str
    has_assistance: bool
    assistance_amount: Optional[Decimal] = None
    assistance_company: Optional[str] = None
    is_hidden: bool


class PaymentDetailResponse(PaymentResponse):
    """A single payment with its neighbours in the filtered index ordering."""

    prev_id: Optional[int] = None
    next_id: Optional[int] = None
