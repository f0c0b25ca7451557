"""Base schema utilities and shared field types."""

import datetime as dt
from decimal import Decimal
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from backoffice.core.dates import parse_date
from backoffice.models.enums import YesNo

_YES = {"yes", "y", "true", "1", "on"}
_NO = {"no", "n", "false", "0", "off"}


def normalize_yes_no(value: Any) -> Optional[str]:
    """Accept the spellings the forms send and normalize them to "Yes"/"No"."""
    if value is None:
        return None
    if isinstance(value, YesNo):
        return value.value
    if isinstance(value, bool):
        return YesNo.YES.value if value else YesNo.NO.value
    text = str(value).strip().lower()
    if not text:
        return None
    if text in _YES:
        return YesNo.YES.value
    if text in _NO:
        return YesNo.NO.value
    raise ValueError("must be either Yes or No")


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


YesNoValue = Annotated[YesNo, BeforeValidator(normalize_yes_no)]
OptionalYesNo = Annotated[Optional[YesNo], BeforeValidator(normalize_yes_no)]
DateValue = Annotated[Optional[dt.date], BeforeValidator(parse_date)]
RequiredDate = Annotated[dt.date, BeforeValidator(parse_date)]
OptionalId = Annotated[Optional[int], BeforeValidator(blank_to_none)]
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]
Money = Annotated[Decimal, Field(ge=0, le=Decimal("999999.99"), decimal_places=2)]
OptionalMoney = Annotated[Optional[Money], BeforeValidator(blank_to_none)]


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        use_enum_values=True,
    )


class TimestampMixin(BaseModel):
    """Mixin for created_at/updated_at timestamps."""

    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None


class IDMixin(BaseModel):
    """Mixin for integer id field."""

    id: int


class LocationDisplayMixin(BaseModel):
    """Denormalized display fields attached server-side."""

    city_name: Optional[str] = None
    property_name: Optional[str] = None
    unit_name: Optional[str] = None


T = TypeVar("T")


class MutationResponse(BaseModel, Generic[T]):
    """Result of a create/update/delete, with the index URL to return to."""

    message: str
    data: Optional[T] = None
    redirect_to: str
