"""Tenant, Vendor and Notice-type schemas."""

from typing import Optional

from pydantic import Field

from backoffice.schemas.base import (
    BaseSchema,
    IDMixin,
    TimestampMixin,
    LocationDisplayMixin,
    OptionalId,
    OptionalText,
)


class TenantCreate(BaseSchema):
    """Create a tenant in a unit."""

    unit_id: OptionalId = None
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)


class TenantResponse(BaseSchema, IDMixin, TimestampMixin, LocationDisplayMixin):
    unit_id: Optional[int] = None
    first_name: str
    last_name: str
    full_name: str


class VendorCreate(BaseSchema):
    """Create a vendor."""

    city_id: OptionalId = None
    vendor_name: str = Field(..., min_length=1, max_length=255)
    service_type: OptionalText = Field(None, max_length=255)
    notes: OptionalText = None


class VendorUpdate(BaseSchema):
    """Update vendor."""

    city_id: OptionalId = None
    vendor_name: Optional[str] = Field(None, min_length=1, max_length=255)
    service_type: OptionalText = Field(None, max_length=255)
    notes: OptionalText = None


class VendorResponse(BaseSchema, IDMixin, TimestampMixin):
    city_id: Optional[int] = None
    vendor_name: str
    service_type: Optional[str] = None
    notes: Optional[str] = None
    city_name: Optional[str] = None


class NoticeCreate(BaseSchema):
    """Create a notice type."""

    notice_name: str = Field(..., min_length=1, max_length=255)
    days: int = Field(0, ge=0)


class NoticeResponse(BaseSchema, IDMixin):
    notice_name: str
    days: int
