"""SQLAlchemy models for the property back office."""

from backoffice.models.property import City, Property, Unit
from backoffice.models.tenant import Tenant
from backoffice.models.vendor import Vendor
from backoffice.models.notice import Notice, NoticeAndEviction
from backoffice.models.move_in import MoveIn
from backoffice.models.move_out import MoveOut
from backoffice.models.payment import Payment
from backoffice.models.vendor_task import VendorTask

__all__ = [
    "City",
    "Property",
    "Unit",
    "Tenant",
    "Vendor",
    "Notice",
    "NoticeAndEviction",
    "MoveIn",
    "MoveOut",
    "Payment",
    "VendorTask",
]
