"""Services for the property back office."""

from backoffice.services.csv_export import CSVExporter, ColumnKind, ColumnSpec
from backoffice.services.location_cascade import LocationCascadeFilter, LocationNode, LocationSelection
from backoffice.services.locations import LocationService
from backoffice.services.tenants import TenantService
from backoffice.services.records import RecordService
from backoffice.services.move_ins import MoveInService
from backoffice.services.move_outs import MoveOutService
from backoffice.services.notice_and_evictions import NoticeAndEvictionService
from backoffice.services.payments import PaymentService
from backoffice.services.vendor_tasks import VendorTaskService

__all__ = [
    "CSVExporter",
    "ColumnKind",
    "ColumnSpec",
    "LocationCascadeFilter",
    "LocationNode",
    "LocationSelection",
    "LocationService",
    "TenantService",
    "RecordService",
    "MoveInService",
    "MoveOutService",
    "NoticeAndEvictionService",
    "PaymentService",
    "VendorTaskService",
]
