"""API Routers for the property back office."""

from backoffice.routers.locations import router as locations_router
from backoffice.routers.tenants import router as tenants_router
from backoffice.routers.vendors import router as vendors_router
from backoffice.routers.notices import router as notices_router
from backoffice.routers.move_ins import router as move_ins_router
from backoffice.routers.move_outs import router as move_outs_router
from backoffice.routers.notice_and_evictions import router as notice_and_evictions_router
from backoffice.routers.payments import router as payments_router
from backoffice.routers.vendor_tasks import router as vendor_tasks_router

__all__ = [
    "locations_router",
    "tenants_router",
    "vendors_router",
    "notices_router",
    "move_ins_router",
    "move_outs_router",
    "notice_and_evictions_router",
    "payments_router",
    "vendor_tasks_router",
]
