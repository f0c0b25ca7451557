"""Vendor task tracker router."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.database import get_db
from backoffice.core.security import AuthenticatedUser, require_permission
from backoffice.routers.common import build_index, export_page, index_path, not_found, read_filters
from backoffice.schemas.base import MutationResponse
from backoffice.schemas.pagination import IndexResponse
from backoffice.schemas.vendor_task import VendorTaskCreate, VendorTaskResponse, VendorTaskUpdate
from backoffice.services.redirects import index_redirect
from backoffice.services.vendor_tasks import VendorTaskService

RESOURCE = "vendor-tasks"
EXTRA_FILTERS = ("status", "vendor")

router = APIRouter(prefix=f"/{RESOURCE}", tags=["vendor-tasks"])


@router.get("", response_model=IndexResponse[VendorTaskResponse])
async def list_vendor_tasks(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.index")),
):
    """List vendor tasks. Completed tasks are hidden unless ``status=all`` or ``status=Completed``."""
    filters = read_filters(request, EXTRA_FILTERS)
    return await build_index(VendorTaskService(db), request, filters, page, per_page)


@router.get("/export")
async def export_vendor_tasks(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.index")),
):
    """Download the current index page as CSV."""
    filters = read_filters(request, EXTRA_FILTERS)
    return await export_page(VendorTaskService(db), request, RESOURCE, filters, page, per_page)


@router.get("/{task_id}", response_model=VendorTaskResponse)
async def get_vendor_task(
    task_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.show")),
):
    """Get a vendor task by ID."""
    service = VendorTaskService(db)
    task = await service.get(task_id)
    if not task:
        raise not_found("Vendor task")
    return service.serialize(task)


@router.post("", response_model=MutationResponse[VendorTaskResponse], status_code=status.HTTP_201_CREATED)
async def create_vendor_task(
    data: VendorTaskCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.store")),
):
    """Create a vendor task."""
    service = VendorTaskService(db)
    task = await service.create(data)
    return MutationResponse(
        message="Vendor task created successfully.",
        data=service.serialize(task),
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )


@router.put("/{task_id}", response_model=MutationResponse[VendorTaskResponse])
async def update_vendor_task(
    task_id: int,
    data: VendorTaskUpdate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.update")),
):
    """Update a vendor task."""
    service = VendorTaskService(db)
    task = await service.get(task_id)
    if not task:
        raise not_found("Vendor task")
    task = await service.update(task, data)
    return MutationResponse(
        message="Vendor task updated successfully.",
        data=service.serialize(task),
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )


@router.delete("/{task_id}", response_model=MutationResponse[VendorTaskResponse])
async def delete_vendor_task(
    task_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.destroy")),
):
    """Archive a vendor task."""
    service = VendorTaskService(db)
    task = await service.get(task_id)
    if not task:
        raise not_found("Vendor task")
    await service.archive(task)
    return MutationResponse(
        message="Vendor task deleted successfully.",
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )
