"""Notices and evictions router."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.database import get_db
from backoffice.core.security import AuthenticatedUser, require_permission
from backoffice.routers.common import build_index, export_page, index_path, not_found, read_filters
from backoffice.schemas.base import MutationResponse
from backoffice.schemas.notice_and_eviction import (
    NoticeAndEvictionCreate,
    NoticeAndEvictionResponse,
    NoticeAndEvictionUpdate,
)
from backoffice.schemas.pagination import IndexResponse
from backoffice.services.notice_and_evictions import NoticeAndEvictionService
from backoffice.services.redirects import index_redirect

RESOURCE = "notice-and-evictions"
EXTRA_FILTERS = ("tenant",)

router = APIRouter(prefix=f"/{RESOURCE}", tags=["notice-and-evictions"])


@router.get("", response_model=IndexResponse[NoticeAndEvictionResponse])
async def list_notices(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("notice_and_evictions.index")),
):
    """List notices, filterable by location and tenant name."""
    filters = read_filters(request, EXTRA_FILTERS)
    return await build_index(NoticeAndEvictionService(db), request, filters, page, per_page)


@router.get("/export")
async def export_notices(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("notice_and_evictions.index")),
):
    """Download the current index page as CSV."""
    filters = read_filters(request, EXTRA_FILTERS)
    return await export_page(NoticeAndEvictionService(db), request, RESOURCE, filters, page, per_page)


@router.get("/{notice_id}", response_model=NoticeAndEvictionResponse)
async def get_notice(
    notice_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("notice_and_evictions.show")),
):
    """Get a notice by ID."""
    service = NoticeAndEvictionService(db)
    notice = await service.get(notice_id)
    if not notice:
        raise not_found("Notice")
    return service.serialize(notice)


@router.post(
    "",
    response_model=MutationResponse[NoticeAndEvictionResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_notice(
    data: NoticeAndEvictionCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("notice_and_evictions.store")),
):
    """Create a notice. The evictions column is computed."""
    service = NoticeAndEvictionService(db)
    notice = await service.create(data)
    return MutationResponse(
        message="Notice created successfully.",
        data=service.serialize(notice),
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )


@router.put("/{notice_id}", response_model=MutationResponse[NoticeAndEvictionResponse])
async def update_notice(
    notice_id: int,
    data: NoticeAndEvictionUpdate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("notice_and_evictions.update")),
):
    """Update a notice and recompute its evictions column."""
    service = NoticeAndEvictionService(db)
    notice = await service.get(notice_id)
    if not notice:
        raise not_found("Notice")
    notice = await service.update(notice, data)
    return MutationResponse(
        message="Notice updated successfully.",
        data=service.serialize(notice),
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )


@router.delete("/{notice_id}", response_model=MutationResponse[NoticeAndEvictionResponse])
async def delete_notice(
    notice_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("notice_and_evictions.destroy")),
):
    """Archive a notice."""
    service = NoticeAndEvictionService(db)
    notice = await service.get(notice_id)
    if not notice:
        raise not_found("Notice")
    await service.archive(notice)
    return MutationResponse(
        message="Notice deleted successfully.",
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )
