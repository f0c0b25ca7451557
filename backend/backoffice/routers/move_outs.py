"""Move-outs router."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.database import get_db
from backoffice.core.security import AuthenticatedUser, require_permission
from backoffice.routers.common import build_index, export_page, index_path, not_found, read_filters
from backoffice.schemas.base import MutationResponse
from backoffice.schemas.move_out import MoveOutCreate, MoveOutResponse, MoveOutUpdate
from backoffice.schemas.pagination import IndexResponse
from backoffice.services.move_outs import MoveOutService
from backoffice.services.redirects import index_redirect

RESOURCE = "move-outs"

router = APIRouter(prefix=f"/{RESOURCE}", tags=["move-outs"])


@router.get("", response_model=IndexResponse[MoveOutResponse])
async def list_move_outs(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-out.index")),
):
    """List move-outs, newest move-out date first."""
    return await build_index(MoveOutService(db), request, read_filters(request), page, per_page)


@router.get("/export")
async def export_move_outs(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-out.index")),
):
    """Download the current index page as CSV."""
    return await export_page(MoveOutService(db), request, RESOURCE, read_filters(request), page, per_page)


@router.get("/{move_out_id}", response_model=MoveOutResponse)
async def get_move_out(
    move_out_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-out.show")),
):
    """Get a move-out by ID."""
    service = MoveOutService(db)
    move_out = await service.get(move_out_id)
    if not move_out:
        raise not_found("Move-out")
    return service.serialize(move_out)


@router.post("", response_model=MutationResponse[MoveOutResponse], status_code=status.HTTP_201_CREATED)
async def create_move_out(
    data: MoveOutCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-out.store")),
):
    """Create a move-out. An ended lease marks the unit vacant."""
    service = MoveOutService(db)
    move_out = await service.create(data)
    return MutationResponse(
        message="Move-out created successfully.",
        data=service.serialize(move_out),
        redirect_to=index_redirect(request, index_path(RESOURCE)),
    )


@router.put("/{move_out_id}", response_model=MutationResponse[MoveOutResponse])
async def update_move_out(
    move_out_id: int,
    data: MoveOutUpdate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-out.update")),
):
    """Update a move-out."""
    service = MoveOutService(db)
    move_out = await service.get(move_out_id)
    if not move_out:
        raise not_found("Move-out")
    move_out = await service.update(move_out, data)
    return MutationResponse(
        message="Move-out updated successfully.",
        data=service.serialize(move_out),
        redirect_to=index_redirect(request, index_path(RESOURCE)),
    )


@router.delete("/{move_out_id}", response_model=MutationResponse[MoveOutResponse])
async def delete_move_out(
    move_out_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-out.destroy")),
):
    """Archive a move-out."""
    service = MoveOutService(db)
    move_out = await service.get(move_out_id)
    if not move_out:
        raise not_found("Move-out")
    await service.archive(move_out)
    return MutationResponse(
        message="Move-out deleted successfully.",
        redirect_to=index_redirect(request, index_path(RESOURCE)),
    )
