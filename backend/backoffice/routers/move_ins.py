"""Move-ins router."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.database import get_db
from backoffice.core.security import AuthenticatedUser, require_permission
from backoffice.routers.common import build_index, export_page, index_path, not_found, read_filters
from backoffice.schemas.base import MutationResponse
from backoffice.schemas.move_in import MoveInCreate, MoveInResponse, MoveInUpdate
from backoffice.schemas.pagination import IndexResponse
from backoffice.services.move_ins import MoveInService
from backoffice.services.redirects import index_redirect

RESOURCE = "move-ins"

router = APIRouter(prefix=f"/{RESOURCE}", tags=["move-ins"])


@router.get("", response_model=IndexResponse[MoveInResponse])
async def list_move_ins(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-in.index")),
):
    """List move-ins, newest move-in date first."""
    return await build_index(MoveInService(db), request, read_filters(request), page, per_page)


@router.get("/export")
async def export_move_ins(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-in.index")),
):
    """Download the current index page as CSV."""
    return await export_page(MoveInService(db), request, RESOURCE, read_filters(request), page, per_page)


@router.get("/{move_in_id}", response_model=MoveInResponse)
async def get_move_in(
    move_in_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-in.show")),
):
    """Get a move-in by ID."""
    service = MoveInService(db)
    move_in = await service.get(move_in_id)
    if not move_in:
        raise not_found("Move-in")
    return service.serialize(move_in)


@router.post("", response_model=MutationResponse[MoveInResponse], status_code=status.HTTP_201_CREATED)
async def create_move_in(
    data: MoveInCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-in.store")),
):
    """Create a move-in. First and last name also register the tenant in the unit."""
    service = MoveInService(db)
    move_in = await service.create(data)
    return MutationResponse(
        message="Move-in created successfully.",
        data=service.serialize(move_in),
        redirect_to=index_redirect(request, index_path(RESOURCE)),
    )


@router.put("/{move_in_id}", response_model=MutationResponse[MoveInResponse])
async def update_move_in(
    move_in_id: int,
    data: MoveInUpdate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-in.update")),
):
    """Update a move-in."""
    service = MoveInService(db)
    move_in = await service.get(move_in_id)
    if not move_in:
        raise not_found("Move-in")
    move_in = await service.update(move_in, data)
    return MutationResponse(
        message="Move-in updated successfully.",
        data=service.serialize(move_in),
        redirect_to=index_redirect(request, index_path(RESOURCE)),
    )


@router.delete("/{move_in_id}", response_model=MutationResponse[MoveInResponse])
async def delete_move_in(
    move_in_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("move-in.destroy")),
):
    """Archive a move-in."""
    service = MoveInService(db)
    move_in = await service.get(move_in_id)
    if not move_in:
        raise not_found("Move-in")
    await service.archive(move_in)
    return MutationResponse(
        message="Move-in deleted successfully.",
        redirect_to=index_redirect(request, index_path(RESOURCE)),
    )
