"""Notice types router."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.database import get_db
from backoffice.core.errors import FieldValidationError
from backoffice.core.security import require_permission, AuthenticatedUser
from backoffice.models.notice import Notice
from backoffice.schemas.directory import NoticeCreate, NoticeResponse

router = APIRouter(prefix="/notices", tags=["notices"])


@router.post("", response_model=NoticeResponse, status_code=status.HTTP_201_CREATED)
async def create_notice_type(
    data: NoticeCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("notice_and_evictions.store")),
):
    """Create a notice type with its waiting period in days."""
    existing = await db.execute(select(Notice.id).where(Notice.notice_name == data.notice_name))
    if existing.scalar_one_or_none() is not None:
        raise FieldValidationError("notice_name", "A notice with this name already exists.")

    notice = Notice(notice_name=data.notice_name, days=data.days)
    db.add(notice)
    await db.commit()
    await db.refresh(notice)

    return NoticeResponse.model_validate(notice)


@router.get("", response_model=List[NoticeResponse])
async def list_notice_types(
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("notice_and_evictions.index")),
):
    """List active notice types."""
    result = await db.execute(
        select(Notice).where(Notice.is_archived.is_(False)).order_by(Notice.notice_name)
    )
    return [NoticeResponse.model_validate(n) for n in result.scalars().all()]
