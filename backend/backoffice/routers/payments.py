"""Payments router."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.database import get_db
from backoffice.core.security import AuthenticatedUser, require_permission
from backoffice.routers.common import build_index, export_page, index_path, not_found, read_filters
from backoffice.schemas.base import MutationResponse
from backoffice.schemas.pagination import IndexResponse
from backoffice.schemas.payment import (
    PaymentCreate,
    PaymentDetailResponse,
    PaymentResponse,
    PaymentUpdate,
)
from backoffice.services.payments import PaymentService
from backoffice.services.redirects import index_redirect

RESOURCE = "payments"
EXTRA_FILTERS = ("permanent", "is_hidden")

router = APIRouter(prefix=f"/{RESOURCE}", tags=["payments"])


@router.get("", response_model=IndexResponse[PaymentResponse])
async def list_payments(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("payments.index")),
):
    """List visible payments (or only hidden ones with ``is_hidden=true``)."""
    filters = read_filters(request, EXTRA_FILTERS)
    return await build_index(PaymentService(db), request, filters, page, per_page)


@router.get("/export")
async def export_payments(
    request: Request,
    page: Optional[str] = None,
    per_page: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("payments.index")),
):
    """Download the current index page as CSV."""
    filters = read_filters(request, EXTRA_FILTERS)
    return await export_page(PaymentService(db), request, RESOURCE, filters, page, per_page)


@router.get("/{payment_id}", response_model=PaymentDetailResponse)
async def get_payment(
    payment_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("payments.show")),
):
    """Get a payment with previous/next ids under the same index filters."""
    service = PaymentService(db)
    payment = await service.get(payment_id)
    if not payment:
        raise not_found("Payment")
    prev_id, next_id = await service.neighbours(payment_id, read_filters(request, EXTRA_FILTERS))
    return PaymentDetailResponse(
        **service.serialize(payment).model_dump(),
        prev_id=prev_id,
        next_id=next_id,
    )


@router.post("", response_model=MutationResponse[PaymentResponse], status_code=status.HTTP_201_CREATED)
async def create_payment(
    data: PaymentCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("payments.store")),
):
    """Create a payment. Left to pay and status are computed from owes and paid."""
    service = PaymentService(db)
    payment = await service.create(data)
    return MutationResponse(
        message="Payment created successfully.",
        data=service.serialize(payment),
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )


@router.put("/{payment_id}", response_model=MutationResponse[PaymentResponse])
async def update_payment(
    payment_id: int,
    data: PaymentUpdate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("payments.update")),
):
    """Update a payment and recompute its status."""
    service = PaymentService(db)
    payment = await service.get(payment_id)
    if not payment:
        raise not_found("Payment")
    payment = await service.update(payment, data)
    return MutationResponse(
        message="Payment updated successfully.",
        data=service.serialize(payment),
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )


@router.delete("/{payment_id}", response_model=MutationResponse[PaymentResponse])
async def delete_payment(
    payment_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("payments.destroy")),
):
    """Archive a payment."""
    service = PaymentService(db)
    payment = await service.get(payment_id)
    if not payment:
        raise not_found("Payment")
    await service.archive(payment)
    return MutationResponse(
        message="Payment deleted successfully.",
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )


async def _set_hidden(payment_id: int, hidden: bool, request: Request, db: AsyncSession) -> MutationResponse:
    service = PaymentService(db)
    payment = await service.get(payment_id)
    if not payment:
        raise not_found("Payment")
    payment = await service.set_hidden(payment, hidden)
    return MutationResponse(
        message="Payment hidden successfully." if hidden else "Payment unhidden successfully.",
        data=service.serialize(payment),
        redirect_to=index_redirect(request, index_path(RESOURCE), EXTRA_FILTERS),
    )


@router.patch("/{payment_id}/hide", response_model=MutationResponse[PaymentResponse])
async def hide_payment(
    payment_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("payments.update")),
):
    """Hide a payment from the default index."""
    return await _set_hidden(payment_id, True, request, db)


@router.patch("/{payment_id}/unhide", response_model=MutationResponse[PaymentResponse])
async def unhide_payment(
    payment_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("payments.update")),
):
    """Show a hidden payment in the default index again."""
    return await _set_hidden(payment_id, False, request, db)
