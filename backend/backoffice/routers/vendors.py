"""Vendors router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backoffice.core.database import get_db
from backoffice.core.errors import FieldValidationError
from backoffice.core.security import require_permission, AuthenticatedUser
from backoffice.models.property import City
from backoffice.models.vendor import Vendor
from backoffice.schemas.directory import VendorCreate, VendorUpdate, VendorResponse

router = APIRouter(prefix="/vendors", tags=["vendors"])


def _vendor_response(vendor: Vendor) -> VendorResponse:
    return VendorResponse.model_validate(vendor).model_copy(
        update={"city_name": vendor.city.name if vendor.city else None}
    )


async def _get_vendor(db: AsyncSession, vendor_id: int) -> Vendor:
    result = await db.execute(
        select(Vendor)
        .options(selectinload(Vendor.city))
        .where(Vendor.id == vendor_id, Vendor.is_archived.is_(False))
        .execution_options(populate_existing=True)
    )
    vendor = result.scalar_one_or_none()

    if not vendor:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vendor not found")

    return vendor


async def _check_city(db: AsyncSession, city_id: Optional[int]) -> None:
    if city_id is None:
        return
    result = await db.execute(select(City.id).where(City.id == city_id, City.is_archived.is_(False)))
    if result.scalar_one_or_none() is None:
        raise FieldValidationError("city_id", "The selected city does not exist.")


@router.post("", response_model=VendorResponse, status_code=status.HTTP_201_CREATED)
async def create_vendor(
    data: VendorCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.store")),
):
    """Create a new vendor."""
    await _check_city(db, data.city_id)
    vendor = Vendor(
        city_id=data.city_id,
        vendor_name=data.vendor_name,
        service_type=data.service_type,
        notes=data.notes,
    )
    db.add(vendor)
    await db.commit()

    return _vendor_response(await _get_vendor(db, vendor.id))


@router.get("", response_model=List[VendorResponse])
async def list_vendors(
    city_id: Optional[int] = None,
    service_type: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.index")),
):
    """List active vendors."""
    query = (
        select(Vendor)
        .options(selectinload(Vendor.city))
        .where(Vendor.is_archived.is_(False))
    )

    if city_id is not None:
        query = query.where(Vendor.city_id == city_id)
    if service_type:
        query = query.where(Vendor.service_type.ilike(f"%{service_type}%"))

    query = query.order_by(Vendor.vendor_name)

    result = await db.execute(query)
    vendors = result.scalars().all()

    return [_vendor_response(v) for v in vendors]


@router.get("/{vendor_id}", response_model=VendorResponse)
async def get_vendor(
    vendor_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.show")),
):
    """Get a vendor by ID."""
    return _vendor_response(await _get_vendor(db, vendor_id))


@router.patch("/{vendor_id}", response_model=VendorResponse)
async def update_vendor(
    vendor_id: int,
    data: VendorUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.update")),
):
    """Update a vendor."""
    vendor = await _get_vendor(db, vendor_id)

    update_data = data.model_dump(exclude_unset=True)
    if "vendor_name" in update_data and not update_data["vendor_name"]:
        raise FieldValidationError("vendor_name", "The vendor name is required.")
    await _check_city(db, update_data.get("city_id"))
    for field, value in update_data.items():
        setattr(vendor, field, value)

    await db.commit()

    return _vendor_response(await _get_vendor(db, vendor_id))


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vendor(
    vendor_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("vendor-task-tracker.destroy")),
):
    """Delete a vendor (soft delete by archiving)."""
    vendor = await _get_vendor(db, vendor_id)
    vendor.is_archived = True
    await db.commit()
