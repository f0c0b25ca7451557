"""Tenants router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.database import get_db
from backoffice.core.errors import FieldValidationError
from backoffice.core.security import require_permission, AuthenticatedUser
from backoffice.schemas.directory import TenantCreate, TenantResponse
from backoffice.services.locations import LocationService, location_names
from backoffice.services.tenants import TenantService

router = APIRouter(prefix="/tenants", tags=["tenants"])


def _tenant_response(tenant) -> TenantResponse:
    return TenantResponse.model_validate(tenant).model_copy(update=location_names(tenant.unit))


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant(
    data: TenantCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("locations.store")),
):
    """Create a tenant. The unit's tenant list and vacancy are updated."""
    unit = None
    if data.unit_id is not None:
        unit = await LocationService(db).get_unit(data.unit_id)
        if unit is None:
            raise FieldValidationError("unit_id", "The selected unit must exist and not be archived.")

    service = TenantService(db)
    tenant = await service.add_to_unit(unit, data.first_name, data.last_name)
    await db.commit()

    return _tenant_response(await service.get(tenant.id))


@router.get("", response_model=List[TenantResponse])
async def list_tenants(
    unit_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
    current_user: AuthenticatedUser = Depends(require_permission("locations.index")),
):
    """List active tenants, optionally only those in one unit."""
    tenants = await TenantService(db).list(unit_id)
    return [_tenant_response(t) for t in tenants]
