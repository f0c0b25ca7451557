"""Tenant registration and the unit's denormalized tenant list."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.enums import YesNo
from backoffice.models.property import Unit
from backoffice.models.tenant import Tenant
from backoffice.services.locations import unit_load_option

logger = logging.getLogger(__name__)


def append_tenant_name(existing: Optional[str], full_name: str) -> str:
    existing = (existing or "").strip()
    return f"{existing}, {full_name}" if existing else full_name


class TenantService:
    """Creates tenants and keeps the owning unit in sync."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self, unit_id: Optional[int] = None) -> list[Tenant]:
        query = (
            select(Tenant)
            .options(unit_load_option(Tenant.unit))
            .where(Tenant.is_archived.is_(False))
            .order_by(Tenant.last_name, Tenant.first_name)
        )
        if unit_id is not None:
            query = query.where(Tenant.unit_id == unit_id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, tenant_id: int) -> Optional[Tenant]:
        result = await self.db.execute(
            select(Tenant)
            .options(unit_load_option(Tenant.unit))
            .where(Tenant.id == tenant_id, Tenant.is_archived.is_(False))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def add_to_unit(self, unit: Optional[Unit], first_name: str, last_name: str) -> Tenant:
        """Create a tenant; the unit gains the name and stops being vacant.

        Does not commit.
        """
        tenant = Tenant(
            unit_id=unit.id if unit else None,
            first_name=first_name,
            last_name=last_name,
        )
        self.db.add(tenant)
        if unit is not None:
            unit.tenants = append_tenant_name(unit.tenants, tenant.full_name)
            if unit.vacant == YesNo.YES.value:
                unit.vacant = YesNo.NO.value
        await self.db.flush()
        logger.info(f"[TENANTS] Added {tenant.full_name} to unit {tenant.unit_id}")
        return tenant
