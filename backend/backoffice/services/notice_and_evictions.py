"""Notices served on tenants and the evictions that follow."""

import datetime as dt
from typing import Optional

from sqlalchemy import Select, or_, select
from sqlalchemy.orm import selectinload

from backoffice.core.errors import FieldValidationError
from backoffice.models.enums import EvictionFlag, YesNo
from backoffice.models.notice import Notice, NoticeAndEviction
from backoffice.models.property import Property, Unit
from backoffice.models.tenant import Tenant
from backoffice.schemas.notice_and_eviction import NoticeAndEvictionResponse
from backoffice.services.csv_export import ColumnKind, ColumnSpec
from backoffice.services.locations import matching_unit_ids
from backoffice.services.records import RecordService


def compute_evictions(
    have_an_exception: Optional[str],
    notice_date: Optional[dt.date],
    notice_days: Optional[int],
    today: Optional[dt.date] = None,
) -> str:
    """"Have An Exception" wins; otherwise "Alert" once the notice period has run out."""
    if have_an_exception == YesNo.YES.value:
        return EvictionFlag.HAVE_AN_EXCEPTION.value
    if notice_date is None or notice_days is None:
        return EvictionFlag.NONE.value
    today = today or dt.date.today()
    if notice_date + dt.timedelta(days=notice_days) <= today:
        return EvictionFlag.ALERT.value
    return EvictionFlag.NONE.value


class NoticeAndEvictionService(RecordService):
    model = NoticeAndEviction
    response_schema = NoticeAndEvictionResponse
    tag = "NOTICES"

    export_columns = (
        ColumnSpec("ID", "id", ColumnKind.ID),
        ColumnSpec("City", "city_name"),
        ColumnSpec("Property", "property_name"),
        ColumnSpec("Unit Name", "unit_name"),
        ColumnSpec("Tenant Name", "tenant_name"),
        ColumnSpec("Status", "status"),
        ColumnSpec("Date", "date", ColumnKind.DATE),
        ColumnSpec("Type of Notice", "type_of_notice"),
        ColumnSpec("Have An Exception", "have_an_exception"),
        ColumnSpec("Note", "note"),
        ColumnSpec("Evictions", "evictions"),
        ColumnSpec("Sent to Attorney", "sent_to_attorney"),
        ColumnSpec("Hearing Dates", "hearing_dates", ColumnKind.DATE),
        ColumnSpec("Evicted or Payment Plan", "evicted_or_payment_plan"),
        ColumnSpec("If Left", "if_left"),
        ColumnSpec("Writ Date", "writ_date", ColumnKind.DATE),
    )

    def load_options(self) -> list:
        return [
            selectinload(NoticeAndEviction.tenant)
            .selectinload(Tenant.unit)
            .selectinload(Unit.property)
            .selectinload(Property.city)
        ]

    def ordering(self) -> list:
        return [NoticeAndEviction.date.desc(), NoticeAndEviction.created_at.desc()]

    def location_filter(self, query: Select, filters: dict[str, Optional[str]]) -> Select:
        unit_ids = matching_unit_ids(filters.get("city"), filters.get("property"), filters.get("unit"))
        if unit_ids is not None:
            query = query.where(
                NoticeAndEviction.tenant_id.in_(select(Tenant.id).where(Tenant.unit_id.in_(unit_ids)))
            )
        return query

    def apply_filters(self, query: Select, filters: dict[str, Optional[str]]) -> Select:
        query = self.location_filter(query, filters)
        tenant = filters.get("tenant")
        if tenant:
            pattern = f"%{tenant}%"
            query = query.where(
                NoticeAndEviction.tenant_id.in_(
                    select(Tenant.id).where(
                        or_(
                            Tenant.first_name.ilike(pattern),
                            Tenant.last_name.ilike(pattern),
                            (Tenant.first_name + " " + Tenant.last_name).ilike(pattern),
                        )
                    )
                )
            )
        return query

    async def _notice_days(self, notice_name: str) -> int:
        result = await self.db.execute(
            select(Notice).where(Notice.notice_name == notice_name, Notice.is_archived.is_(False))
        )
        notice = result.scalar_one_or_none()
        if notice is None:
            raise FieldValidationError(
                "type_of_notice", "The selected notice type does not exist or has been archived."
            )
        return notice.days

    async def prepare(self, record: NoticeAndEviction, data) -> None:
        if record.tenant_id is not None:
            tenant = await self.db.execute(
                select(Tenant.id).where(Tenant.id == record.tenant_id, Tenant.is_archived.is_(False))
            )
            if tenant.scalar_one_or_none() is None:
                raise FieldValidationError(
                    "tenant_id", "The selected tenant does not exist or has been archived."
                )

        if record.date is not None:
            if record.writ_date is not None and record.writ_date < record.date:
                raise FieldValidationError("writ_date", "The writ date must be on or after the notice date.")
            if record.hearing_dates is not None and record.hearing_dates < record.date:
                raise FieldValidationError(
                    "hearing_dates", "The hearing date must be on or after the notice date."
                )

        days = await self._notice_days(record.type_of_notice) if record.type_of_notice else None
        record.evictions = compute_evictions(record.have_an_exception, record.date, days)

    def display_unit(self, record: NoticeAndEviction):
        return record.tenant.unit if record.tenant else None

    def serialize(self, record: NoticeAndEviction):
        response = super().serialize(record)
        if record.tenant:
            response = response.model_copy(update={"tenant_name": record.tenant.full_name})
        return response
