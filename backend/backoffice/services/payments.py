"""Payment lines: amounts, derived status, visibility and navigation."""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import Select, select

from backoffice.models.enums import PaymentStatus
from backoffice.models.payment import Payment
from backoffice.schemas.payment import PaymentResponse
from backoffice.services.csv_export import ColumnKind, ColumnSpec
from backoffice.services.records import RecordService

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


def calculate_status(owes: Decimal, paid: Decimal) -> str:
    if paid == 0:
        return PaymentStatus.DIDNT_PAY.value
    if paid < owes:
        return PaymentStatus.PAID_PARTLY.value
    if paid == owes:
        return PaymentStatus.PAID.value
    return PaymentStatus.OVERPAID.value


def parse_permanent_filter(value: Optional[str]) -> list[str]:
    """``"Yes,No"`` -> ``["Yes", "No"]``; blanks dropped."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


class PaymentService(RecordService):
    model = Payment
    response_schema = PaymentResponse
    tag = "PAYMENTS"
    form_only_fields = {"city_id", "property_id", "city", "property_name", "unit_name"}
    required_fields = {
        "date": "The payment date is required.",
        "owes": "The amount owed is required.",
        "permanent": "The permanent status is required.",
        "has_assistance": "The assistance flag must be true or false.",
    }

    export_columns = (
        ColumnSpec("ID", "id", ColumnKind.ID),
        ColumnSpec("Date", "date", ColumnKind.DATE),
        ColumnSpec("City", "city_name"),
        ColumnSpec("Property Name", "property_name"),
        ColumnSpec("Unit Name", "unit_name"),
        ColumnSpec("Owes", "owes", ColumnKind.CURRENCY),
        ColumnSpec("Paid", "paid", ColumnKind.CURRENCY),
        ColumnSpec("Left to Pay", "left_to_pay", ColumnKind.CURRENCY),
        ColumnSpec("Status", "status"),
        ColumnSpec("Notes", "notes"),
        ColumnSpec("Reversed Payments", "reversed_payments"),
        ColumnSpec("Permanent", "permanent"),
    )

    def ordering(self) -> list:
        return [Payment.date.desc(), Payment.created_at.desc()]

    def apply_filters(self, query: Select, filters: dict[str, Optional[str]]) -> Select:
        query = self.location_filter(query, filters)

        permanent = parse_permanent_filter(filters.get("permanent"))
        if permanent:
            query = query.where(Payment.permanent.in_(permanent))

        show_hidden = (filters.get("is_hidden") or "").strip().lower() in TRUTHY
        return query.where(Payment.is_hidden.is_(show_hidden))

    async def prepare(self, record: Payment, data) -> None:
        fields_set = data.model_fields_set
        if "unit_id" in fields_set and record.unit_id is not None:
            await self.resolve_location(record, data)
        elif getattr(data, "unit_name", None):
            unit = await self.locations.find_unit_by_names(data.city, data.property_name, data.unit_name)
            record.unit_id = unit.id

        if record.paid is None:
            record.paid = Decimal("0")
        if not record.has_assistance:
            record.assistance_amount = None
            record.assistance_company = None

        owes = Decimal(record.owes)
        paid = Decimal(record.paid)
        record.left_to_pay = owes - paid
        record.status = calculate_status(owes, paid)

    async def set_hidden(self, record: Payment, hidden: bool) -> Payment:
        record.is_hidden = hidden
        await self.db.commit()
        logger.info(f"[PAYMENTS] Payment {record.id} {'hidden' if hidden else 'unhidden'}")
        return await self.get(record.id)

    async def neighbours(
        self, record_id: int, filters: dict[str, Optional[str]]
    ) -> tuple[Optional[int], Optional[int]]:
        """Previous/next payment ids within the filtered index ordering."""
        query = self.apply_filters(
            select(Payment.id).where(Payment.is_archived.is_(False)), filters
        ).order_by(*self.ordering())
        ids = list((await self.db.execute(query)).scalars().all())
        if record_id not in ids:
            return None, None
        index = ids.index(record_id)
        prev_id = ids[index - 1] if index > 0 else None
        next_id = ids[index + 1] if index + 1 < len(ids) else None
        return prev_id, next_id
