"""Move-in checklist service."""

from backoffice.models.enums import YesNo
from backoffice.models.move_in import MoveIn
from backoffice.schemas.move_in import MoveInResponse
from backoffice.services.csv_export import ColumnKind, ColumnSpec
from backoffice.services.records import RecordService
from backoffice.services.tenants import TenantService


def apply_move_in_rules(move_in: MoveIn) -> None:
    """A "No" answer clears the date that depends on it."""
    if move_in.submitted_insurance == YesNo.NO.value:
        move_in.date_of_insurance_expiration = None
    if move_in.filled_move_in_form == YesNo.NO.value:
        move_in.date_of_move_in_form_filled = None


class MoveInService(RecordService):
    model = MoveIn
    response_schema = MoveInResponse
    tag = "MOVE_INS"
    form_only_fields = {"city_id", "property_id", "first_name", "last_name"}
    required_fields = {
        "unit_id": "The unit ID is required.",
        "signed_lease": "The signed lease field is required.",
    }

    export_columns = (
        ColumnSpec("ID", "id", ColumnKind.ID),
        ColumnSpec("City", "city_name"),
        ColumnSpec("Property", "property_name"),
        ColumnSpec("Unit Name", "unit_name"),
        ColumnSpec("Tenant Name", "tenant_name"),
        ColumnSpec("Signed Lease", "signed_lease"),
        ColumnSpec("Lease Signing Date", "lease_signing_date", ColumnKind.DATE),
        ColumnSpec("Move-In Date", "move_in_date", ColumnKind.DATE),
        ColumnSpec("Paid Security & First Month Rent", "paid_security_deposit_first_month_rent"),
        ColumnSpec("Scheduled Payment Time", "scheduled_paid_time", ColumnKind.DATE),
        ColumnSpec("Handled Keys", "handled_keys"),
        ColumnSpec("Move-In Form Sent Date", "move_in_form_sent_date", ColumnKind.DATE),
        ColumnSpec("Filled Move-In Form", "filled_move_in_form"),
        ColumnSpec("Date of Move-In Form Filled", "date_of_move_in_form_filled", ColumnKind.DATE),
        ColumnSpec("Submitted Insurance", "submitted_insurance"),
        ColumnSpec("Date of Insurance Expiration", "date_of_insurance_expiration", ColumnKind.DATE),
    )

    def ordering(self) -> list:
        return [MoveIn.move_in_date.desc(), MoveIn.created_at.desc()]

    async def prepare(self, record: MoveIn, data) -> None:
        await super().prepare(record, data)
        first = (getattr(data, "first_name", None) or "").strip()
        last = (getattr(data, "last_name", None) or "").strip()
        full_name = f"{first} {last}".strip()
        if full_name:
            record.tenant_name = full_name
        apply_move_in_rules(record)

    async def after_save(self, record: MoveIn, data) -> None:
        first = (getattr(data, "first_name", None) or "").strip()
        last = (getattr(data, "last_name", None) or "").strip()
        if not (first and last and record.unit_id):
            return
        unit = await self.locations.get_unit(record.unit_id)
        await TenantService(self.db).add_to_unit(unit, first, last)
