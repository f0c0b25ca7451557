"""Move-out checklist service."""

import logging

from backoffice.models.enums import LEASE_STATUS_ENDED, YesNo
from backoffice.models.move_out import MoveOut
from backoffice.schemas.move_out import MoveOutResponse
from backoffice.services.csv_export import ColumnKind, ColumnSpec
from backoffice.services.records import RecordService

logger = logging.getLogger(__name__)


class MoveOutService(RecordService):
    model = MoveOut
    response_schema = MoveOutResponse
    tag = "MOVE_OUTS"
    required_fields = {"unit_id": "The unit ID is required."}

    export_columns = (
        ColumnSpec("ID", "id", ColumnKind.ID),
        ColumnSpec("City", "city_name"),
        ColumnSpec("Property", "property_name"),
        ColumnSpec("Unit Name", "unit_name"),
        ColumnSpec("Tenants Name", "tenants_name"),
        ColumnSpec("Move Out Date", "move_out_date", ColumnKind.DATE),
        ColumnSpec("Lease Status", "lease_status"),
        ColumnSpec("Date Lease Ending on Buildium", "date_lease_ending_on_buildium", ColumnKind.DATE),
        ColumnSpec("Keys Location", "keys_location"),
        ColumnSpec("Utilities Under Our Name", "utilities_under_our_name"),
        ColumnSpec("Date Utility Put Under Our Name", "date_utility_put_under_our_name", ColumnKind.DATE),
        ColumnSpec("Walkthrough", "walkthrough"),
        ColumnSpec("Repairs", "repairs"),
        ColumnSpec("Send Back Security Deposit", "send_back_security_deposit"),
        ColumnSpec("Notes", "notes"),
        ColumnSpec("Cleaning", "cleaning"),
        ColumnSpec("List the Unit", "list_the_unit"),
        ColumnSpec("Move Out Form", "move_out_form"),
    )

    def ordering(self) -> list:
        return [MoveOut.move_out_date.desc(), MoveOut.created_at.desc()]

    async def after_save(self, record: MoveOut, data) -> None:
        """An ended lease leaves the unit vacant and unlisted with no tenants."""
        status = (record.lease_status or "").strip().lower()
        if status != LEASE_STATUS_ENDED or not record.unit_id:
            return
        unit = await self.locations.get_unit(record.unit_id)
        if unit is None:
            return
        unit.tenants = None
        unit.vacant = YesNo.YES.value
        unit.listed = YesNo.NO.value
        unit.total_applications = 0
        logger.info(f"[MOVE_OUTS] Lease ended, unit {unit.id} marked vacant")
