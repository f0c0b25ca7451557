"""Vendor task tracker service."""

from typing import Optional

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from backoffice.core.errors import FieldValidationError
from backoffice.models.enums import VENDOR_TASK_COMPLETED, VendorTaskStatusFilter
from backoffice.models.vendor import Vendor
from backoffice.models.vendor_task import VendorTask
from backoffice.schemas.vendor_task import VendorTaskResponse
from backoffice.services.csv_export import ColumnKind, ColumnSpec
from backoffice.services.locations import unit_load_option
from backoffice.services.records import RecordService


class VendorTaskService(RecordService):
    model = VendorTask
    response_schema = VendorTaskResponse
    tag = "VENDOR_TASKS"
    required_fields = {
        "unit_id": "The unit is required.",
        "task_submission_date": "The task submission date is required.",
        "assigned_tasks": "The assigned tasks field is required.",
        "urgent": "The urgent field is required.",
    }

    export_columns = (
        ColumnSpec("ID", "id", ColumnKind.ID),
        ColumnSpec("City", "city_name"),
        ColumnSpec("Property", "property_name"),
        ColumnSpec("Unit Name", "unit_name"),
        ColumnSpec("Vendor Name", "vendor_name"),
        ColumnSpec("Task Submission Date", "task_submission_date", ColumnKind.DATE),
        ColumnSpec("Assigned Tasks", "assigned_tasks"),
        ColumnSpec("Any Scheduled Visits", "any_scheduled_visits", ColumnKind.DATE),
        ColumnSpec("Notes", "notes"),
        ColumnSpec("Task Ending Date", "task_ending_date", ColumnKind.DATE),
        ColumnSpec("Status", "status"),
        ColumnSpec("Urgent", "urgent"),
    )

    def load_options(self) -> list:
        return [unit_load_option(VendorTask.unit), selectinload(VendorTask.vendor)]

    def ordering(self) -> list:
        return [VendorTask.task_submission_date.desc(), VendorTask.created_at.desc()]

    def apply_filters(self, query: Select, filters: dict[str, Optional[str]]) -> Select:
        query = self.location_filter(query, filters)

        vendor = filters.get("vendor")
        if vendor:
            query = query.where(
                VendorTask.vendor_id.in_(select(Vendor.id).where(Vendor.vendor_name.ilike(f"%{vendor}%")))
            )

        status = (filters.get("status") or VendorTaskStatusFilter.EXCLUDE_COMPLETED.value).strip()
        if status == VendorTaskStatusFilter.ALL.value:
            return query
        if status == VendorTaskStatusFilter.EXCLUDE_COMPLETED.value:
            # Tasks without a status are still open
            return query.where(
                (VendorTask.status.is_(None)) | (VendorTask.status != VENDOR_TASK_COMPLETED)
            )
        return query.where(VendorTask.status == status)

    async def prepare(self, record: VendorTask, data) -> None:
        await super().prepare(record, data)

        if record.vendor_id is not None:
            vendor = await self.db.execute(
                select(Vendor.id).where(Vendor.id == record.vendor_id, Vendor.is_archived.is_(False))
            )
            if vendor.scalar_one_or_none() is None:
                raise FieldValidationError("vendor_id", "The selected vendor must exist and be active.")

        if (
            record.task_ending_date is not None
            and record.task_submission_date is not None
            and record.task_ending_date < record.task_submission_date
        ):
            raise FieldValidationError(
                "task_ending_date", "The task ending date must be on or after the submission date."
            )

    def serialize(self, record: VendorTask):
        response = super().serialize(record)
        if record.vendor:
            response = response.model_copy(update={"vendor_name": record.vendor.vendor_name})
        return response
