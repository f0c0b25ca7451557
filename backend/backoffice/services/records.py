"""Shared CRUD/index/export behaviour for the unit-scoped record screens."""

import logging
from typing import Any, ClassVar, Optional, Sequence

from pydantic import BaseModel
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import URL

from backoffice.core.errors import FieldValidationError
from backoffice.services.csv_export import CSVExporter, ColumnSpec
from backoffice.services.locations import (
    LocationService,
    location_names,
    matching_unit_ids,
    unit_load_option,
)
from backoffice.services.pagination import paginate

logger = logging.getLogger(__name__)


class RecordService:
    """Base for services whose records hang off a unit.

    Subclasses set ``model``, ``response_schema``, ``tag``, ``export_columns``
    and implement ``ordering``. ``prepare`` applies the entity's derived fields
    and cross-field rules to the record before it is saved.
    """

    model: ClassVar[Any]
    response_schema: ClassVar[type[BaseModel]]
    tag: ClassVar[str] = "RECORDS"
    export_columns: ClassVar[Sequence[ColumnSpec]] = ()
    # Submitted for validation/derivation only, never stored on the record
    form_only_fields: ClassVar[set[str]] = {"city_id", "property_id"}
    # Field -> message for columns an update may not clear
    required_fields: ClassVar[dict[str, str]] = {}

    def __init__(self, db: AsyncSession):
        self.db = db
        self.locations = LocationService(db)

    # --- queries ---

    def load_options(self) -> list:
        return [unit_load_option(self.model.unit)]

    def ordering(self) -> list:
        raise NotImplementedError

    def base_query(self) -> Select:
        return (
            select(self.model)
            .options(*self.load_options())
            .where(self.model.is_archived.is_(False))
        )

    def location_filter(self, query: Select, filters: dict[str, Optional[str]]) -> Select:
        unit_ids = matching_unit_ids(filters.get("city"), filters.get("property"), filters.get("unit"))
        if unit_ids is not None:
            query = query.where(self.model.unit_id.in_(unit_ids))
        return query

    def apply_filters(self, query: Select, filters: dict[str, Optional[str]]) -> Select:
        return self.location_filter(query, filters)

    def index_query(self, filters: dict[str, Optional[str]]) -> Select:
        return self.apply_filters(self.base_query(), filters).order_by(*self.ordering())

    async def list_page(
        self,
        filters: dict[str, Optional[str]],
        url: URL,
        page: int,
        per_page,
    ):
        """One index page: (serialized records, meta, links)."""
        items, meta, links = await paginate(self.db, self.index_query(filters), url, page, per_page)
        return [self.serialize(item) for item in items], meta, links

    async def get(self, record_id: int):
        result = await self.db.execute(
            self.base_query()
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    # --- mutations ---

    async def resolve_location(self, record, data: BaseModel) -> None:
        """Validate the submitted unit against the submitted city/property."""
        if "unit_id" not in data.model_fields_set or record.unit_id is None:
            return
        await self.locations.resolve_unit(
            record.unit_id,
            city_id=getattr(data, "city_id", None),
            property_id=getattr(data, "property_id", None),
        )

    async def prepare(self, record, data: BaseModel) -> None:
        await self.resolve_location(record, data)

    async def after_save(self, record, data: BaseModel) -> None:
        """Side effects on related rows, run before commit."""

    async def create(self, data: BaseModel):
        record = self.model(**data.model_dump(exclude=self.form_only_fields))
        with self.db.no_autoflush:
            await self.prepare(record, data)
        self.db.add(record)
        await self.db.flush()
        await self.after_save(record, data)
        await self.db.commit()
        logger.info(f"[{self.tag}] Created {self.model.__name__} {record.id}")
        return await self.get(record.id)

    async def update(self, record, data: BaseModel):
        update_data = data.model_dump(exclude_unset=True, exclude=self.form_only_fields)
        for field, message in self.required_fields.items():
            if field in update_data and update_data[field] is None:
                raise FieldValidationError(field, message)
        with self.db.no_autoflush:
            for field, value in update_data.items():
                setattr(record, field, value)
            await self.prepare(record, data)
        await self.after_save(record, data)
        await self.db.commit()
        logger.info(f"[{self.tag}] Updated {self.model.__name__} {record.id}")
        return await self.get(record.id)

    async def archive(self, record) -> None:
        record.is_archived = True
        await self.db.commit()
        logger.info(f"[{self.tag}] Archived {self.model.__name__} {record.id}")

    # --- output ---

    def display_unit(self, record):
        return record.unit

    def serialize(self, record) -> BaseModel:
        response = self.response_schema.model_validate(record)
        return response.model_copy(update=location_names(self.display_unit(record)))

    def export(self, records: Sequence[BaseModel]) -> str:
        return CSVExporter().export(records, self.export_columns)
