"""Helpers shared by the record routers: index payload, CSV download, lookups."""

import io
import logging
from typing import Iterable, Optional

from fastapi import HTTPException, Request, status
from fastapi.responses import StreamingResponse

from backoffice.core.config import get_settings
from backoffice.services.csv_export import CSV_MEDIA_TYPE, export_filename
from backoffice.services.pagination import resolve_page, resolve_per_page
from backoffice.services.records import RecordService

logger = logging.getLogger(__name__)

LOCATION_FILTER_KEYS = ("city", "property", "unit")


def index_path(resource: str) -> str:
    return f"{get_settings().api_v1_prefix}/{resource}"


def read_filters(request: Request, extra_keys: Iterable[str] = ()) -> dict[str, Optional[str]]:
    """Location filters plus per-entity extras from the query string."""
    params = request.query_params
    return {key: params.get(key) or None for key in (*LOCATION_FILTER_KEYS, *extra_keys)}


async def build_index(
    service: RecordService,
    request: Request,
    filters: dict[str, Optional[str]],
    page: Optional[str],
    per_page: Optional[str],
) -> dict:
    """Page of records, the echoed filters and the location filter options."""
    resolved_per_page = resolve_per_page(per_page, get_settings().default_per_page)
    data, meta, links = await service.list_page(
        filters, request.url, resolve_page(page), resolved_per_page
    )
    options = await service.locations.options()
    return {
        "records": {"data": data, "links": links, "meta": meta},
        "filters": {**filters, "per_page": str(resolved_per_page)},
        **options,
    }


def csv_response(text: str, entity: str) -> StreamingResponse:
    headers = {"Content-Disposition": f'attachment; filename="{export_filename(entity)}"'}
    return StreamingResponse(io.BytesIO(text.encode("utf-8")), media_type=CSV_MEDIA_TYPE, headers=headers)


async def export_page(
    service: RecordService,
    request: Request,
    entity: str,
    filters: dict[str, Optional[str]],
    page: Optional[str],
    per_page: Optional[str],
) -> StreamingResponse:
    """CSV of the page the index would show for the same filters."""
    try:
        resolved_per_page = resolve_per_page(per_page, get_settings().default_per_page)
        data, _, _ = await service.list_page(filters, request.url, resolve_page(page), resolved_per_page)
        text = service.export(data)
    except Exception as e:
        logger.error(f"[CSV] Export of {entity} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="CSV export failed",
        )
    logger.info(f"[CSV] Exported {len(data)} {entity} rows")
    return csv_response(text, entity)


def not_found(label: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
