"""Page builder for index queries."""

import math
from typing import Any, Optional, Sequence, Union

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import URL

PER_PAGE_CHOICES = (15, 30, 50)
PER_PAGE_ALL = "all"


def resolve_per_page(value: Optional[Union[str, int]], default: int = 15) -> Union[int, str]:
    """Return one of 15/30/50/"all"; anything else falls back to ``default``."""
    if value is None:
        return default
    text = str(value).strip().lower()
    if text == PER_PAGE_ALL:
        return PER_PAGE_ALL
    try:
        number = int(text)
    except ValueError:
        return default
    return number if number in PER_PAGE_CHOICES else default


def resolve_page(value: Optional[Union[str, int]]) -> int:
    try:
        page = int(value) if value is not None else 1
    except (TypeError, ValueError):
        return 1
    return max(page, 1)


def build_links(url: URL, current_page: int, last_page: int) -> list[dict[str, Any]]:
    """Previous, numbered pages, then Next."""

    def page_url(page: int) -> Optional[str]:
        if page < 1 or page > last_page:
            return None
        return str(url.include_query_params(page=page))

    links = [{"url": page_url(current_page - 1), "label": "Previous", "active": False}]
    for page in range(1, last_page + 1):
        links.append({"url": page_url(page), "label": str(page), "active": page == current_page})
    links.append({"url": page_url(current_page + 1), "label": "Next", "active": False})
    return links


async def paginate(
    db: AsyncSession,
    query: Select,
    url: URL,
    page: int = 1,
    per_page: Union[int, str] = 15,
) -> tuple[Sequence[Any], dict[str, Any], list[dict[str, Any]]]:
    """Run ``query`` for one page. Returns (items, meta, links)."""
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total = (await db.execute(count_query)).scalar() or 0

    size = max(total, 1) if per_page == PER_PAGE_ALL else int(per_page)
    last_page = max(math.ceil(total / size), 1)
    offset = (page - 1) * size

    result = await db.execute(query.offset(offset).limit(size))
    items = result.scalars().all()

    meta = {
        "current_page": page,
        "last_page": last_page,
        "from": offset + 1 if items else None,
        "to": offset + len(items) if items else None,
        "total": total,
        "per_page": size,
    }
    return items, meta, build_links(url, page, last_page)
