"""Page object and index payload schemas."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from backoffice.schemas.location import LocationOptions

T = TypeVar("T")


class PageLink(BaseModel):
    url: Optional[str] = None
    label: str
    active: bool = False


class PageMeta(BaseModel):
    current_page: int
    last_page: int
    from_: Optional[int] = Field(None, alias="from")
    to: Optional[int] = None
    total: int
    per_page: int

    model_config = {"populate_by_name": True}


class Page(BaseModel, Generic[T]):
    """One page of records plus navigation links."""

    data: list[T]
    links: list[PageLink]
    meta: PageMeta


class IndexResponse(LocationOptions, Generic[T]):
    """Everything an index screen needs: the page, echoed filters and filter options."""

    records: Page[T]
    filters: dict[str, Optional[str]] = {}
