"""Notice types and notice/eviction records."""

import datetime as dt
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, DateTime, Date, ForeignKey, Integer, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.core.database import Base

if TYPE_CHECKING:
    from backoffice.models.tenant import Tenant


class Notice(Base):
    """A notice type and the number of days before it ripens into an eviction."""

    __tablename__ = "notices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    notice_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow)


class NoticeAndEviction(Base):
    """A notice served on a tenant and the eviction case that may follow."""

    __tablename__ = "notice_and_evictions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    status: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True, index=True)
    type_of_notice: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    have_an_exception: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    note: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Calculated: "", "Alert" or "Have An Exception"
    evictions: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    sent_to_attorney: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    hearing_dates: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    evicted_or_payment_plan: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    if_left: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    writ_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)

    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow
    )

    # Relationships
    tenant: Mapped[Optional["Tenant"]] = relationship("Tenant")
