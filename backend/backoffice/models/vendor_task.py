"""VendorTask model."""

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, DateTime, Date, ForeignKey, Integer, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.core.database import Base

if TYPE_CHECKING:
    from backoffice.models.property import Unit
    from backoffice.models.vendor import Vendor


class VendorTask(Base):
    """Work assigned to a vendor for a unit."""

    __tablename__ = "vendor_tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task_submission_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    vendor_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("vendors.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    unit_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("units.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    assigned_tasks: Mapped[str] = mapped_column(Text, nullable=False)
    any_scheduled_visits: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    task_ending_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    urgent: Mapped[str] = mapped_column(String(3), nullable=False, index=True)

    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    vendor: Mapped[Optional["Vendor"]] = relationship("Vendor")
    unit: Mapped[Optional["Unit"]] = relationship("Unit")
