"""MoveOut model."""

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, DateTime, Date, ForeignKey, Integer, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.core.database import Base

if TYPE_CHECKING:
    from backoffice.models.property import Unit


class MoveOut(Base):
    """Checklist for a tenant leaving a unit."""

    __tablename__ = "move_outs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    unit_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("units.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    tenants_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)

    move_out_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True, index=True)
    lease_status: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    date_lease_ending_on_buildium: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    keys_location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Utilities
    utilities_under_our_name: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    date_utility_put_under_our_name: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    walkthrough: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    repairs: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    send_back_security_deposit: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    cleaning: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    list_the_unit: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    move_out_form: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    unit: Mapped[Optional["Unit"]] = relationship("Unit")
