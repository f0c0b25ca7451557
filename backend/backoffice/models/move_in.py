"""MoveIn model."""

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, DateTime, Date, ForeignKey, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.core.database import Base

if TYPE_CHECKING:
    from backoffice.models.property import Unit


class MoveIn(Base):
    """Checklist for a tenant moving into a unit."""

    __tablename__ = "move_ins"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    unit_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("units.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    tenant_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Lease
    signed_lease: Mapped[str] = mapped_column(String(3), nullable=False, index=True)
    lease_signing_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True, index=True)
    move_in_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True, index=True)

    # Payment
    paid_security_deposit_first_month_rent: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    scheduled_paid_time: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Keys and forms
    handled_keys: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    move_in_form_sent_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    filled_move_in_form: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    date_of_move_in_form_filled: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Insurance
    submitted_insurance: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    date_of_insurance_expiration: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    unit: Mapped[Optional["Unit"]] = relationship("Unit")
