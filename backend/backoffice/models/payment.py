"""Payment model."""

import datetime as dt
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, DateTime, Date, ForeignKey, Integer, Boolean, Text, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.core.database import Base

if TYPE_CHECKING:
    from backoffice.models.property import Unit


class Payment(Base):
    """A rent payment line: what a unit owes and what was paid."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    unit_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("units.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Amounts (dollars, 2 decimal places)
    owes: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    paid: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    left_to_pay: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    reversed_payments: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    permanent: Mapped[str] = mapped_column(String(3), nullable=False)

    # Assistance
    has_assistance: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    assistance_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    assistance_company: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Managed only through hide/unhide
    is_hidden: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow)
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow
    )

    # Relationships
    unit: Mapped[Optional["Unit"]] = relationship("Unit")
