"""City, Property and Unit models (the location hierarchy)."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, DateTime, ForeignKey, Integer, Text, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.core.database import Base

if TYPE_CHECKING:
    from backoffice.models.tenant import Tenant


class City(Base):
    """A city grouping properties."""

    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    properties: Mapped[list["Property"]] = relationship("Property", back_populates="city")


class Property(Base):
    """A property (building/complex) located in a city."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    city_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("cities.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    city: Mapped[Optional["City"]] = relationship("City", back_populates="properties")
    units: Mapped[list["Unit"]] = relationship("Unit", back_populates="property")


class Unit(Base):
    """A rentable unit within a property."""

    __tablename__ = "units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    unit_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Comma-separated tenant names, maintained by move-ins/move-outs
    tenants: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Calculated fields
    vacant: Mapped[str] = mapped_column(String(3), default="Yes", nullable=False)
    listed: Mapped[str] = mapped_column(String(3), default="No", nullable=False)
    total_applications: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    property: Mapped[Optional["Property"]] = relationship("Property", back_populates="units")
    tenant_rows: Mapped[list["Tenant"]] = relationship("Tenant", back_populates="unit")
