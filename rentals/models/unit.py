"""Unit database model."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.property import RentalProperty
    from rentals.models.tenant import Tenant


class Unit(Base):
    """A rentable unit inside a property."""

    __tablename__ = "units"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    rental_property_id: Mapped[int] = mapped_column(
        ForeignKey("rental_properties.id"),
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100))
    track_utilities: Mapped[bool] = mapped_column(default=False)
    contract_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    rent_amount: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), default=0)
    cash_bond_amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        default=0,
    )
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    rental_property: Mapped["RentalProperty"] = relationship(back_populates="units")
    tenants: Mapped[list["Tenant"]] = relationship(
        back_populates="unit",
        cascade="all, delete-orphan",
    )
