"""Rental property database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.unit import Unit


class RentalProperty(Base):
    """A building or lot containing a fixed number of rentable units."""

    __tablename__ = "rental_properties"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    address: Mapped[str] = mapped_column(String(255))
    code: Mapped[str] = mapped_column(String(20))
    no_units: Mapped[int] = mapped_column(default=1)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    units: Mapped[list["Unit"]] = relationship(
        back_populates="rental_property",
        cascade="all, delete-orphan",
        order_by="Unit.created_at",
    )
