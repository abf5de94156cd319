"""Unit pairing database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.unit import Unit


class UnitPairing(Base):
    """Two units billed jointly against one shared utility meter.

    The first unit is billed as the first floor, the second unit as the
    second floor. A unit belongs to at most one pairing.
    """

    __tablename__ = "unit_pairings"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    first_unit_id: Mapped[int] = mapped_column(ForeignKey("units.id"), unique=True)
    second_unit_id: Mapped[int] = mapped_column(ForeignKey("units.id"), unique=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    first_unit: Mapped["Unit"] = relationship(foreign_keys=[first_unit_id])
    second_unit: Mapped["Unit"] = relationship(foreign_keys=[second_unit_id])
