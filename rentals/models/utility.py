"""Utility reading and utility payment database models."""

from datetime import UTC, date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base
from rentals.models.enums import UtilityType

if TYPE_CHECKING:
    from rentals.models.unit_pairing import UnitPairing


class Utility(Base):
    """Monthly utility meter reading with the provider's billed amount.

    Readings are cumulative values that decrease over the billing period, so
    consumption is the previous reading minus the current one.
    """

    __tablename__ = "utilities"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    pairing_id: Mapped[int | None] = mapped_column(
        ForeignKey("unit_pairings.id"),
        nullable=True,
        index=True,
    )
    unit_id: Mapped[int | None] = mapped_column(
        ForeignKey("units.id", ondelete="SET NULL"),
        nullable=True,
    )
    type: Mapped[UtilityType] = mapped_column(String(20), index=True)

    due_date: Mapped[date]
    date_of_reading: Mapped[date] = mapped_column(index=True)

    unit_reading: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=3))
    first_floor_reading: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=3))
    second_floor_reading: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=3))
    amount: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2))

    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    pairing: Mapped["UnitPairing | None"] = relationship()
    payment: Mapped["UtilityPayment | None"] = relationship(
        back_populates="utility",
        cascade="all, delete-orphan",
        uselist=False,
    )


class UtilityPayment(Base):
    """Payment status of a single utility bill."""

    __tablename__ = "utility_payments"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    utility_id: Mapped[int] = mapped_column(
        ForeignKey("utilities.id", ondelete="CASCADE"),
        unique=True,
    )
    paid: Mapped[bool] = mapped_column(default=False)
    recorded_by_user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    recorded_date: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    utility: Mapped["Utility"] = relationship(back_populates="payment")
