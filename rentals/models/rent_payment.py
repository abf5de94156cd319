"""Rent payment database model."""

from datetime import UTC, datetime

from sqlalchemy import ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from rentals.core.database import Base


class RentPayment(Base):
    """Paid/unpaid status of one unit's rent for one month."""

    __tablename__ = "rent_payments"
    __table_args__ = (UniqueConstraint("unit_id", "year", "month"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    unit_id: Mapped[int] = mapped_column(ForeignKey("units.id", ondelete="CASCADE"), index=True)
    year: Mapped[int]
    month: Mapped[int]  # 1-12
    paid: Mapped[bool] = mapped_column(default=False)
    recorded_by_user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    recorded_date: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
