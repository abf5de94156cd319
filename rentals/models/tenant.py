"""Tenant database model."""

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.unit import Unit


class Tenant(Base):
    """Person occupying a unit."""

    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    unit_id: Mapped[int] = mapped_column(ForeignKey("units.id", ondelete="CASCADE"), index=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    contact_no: Mapped[str] = mapped_column(String(30))
    messenger: Mapped[str | None] = mapped_column(String(100), nullable=True)

    gov_id_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    gov_id_no: Mapped[str | None] = mapped_column(String(50), nullable=True)
    id_issued_date: Mapped[date | None] = mapped_column(nullable=True)
    id_expiry_date: Mapped[date | None] = mapped_column(nullable=True)

    recorded_by_user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    unit: Mapped["Unit"] = relationship(back_populates="tenants")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
