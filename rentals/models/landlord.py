"""Landlord database model."""

from datetime import UTC, date, datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from rentals.core.database import Base


class Landlord(Base):
    """Lessor named on lease contracts."""

    __tablename__ = "landlords"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100))
    middle_name: Mapped[str] = mapped_column(String(100), default="")
    last_name: Mapped[str] = mapped_column(String(100))
    name_prefix: Mapped[str | None] = mapped_column(String(20), nullable=True)
    citizenship: Mapped[str] = mapped_column(String(50))
    marital_status: Mapped[str] = mapped_column(String(30))
    postal_address: Mapped[str] = mapped_column(String(255))
    gov_id_type: Mapped[str] = mapped_column(String(50))
    gov_id_no: Mapped[str] = mapped_column(String(50))
    id_issued_date: Mapped[date]
    id_expiry_date: Mapped[date]
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
