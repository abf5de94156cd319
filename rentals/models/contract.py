"""Lease contract database model."""

from datetime import UTC, date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.core.database import Base

if TYPE_CHECKING:
    from rentals.models.landlord import Landlord
    from rentals.models.tenant import Tenant
    from rentals.models.unit import Unit
    from rentals.models.user import User


class Contract(Base):
    """Yearly lease contract for a unit.

    The lessee's name and address are copied onto the contract when it is
    drawn up, so later edits to the tenant record do not alter it. Signing
    and notarization are tracked with the user who last recorded them.
    """

    __tablename__ = "contracts"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    unit_id: Mapped[int] = mapped_column(ForeignKey("units.id", ondelete="CASCADE"), index=True)
    tenant_id: Mapped[int] = mapped_column(ForeignKey("tenants.id", ondelete="CASCADE"))
    landlord_id: Mapped[int | None] = mapped_column(
        ForeignKey("landlords.id", ondelete="SET NULL"),
        nullable=True,
    )
    year: Mapped[int] = mapped_column(index=True)

    first_name: Mapped[str] = mapped_column(String(100))
    middle_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    citizenship: Mapped[str] = mapped_column(String(50))
    marital_status: Mapped[str] = mapped_column(String(30))
    tenant_address: Mapped[str] = mapped_column(String(255))
    unit_specification: Mapped[str] = mapped_column(Text)
    property_specification: Mapped[str] = mapped_column(Text)

    rent: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2))
    cash_bond: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2))
    begin_contract: Mapped[date]
    end_contract: Mapped[date]

    # Tracking
    signed: Mapped[bool] = mapped_column(default=False)
    notarized: Mapped[bool] = mapped_column(default=False)
    recorded_by_user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    recorded_date: Mapped[datetime | None] = mapped_column(nullable=True)
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    unit: Mapped["Unit"] = relationship()
    tenant: Mapped["Tenant"] = relationship()
    landlord: Mapped["Landlord | None"] = relationship()
    recorded_by: Mapped["User | None"] = relationship()
