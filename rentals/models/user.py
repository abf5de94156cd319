"""User database model."""

from datetime import UTC, datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from rentals.core.database import Base
from rentals.models.enums import UserRole


class User(Base):
    """Application user. Recorded as the actor on payments and contracts."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    full_name: Mapped[str | None] = mapped_column(String(150), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    role: Mapped[UserRole] = mapped_column(String(20), default=UserRole.CONTRIBUTOR)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    is_active: Mapped[bool] = mapped_column(default=True)

    @property
    def display_name(self) -> str:
        """Name shown on documents ("Prepared by") and tracker rows."""
        return self.full_name or self.email or "User"

    def get_is_manager(self) -> bool:
        """Check if this user has manager rights."""
        return self.role == UserRole.MANAGER
