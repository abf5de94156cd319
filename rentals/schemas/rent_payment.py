"""Rent payment schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class RentPaymentRecord(BaseModel):
    """Schema for recording a unit's rent status for a month."""

    unit_id: int
    year: int = Field(ge=2000, le=2100)
    month: int = Field(ge=1, le=12)
    paid: bool
    comments: str | None = None


class RentPaymentResponse(BaseModel):
    """Schema for rent payment response."""

    id: int
    unit_id: int
    year: int
    month: int
    paid: bool
    recorded_by_user_id: int | None
    recorded_date: datetime
    comments: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class RentTrackerRow(BaseModel):
    """One unit's rent status across the twelve months of a year."""

    unit_id: int
    unit_name: str
    property_name: str
    rent_amount: str
    months: dict[int, bool | None]  # month -> paid, None when nothing recorded
