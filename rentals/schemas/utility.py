"""Utility reading, utility payment and billing schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rentals.models.enums import UtilityType


class UtilityCreate(BaseModel):
    """Schema for recording a utility reading for a pairing."""

    pairing_id: int
    type: UtilityType
    due_date: date
    date_of_reading: date
    unit_reading: Decimal = Field(ge=0)
    first_floor_reading: Decimal = Field(ge=0)
    second_floor_reading: Decimal = Field(ge=0)
    amount: Decimal = Field(ge=0)


class UtilityUpdate(BaseModel):
    """Schema for correcting a utility reading."""

    type: UtilityType | None = None
    due_date: date | None = None
    date_of_reading: date | None = None
    unit_reading: Decimal | None = Field(default=None, ge=0)
    first_floor_reading: Decimal | None = Field(default=None, ge=0)
    second_floor_reading: Decimal | None = Field(default=None, ge=0)
    amount: Decimal | None = Field(default=None, ge=0)


class UtilityPaymentUpdate(BaseModel):
    """Schema for recording whether a utility bill was paid."""

    paid: bool
    comments: str | None = None


class UtilityPaymentRecord(BaseModel):
    """Payment state joined onto a utility reading."""

    id: int
    utility_id: int
    paid: bool
    recorded_by_user_id: int | None
    recorded_date: datetime
    comments: str | None

    model_config = {"from_attributes": True}


class UtilityWithPayment(BaseModel):
    """A utility reading record as consumed by the billing helpers."""

    id: int
    pairing_id: int | None = None
    unit_id: int | None = None
    type: UtilityType
    due_date: date
    date_of_reading: date
    unit_reading: Decimal
    first_floor_reading: Decimal
    second_floor_reading: Decimal
    amount: Decimal
    created_at: datetime | None = None
    payment: UtilityPaymentRecord | None = None

    model_config = {"from_attributes": True}


class BillingDataForExport(BaseModel):
    """Apportioned billing record handed to document exporters.

    Serialized with camelCase keys. Figures are unrounded; rounding to two
    decimals happens only when a document or display string is produced.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    unit_name: str
    type: UtilityType
    due_date: date
    previous_date: date
    previous_unit_reading: Decimal
    previous_first_floor: Decimal
    previous_second_floor: Decimal
    current_date: date
    current_unit_reading: Decimal
    current_first_floor: Decimal
    current_second_floor: Decimal
    amount: Decimal
    remarks: Literal["Paid", "Not Paid"]
    prepared_by: str

    first_floor_usage: Decimal
    second_floor_usage: Decimal
    total_usage: Decimal
    first_floor_percentage: Decimal
    second_floor_percentage: Decimal
    first_floor_amount: Decimal
    second_floor_amount: Decimal


class UtilityTrackerRow(BaseModel):
    """One row of the utility tracker for a pairing."""

    utility_id: int
    due_date: date
    previous_date_of_reading: date | None
    previous_unit_reading: Decimal | None
    current_date_of_reading: date
    current_unit_reading: Decimal
    usage: Decimal | None  # previous - current, None without an older reading
    amount: Decimal
    paid: bool
    recorded_by: str | None
