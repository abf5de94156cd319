"""Lease contract schemas."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator


class ContractCreate(BaseModel):
    """Schema for drawing up a lease contract."""

    unit_id: int
    tenant_id: int
    landlord_id: int | None = None
    year: int = Field(ge=2000, le=2100)
    first_name: str = Field(min_length=1)
    middle_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    citizenship: str = Field(min_length=1)
    marital_status: str = Field(min_length=1)
    tenant_address: str = Field(min_length=1)
    unit_specification: str = Field(min_length=1)
    property_specification: str = Field(min_length=1)
    rent: Decimal = Field(ge=0)
    cash_bond: Decimal = Field(ge=0)
    begin_contract: date
    end_contract: date
    comments: str | None = None

    @model_validator(mode="after")
    def validate_period(self) -> "ContractCreate":
        """The lease must end after it begins."""
        if self.end_contract <= self.begin_contract:
            raise ValueError("end_contract must be after begin_contract")
        return self


class ContractUpdate(BaseModel):
    """Schema for editing contract terms."""

    tenant_id: int | None = None
    landlord_id: int | None = None
    year: int | None = Field(default=None, ge=2000, le=2100)
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    citizenship: str | None = None
    marital_status: str | None = None
    tenant_address: str | None = None
    unit_specification: str | None = None
    property_specification: str | None = None
    rent: Decimal | None = Field(default=None, ge=0)
    cash_bond: Decimal | None = Field(default=None, ge=0)
    begin_contract: date | None = None
    end_contract: date | None = None
    comments: str | None = None


class ContractTrackingUpdate(BaseModel):
    """Schema for recording signing/notarization progress."""

    signed: bool
    notarized: bool = False
    comments: str | None = None


class ContractResponse(BaseModel):
    """Schema for contract response."""

    id: int
    unit_id: int
    tenant_id: int
    landlord_id: int | None
    year: int
    first_name: str
    middle_name: str
    last_name: str
    citizenship: str
    marital_status: str
    tenant_address: str
    unit_specification: str
    property_specification: str
    rent: Decimal
    cash_bond: Decimal
    begin_contract: date
    end_contract: date
    signed: bool
    notarized: bool
    recorded_by_user_id: int | None
    recorded_date: datetime | None
    comments: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
