"""Property, unit and pairing schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator


class PropertyCreate(BaseModel):
    """Schema for creating a new rental property."""

    name: str = Field(min_length=1)
    address: str
    code: str = Field(min_length=1)
    no_units: int = Field(ge=1)


class PropertyUpdate(BaseModel):
    """Schema for updating a rental property."""

    name: str | None = None
    address: str | None = None
    code: str | None = None
    no_units: int | None = Field(default=None, ge=1)


class PropertyResponse(BaseModel):
    """Schema for property response."""

    id: int
    name: str
    address: str
    code: str
    no_units: int
    created_at: datetime

    model_config = {"from_attributes": True}


class UnitCreate(BaseModel):
    """Schema for creating a unit."""

    rental_property_id: int
    name: str = Field(min_length=1)
    track_utilities: bool = False
    contract_address: str | None = None
    rent_amount: Decimal = Field(default=Decimal("0"), ge=0)
    cash_bond_amount: Decimal = Field(default=Decimal("0"), ge=0)


class UnitUpdate(BaseModel):
    """Schema for updating a unit."""

    name: str | None = None
    track_utilities: bool | None = None
    contract_address: str | None = None
    rent_amount: Decimal | None = Field(default=None, ge=0)
    cash_bond_amount: Decimal | None = Field(default=None, ge=0)


class UnitResponse(BaseModel):
    """Schema for unit response."""

    id: int
    rental_property_id: int
    name: str
    track_utilities: bool
    contract_address: str | None
    rent_amount: Decimal
    cash_bond_amount: Decimal
    created_at: datetime

    model_config = {"from_attributes": True}


class PropertyWithUnitsResponse(PropertyResponse):
    """Property including its units."""

    units: list[UnitResponse]


class UnitPairingCreate(BaseModel):
    """Schema for pairing two units on one shared meter."""

    first_unit_id: int
    second_unit_id: int

    @model_validator(mode="after")
    def validate_distinct_units(self) -> "UnitPairingCreate":
        """A unit cannot be paired with itself."""
        if self.first_unit_id == self.second_unit_id:
            raise ValueError("Please select two different units")
        return self


class UnitPairingResponse(BaseModel):
    """Schema for unit pairing response."""

    id: int
    first_unit_id: int
    second_unit_id: int
    label: str
    created_at: datetime
