"""Tenant and landlord schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from rentals.models.enums import GovIdType


class TenantCreate(BaseModel):
    """Schema for creating a tenant."""

    unit_id: int
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    contact_no: str
    messenger: str | None = None
    gov_id_type: GovIdType | None = None
    gov_id_no: str | None = None
    id_issued_date: date | None = None
    id_expiry_date: date | None = None


class TenantUpdate(BaseModel):
    """Schema for updating a tenant."""

    unit_id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    contact_no: str | None = None
    messenger: str | None = None
    gov_id_type: GovIdType | None = None
    gov_id_no: str | None = None
    id_issued_date: date | None = None
    id_expiry_date: date | None = None


class TenantResponse(BaseModel):
    """Schema for tenant response."""

    id: int
    unit_id: int
    first_name: str
    last_name: str
    contact_no: str
    messenger: str | None
    gov_id_type: str | None
    gov_id_no: str | None
    id_issued_date: date | None
    id_expiry_date: date | None
    recorded_by_user_id: int | None
    created_at: datetime

    model_config = {"from_attributes": True}


class LandlordCreate(BaseModel):
    """Schema for creating a landlord."""

    first_name: str = Field(min_length=1)
    middle_name: str = ""
    last_name: str = Field(min_length=1)
    name_prefix: str | None = None
    citizenship: str
    marital_status: str
    postal_address: str
    gov_id_type: GovIdType
    gov_id_no: str
    id_issued_date: date
    id_expiry_date: date


class LandlordUpdate(BaseModel):
    """Schema for updating a landlord."""

    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    name_prefix: str | None = None
    citizenship: str | None = None
    marital_status: str | None = None
    postal_address: str | None = None
    gov_id_type: GovIdType | None = None
    gov_id_no: str | None = None
    id_issued_date: date | None = None
    id_expiry_date: date | None = None


class LandlordResponse(LandlordCreate):
    """Schema for landlord response."""

    id: int
    gov_id_type: str
    created_at: datetime

    model_config = {"from_attributes": True}
