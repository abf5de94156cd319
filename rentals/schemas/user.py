"""User Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, EmailStr

from rentals.models.enums import UserRole


class UserCreate(BaseModel):
    """Schema for creating a new user."""

    email: EmailStr
    full_name: str
    phone_number: str | None = None
    role: UserRole = UserRole.CONTRIBUTOR


class UserProfileUpdate(BaseModel):
    """Schema for a user updating their own profile."""

    full_name: str | None = None
    phone_number: str | None = None
    email: EmailStr | None = None


class UserRoleUpdate(BaseModel):
    """Schema for changing a user's role."""

    role: UserRole


class UserResponse(BaseModel):
    """Schema for user response."""

    id: int
    email: str
    full_name: str | None
    phone_number: str | None
    role: UserRole
    created_at: datetime
    is_active: bool

    model_config = {"from_attributes": True}
