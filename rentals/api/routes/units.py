"""Unit API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_current_user, require_manager
from rentals.core.database import get_db
from rentals.models.user import User
from rentals.schemas.property import UnitCreate, UnitResponse, UnitUpdate
from rentals.schemas.tenant import TenantResponse
from rentals.services import property as property_service

router = APIRouter(prefix="/units", tags=["units"])


@router.post("", response_model=UnitResponse, status_code=status.HTTP_201_CREATED)
def create_unit(
    unit_data: UnitCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    """Add a unit to a property, up to the property's unit limit."""
    return property_service.create_unit(db, unit_data)


@router.get("/{unit_id}", response_model=UnitResponse)
def get_unit(
    unit_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return property_service.get_unit(db, unit_id)


@router.patch("/{unit_id}", response_model=UnitResponse)
def update_unit(
    unit_id: int,
    unit_data: UnitUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    return property_service.update_unit(db, unit_id, unit_data)


@router.delete("/{unit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_unit(
    unit_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    property_service.delete_unit(db, unit_id)


@router.get("/{unit_id}/tenant", response_model=TenantResponse | None)
def get_unit_tenant(
    unit_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Current tenant of a unit, or null when vacant."""
    return property_service.get_tenant_for_unit(db, unit_id)
