"""Rental property API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_current_user, require_manager
from rentals.core.database import get_db
from rentals.models.user import User
from rentals.schemas.property import (
    PropertyCreate,
    PropertyResponse,
    PropertyUpdate,
    PropertyWithUnitsResponse,
    UnitResponse,
)
from rentals.services import property as property_service

router = APIRouter(prefix="/properties", tags=["properties"])


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def create_property(
    property_data: PropertyCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    """Create a new rental property."""
    return property_service.create_property(db, property_data)


@router.get("", response_model=list[PropertyWithUnitsResponse])
def list_properties(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """List all properties together with their units."""
    return property_service.get_properties_with_units(db)


@router.get("/{property_id}", response_model=PropertyWithUnitsResponse)
def get_property(
    property_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return property_service.get_property(db, property_id)


@router.patch("/{property_id}", response_model=PropertyResponse)
def update_property(
    property_id: int,
    property_data: PropertyUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    return property_service.update_property(db, property_id, property_data)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(
    property_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    """Delete a property and all of its units."""
    property_service.delete_property(db, property_id)


@router.get("/{property_id}/units", response_model=list[UnitResponse])
def list_units(
    property_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return property_service.get_units_for_property(db, property_id)
