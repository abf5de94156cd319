"""Landlord API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_current_user, require_manager
from rentals.core.database import get_db
from rentals.models.user import User
from rentals.schemas.tenant import LandlordCreate, LandlordResponse, LandlordUpdate
from rentals.services import tenant as tenant_service

router = APIRouter(prefix="/landlords", tags=["landlords"])


@router.post("", response_model=LandlordResponse, status_code=status.HTTP_201_CREATED)
def create_landlord(
    landlord_data: LandlordCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    return tenant_service.create_landlord(db, landlord_data)


@router.get("", response_model=list[LandlordResponse])
def list_landlords(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return tenant_service.get_landlords(db)


@router.patch("/{landlord_id}", response_model=LandlordResponse)
def update_landlord(
    landlord_id: int,
    landlord_data: LandlordUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    return tenant_service.update_landlord(db, landlord_id, landlord_data)


@router.delete("/{landlord_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_landlord(
    landlord_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    tenant_service.delete_landlord(db, landlord_id)
