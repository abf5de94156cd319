"""Unit pairing API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_current_user, require_manager
from rentals.core.database import get_db
from rentals.models.user import User
from rentals.schemas.property import UnitPairingCreate, UnitPairingResponse
from rentals.services import unit_pairing as pairing_service

router = APIRouter(prefix="/pairings", tags=["pairings"])


@router.get("", response_model=list[UnitPairingResponse])
def list_pairings(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[UnitPairingResponse]:
    pairings = pairing_service.get_unit_pairings(db)
    return [pairing_service.pairing_to_response(p) for p in pairings]


@router.post("", response_model=UnitPairingResponse)
def save_pairing(
    pairing_data: UnitPairingCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
) -> UnitPairingResponse:
    """Pair two units, replacing any pairing either unit already belongs to."""
    pairing = pairing_service.upsert_unit_pairing(db, pairing_data)
    return pairing_service.pairing_to_response(pairing)


@router.delete("/{pairing_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pairing(
    pairing_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_manager),
):
    pairing_service.delete_unit_pairing(db, pairing_id)
