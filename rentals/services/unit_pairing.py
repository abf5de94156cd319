"""Unit pairing service.

A pairing bills two units against one shared meter. Each unit belongs to at
most one pairing, so pairing a unit again replaces its existing pairing.
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from rentals.models.unit_pairing import UnitPairing
from rentals.models.utility import Utility
from rentals.schemas.property import UnitPairingCreate, UnitPairingResponse
from rentals.services.formatting import pair_label
from rentals.services.property import get_unit

logger = logging.getLogger(__name__)


def get_unit_pairings(db: Session) -> list[UnitPairing]:
    return (
        db.query(UnitPairing)
        .order_by(UnitPairing.created_at.desc(), UnitPairing.id.desc())
        .all()
    )


def get_unit_pairing(db: Session, pairing_id: int) -> UnitPairing:
    """Get a pairing by ID."""
    pairing = db.query(UnitPairing).filter(UnitPairing.id == pairing_id).first()
    if not pairing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Unit pairing not found",
        )
    return pairing


def _ensure_no_readings(db: Session, pairing: UnitPairing) -> None:
    has_readings = db.query(Utility.id).filter(Utility.pairing_id == pairing.id).first()
    if has_readings:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Unit pairing {pairing.id} still has utility readings",
        )


def get_unit_pairing_by_unit_id(db: Session, unit_id: int) -> UnitPairing | None:
    return (
        db.query(UnitPairing)
        .filter(
            or_(
                UnitPairing.first_unit_id == unit_id,
                UnitPairing.second_unit_id == unit_id,
            )
        )
        .first()
    )


def upsert_unit_pairing(db: Session, data: UnitPairingCreate) -> UnitPairing:
    """Pair two units, replacing any pairing that already holds either of them."""
    get_unit(db, data.first_unit_id)
    get_unit(db, data.second_unit_id)

    existing = [
        p
        for p in (
            get_unit_pairing_by_unit_id(db, data.first_unit_id),
            get_unit_pairing_by_unit_id(db, data.second_unit_id),
        )
        if p is not None
    ]

    if existing:
        pairing = existing[0]
        # The other unit may sit in a second pairing that would now collide
        for stale in existing[1:]:
            if stale.id != pairing.id:
                _ensure_no_readings(db, stale)
                logger.info("Removing pairing %s superseded by pairing %s", stale.id, pairing.id)
                db.delete(stale)
        db.flush()
        pairing.first_unit_id = data.first_unit_id
        pairing.second_unit_id = data.second_unit_id
        logger.info("Updated pairing %s", pairing.id)
    else:
        pairing = UnitPairing(
            first_unit_id=data.first_unit_id,
            second_unit_id=data.second_unit_id,
        )
        db.add(pairing)

    db.commit()
    db.refresh(pairing)
    return pairing


def delete_unit_pairing(db: Session, pairing_id: int) -> None:
    pairing = get_unit_pairing(db, pairing_id)
    _ensure_no_readings(db, pairing)
    db.delete(pairing)
    db.commit()


def get_pairing_label(pairing: UnitPairing) -> str:
    first, second = pairing.first_unit, pairing.second_unit
    return pair_label(
        first.rental_property.code,
        first.name,
        second.rental_property.code,
        second.name,
    )


def pairing_to_response(pairing: UnitPairing) -> UnitPairingResponse:
    """Convert a UnitPairing model to a response schema."""
    return UnitPairingResponse(
        id=pairing.id,
        first_unit_id=pairing.first_unit_id,
        second_unit_id=pairing.second_unit_id,
        label=get_pairing_label(pairing),
        created_at=pairing.created_at,
    )
