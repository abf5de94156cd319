"""Property and unit service for business logic."""

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from rentals.models.property import RentalProperty
from rentals.models.tenant import Tenant
from rentals.models.unit import Unit
from rentals.models.unit_pairing import UnitPairing
from rentals.schemas.property import PropertyCreate, PropertyUpdate, UnitCreate, UnitUpdate


def create_property(db: Session, property_data: PropertyCreate) -> RentalProperty:
    """Create a new rental property."""
    db_property = RentalProperty(**property_data.model_dump())
    db.add(db_property)
    db.commit()
    db.refresh(db_property)
    return db_property


def get_property(db: Session, property_id: int) -> RentalProperty:
    """Get a property by ID."""
    db_property = db.query(RentalProperty).filter(RentalProperty.id == property_id).first()
    if not db_property:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found",
        )
    return db_property


def get_properties(db: Session, skip: int = 0, limit: int = 100) -> list[RentalProperty]:
    """Get all properties, newest first."""
    return (
        db.query(RentalProperty)
        .order_by(RentalProperty.created_at.desc(), RentalProperty.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def get_properties_with_units(db: Session) -> list[RentalProperty]:
    """Get all properties with their units eagerly loaded."""
    return (
        db.query(RentalProperty)
        .options(selectinload(RentalProperty.units))
        .order_by(RentalProperty.created_at.desc(), RentalProperty.id.desc())
        .all()
    )


def update_property(
    db: Session,
    property_id: int,
    property_data: PropertyUpdate,
) -> RentalProperty:
    """Update a property."""
    db_property = get_property(db, property_id)

    update_data = property_data.model_dump(exclude_unset=True)
    new_limit = update_data.get("no_units")
    if new_limit is not None and new_limit < len(db_property.units):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Number of units cannot be lower than the units already created",
        )

    for field, value in update_data.items():
        setattr(db_property, field, value)

    db.commit()
    db.refresh(db_property)
    return db_property


def delete_property(db: Session, property_id: int) -> None:
    """Delete a property together with its units."""
    db_property = get_property(db, property_id)
    for db_unit in db_property.units:
        _ensure_unpaired(db, db_unit)
    db.delete(db_property)
    db.commit()


def create_unit(db: Session, unit_data: UnitCreate) -> Unit:
    """Create a unit, refusing once the property's unit limit is reached."""
    db_property = get_property(db, unit_data.rental_property_id)
    current_units = db.query(Unit).filter(Unit.rental_property_id == db_property.id).count()
    if current_units >= db_property.no_units:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot add more units. Maximum number of units reached.",
        )

    db_unit = Unit(**unit_data.model_dump())
    db.add(db_unit)
    db.commit()
    db.refresh(db_unit)
    return db_unit


def get_unit(db: Session, unit_id: int) -> Unit:
    """Get a unit by ID."""
    db_unit = db.query(Unit).filter(Unit.id == unit_id).first()
    if not db_unit:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Unit not found",
        )
    return db_unit


def get_units_for_property(db: Session, property_id: int) -> list[Unit]:
    get_property(db, property_id)
    return (
        db.query(Unit)
        .filter(Unit.rental_property_id == property_id)
        .order_by(Unit.created_at, Unit.id)
        .all()
    )


def update_unit(db: Session, unit_id: int, unit_data: UnitUpdate) -> Unit:
    db_unit = get_unit(db, unit_id)
    for field, value in unit_data.model_dump(exclude_unset=True).items():
        setattr(db_unit, field, value)
    db.commit()
    db.refresh(db_unit)
    return db_unit


def _ensure_unpaired(db: Session, db_unit: Unit) -> None:
    paired = (
        db.query(UnitPairing.id)
        .filter(
            or_(
                UnitPairing.first_unit_id == db_unit.id,
                UnitPairing.second_unit_id == db_unit.id,
            )
        )
        .first()
    )
    if paired:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{db_unit.name} is part of a unit pairing. Remove the pairing first.",
        )


def delete_unit(db: Session, unit_id: int) -> None:
    db_unit = get_unit(db, unit_id)
    _ensure_unpaired(db, db_unit)
    db.delete(db_unit)
    db.commit()


def get_tenant_for_unit(db: Session, unit_id: int) -> Tenant | None:
    """Get the current (first registered) tenant of a unit, if any."""
    get_unit(db, unit_id)
    return (
        db.query(Tenant)
        .filter(Tenant.unit_id == unit_id)
        .order_by(Tenant.created_at, Tenant.id)
        .first()
    )
