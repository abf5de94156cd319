"""Tenant and landlord service for business logic."""

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from rentals.models.landlord import Landlord
from rentals.models.tenant import Tenant
from rentals.schemas.tenant import LandlordCreate, LandlordUpdate, TenantCreate, TenantUpdate
from rentals.services.property import get_unit


def create_tenant(
    db: Session,
    tenant_data: TenantCreate,
    user_id: int | None = None,
) -> Tenant:
    """Register a tenant in a unit."""
    get_unit(db, tenant_data.unit_id)
    db_tenant = Tenant(**tenant_data.model_dump(), recorded_by_user_id=user_id)
    db.add(db_tenant)
    db.commit()
    db.refresh(db_tenant)
    return db_tenant


def get_tenant(db: Session, tenant_id: int) -> Tenant:
    """Get a tenant by ID."""
    db_tenant = db.query(Tenant).filter(Tenant.id == tenant_id).first()
    if not db_tenant:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tenant not found",
        )
    return db_tenant


def get_tenants(db: Session, unit_id: int | None = None) -> list[Tenant]:
    """Get all tenants, newest first, optionally for one unit."""
    query = db.query(Tenant)
    if unit_id is not None:
        query = query.filter(Tenant.unit_id == unit_id)
    return query.order_by(Tenant.created_at.desc(), Tenant.id.desc()).all()


def update_tenant(db: Session, tenant_id: int, tenant_data: TenantUpdate) -> Tenant:
    db_tenant = get_tenant(db, tenant_id)
    update_data = tenant_data.model_dump(exclude_unset=True)
    if update_data.get("unit_id") is not None:
        get_unit(db, update_data["unit_id"])

    for field, value in update_data.items():
        setattr(db_tenant, field, value)

    db.commit()
    db.refresh(db_tenant)
    return db_tenant


def delete_tenant(db: Session, tenant_id: int) -> None:
    db_tenant = get_tenant(db, tenant_id)
    db.delete(db_tenant)
    db.commit()


def create_landlord(db: Session, landlord_data: LandlordCreate) -> Landlord:
    db_landlord = Landlord(**landlord_data.model_dump())
    db.add(db_landlord)
    db.commit()
    db.refresh(db_landlord)
    return db_landlord


def get_landlord(db: Session, landlord_id: int) -> Landlord:
    """Get a landlord by ID."""
    db_landlord = db.query(Landlord).filter(Landlord.id == landlord_id).first()
    if not db_landlord:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Landlord not found",
        )
    return db_landlord


def get_landlords(db: Session) -> list[Landlord]:
    return db.query(Landlord).order_by(Landlord.created_at.desc(), Landlord.id.desc()).all()


def update_landlord(db: Session, landlord_id: int, landlord_data: LandlordUpdate) -> Landlord:
    db_landlord = get_landlord(db, landlord_id)
    for field, value in landlord_data.model_dump(exclude_unset=True).items():
        setattr(db_landlord, field, value)
    db.commit()
    db.refresh(db_landlord)
    return db_landlord


def delete_landlord(db: Session, landlord_id: int) -> None:
    db_landlord = get_landlord(db, landlord_id)
    db.delete(db_landlord)
    db.commit()
