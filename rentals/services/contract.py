"""Lease contract service: drafting, tracking and lease document data."""

import logging
from datetime import UTC, datetime

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from rentals.exporters.contract_document import ContractDocumentData
from rentals.models.contract import Contract
from rentals.schemas.contract import ContractCreate, ContractTrackingUpdate, ContractUpdate
from rentals.services.property import get_unit
from rentals.services.tenant import get_landlord, get_tenant

logger = logging.getLogger(__name__)


def _check_references(db: Session, unit_id: int, tenant_id: int, landlord_id: int | None) -> None:
    get_unit(db, unit_id)
    tenant = get_tenant(db, tenant_id)
    if tenant.unit_id != unit_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Tenant does not occupy this unit",
        )
    if landlord_id is not None:
        get_landlord(db, landlord_id)


def create_contract(db: Session, data: ContractCreate, user_id: int) -> Contract:
    """Draw up a contract. A unit has at most one contract per year."""
    _check_references(db, data.unit_id, data.tenant_id, data.landlord_id)

    if get_contract_by_unit_and_year(db, data.unit_id, data.year):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"A contract for this unit already exists for {data.year}",
        )

    db_contract = Contract(
        **data.model_dump(),
        signed=False,
        notarized=False,
        recorded_by_user_id=user_id,
        recorded_date=datetime.now(UTC),
    )
    db.add(db_contract)
    db.commit()
    db.refresh(db_contract)
    return db_contract


def get_contract(db: Session, contract_id: int) -> Contract:
    """Get a contract by ID."""
    db_contract = db.query(Contract).filter(Contract.id == contract_id).first()
    if not db_contract:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Contract not found",
        )
    return db_contract


def get_contract_by_unit_and_year(db: Session, unit_id: int, year: int) -> Contract | None:
    return (
        db.query(Contract)
        .filter(Contract.unit_id == unit_id, Contract.year == year)
        .first()
    )


def get_contracts_by_unit(db: Session, unit_id: int) -> list[Contract]:
    return (
        db.query(Contract)
        .filter(Contract.unit_id == unit_id)
        .order_by(Contract.year.desc())
        .all()
    )


def get_contracts_by_year(db: Session, year: int) -> list[Contract]:
    return (
        db.query(Contract)
        .filter(Contract.year == year)
        .order_by(Contract.created_at.desc(), Contract.id.desc())
        .all()
    )


def update_contract(
    db: Session,
    contract_id: int,
    data: ContractUpdate,
    user_id: int,
) -> Contract:
    """Edit contract terms; the editor becomes the recorder."""
    db_contract = get_contract(db, contract_id)
    update_data = data.model_dump(exclude_unset=True)

    tenant_id = update_data.get("tenant_id", db_contract.tenant_id)
    landlord_id = update_data.get("landlord_id", db_contract.landlord_id)
    _check_references(db, db_contract.unit_id, tenant_id, landlord_id)

    year = update_data.get("year", db_contract.year)
    clash = get_contract_by_unit_and_year(db, db_contract.unit_id, year)
    if clash and clash.id != db_contract.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"A contract for this unit already exists for {year}",
        )

    begin = update_data.get("begin_contract", db_contract.begin_contract)
    end = update_data.get("end_contract", db_contract.end_contract)
    if end <= begin:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="end_contract must be after begin_contract",
        )

    for field, value in update_data.items():
        setattr(db_contract, field, value)
    db_contract.recorded_by_user_id = user_id
    db_contract.recorded_date = datetime.now(UTC)

    db.commit()
    db.refresh(db_contract)
    return db_contract


def record_tracking(
    db: Session,
    contract_id: int,
    data: ContractTrackingUpdate,
    user_id: int,
) -> Contract:
    """Record the signing and notarization state of a contract."""
    if data.notarized and not data.signed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A contract must be signed before it is notarized",
        )

    db_contract = get_contract(db, contract_id)
    db_contract.signed = data.signed
    db_contract.notarized = data.notarized
    db_contract.comments = (data.comments or "").strip() or None
    db_contract.recorded_by_user_id = user_id
    db_contract.recorded_date = datetime.now(UTC)
    db.commit()
    db.refresh(db_contract)
    logger.info(
        "Contract %s tracking recorded: signed=%s notarized=%s",
        contract_id,
        data.signed,
        data.notarized,
    )
    return db_contract


def clear_tracking(db: Session, contract_id: int) -> Contract:
    """Reset signing/notarization tracking without deleting the contract."""
    db_contract = get_contract(db, contract_id)
    db_contract.signed = False
    db_contract.notarized = False
    db_contract.recorded_by_user_id = None
    db_contract.recorded_date = None
    db_contract.comments = None
    db.commit()
    db.refresh(db_contract)
    return db_contract


def delete_contract(db: Session, contract_id: int) -> None:
    db_contract = get_contract(db, contract_id)
    db.delete(db_contract)
    db.commit()


def get_contract_document_data(contract: Contract) -> ContractDocumentData:
    """Collect the fields printed on the lease agreement."""
    unit = contract.unit
    names = [contract.first_name, contract.middle_name, contract.last_name]
    return ContractDocumentData(
        property_name=unit.rental_property.name,
        unit_name=unit.name,
        contract_name=" ".join(n for n in names if n),
        tenant_address=contract.tenant_address,
        begin_contract=contract.begin_contract,
        end_contract=contract.end_contract,
        contract_address=unit.contract_address or unit.rental_property.address,
        rent_amount=contract.rent,
        cash_bond_amount=contract.cash_bond,
    )
