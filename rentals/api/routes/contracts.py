"""Lease contract API routes."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_current_user
from rentals.core.database import get_db
from rentals.exporters.formats import (
    CONTRACT_EXPORTERS,
    MEDIA_TYPES,
    DocumentFormat,
    document_response_headers,
)
from rentals.models.user import User
from rentals.schemas.contract import (
    ContractCreate,
    ContractResponse,
    ContractTrackingUpdate,
    ContractUpdate,
)
from rentals.services import contract as contract_service

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.post("", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
def create_contract(
    contract_data: ContractCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Draw up a lease contract for a unit and year."""
    return contract_service.create_contract(db, contract_data, current_user.id)


@router.get("", response_model=list[ContractResponse])
def list_contracts(
    year: int | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """List contracts of a year (the current year by default)."""
    return contract_service.get_contracts_by_year(db, year or date.today().year)


@router.get("/unit/{unit_id}", response_model=list[ContractResponse])
def list_unit_contracts(
    unit_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return contract_service.get_contracts_by_unit(db, unit_id)


@router.patch("/{contract_id}", response_model=ContractResponse)
def update_contract(
    contract_id: int,
    contract_data: ContractUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return contract_service.update_contract(db, contract_id, contract_data, current_user.id)


@router.delete("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contract(
    contract_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    contract_service.delete_contract(db, contract_id)


@router.post("/{contract_id}/tracking", response_model=ContractResponse)
def record_tracking(
    contract_id: int,
    tracking_data: ContractTrackingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Record whether the contract has been signed and notarized."""
    return contract_service.record_tracking(db, contract_id, tracking_data, current_user.id)


@router.delete("/{contract_id}/tracking", response_model=ContractResponse)
def clear_tracking(
    contract_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return contract_service.clear_tracking(db, contract_id)


@router.get("/{contract_id}/document")
def download_contract(
    contract_id: int,
    document_format: DocumentFormat = Query(default=DocumentFormat.PDF, alias="format"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> Response:
    """Lease agreement as a PDF or Word download."""
    exporter = CONTRACT_EXPORTERS.get(document_format)
    if exporter is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Lease agreements are not available as {document_format.value}",
        )
    contract = contract_service.get_contract(db, contract_id)
    data = contract_service.get_contract_document_data(contract)
    filename = f"{data.unit_name}-Contract-{contract.year}.{document_format.value}"
    return Response(
        content=exporter(data),
        media_type=MEDIA_TYPES[document_format],
        headers=document_response_headers(filename),
    )
