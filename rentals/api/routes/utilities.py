"""Utility reading, payment, billing and tracker API routes."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_current_user
from rentals.core.database import get_db
from rentals.exporters.formats import (
    BILLING_EXPORTERS,
    MEDIA_TYPES,
    TRACKER_EXPORTERS,
    DocumentFormat,
    document_response_headers,
)
from rentals.models.enums import UtilityType
from rentals.models.user import User
from rentals.schemas.utility import (
    BillingDataForExport,
    UtilityCreate,
    UtilityPaymentRecord,
    UtilityPaymentUpdate,
    UtilityTrackerRow,
    UtilityUpdate,
    UtilityWithPayment,
)
from rentals.services import utility as utility_service
from rentals.services.formatting import billing_filename, tracker_filename
from rentals.services.unit_pairing import get_pairing_label, get_unit_pairing

router = APIRouter(prefix="/utilities", tags=["utilities"])


def _document_response(content: bytes, document_format: DocumentFormat, filename: str) -> Response:
    return Response(
        content=content,
        media_type=MEDIA_TYPES[document_format],
        headers=document_response_headers(filename),
    )


@router.post("", response_model=UtilityWithPayment, status_code=status.HTTP_201_CREATED)
def create_utility(
    utility_data: UtilityCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Record a meter reading for a pairing. One per pairing, type and month."""
    utility = utility_service.create_utility(db, utility_data)
    return utility_service.to_record(utility)


@router.get("/pairing/{pairing_id}", response_model=list[UtilityWithPayment])
def list_pairing_utilities(
    pairing_id: int,
    utility_type: UtilityType | None = Query(default=None, alias="type"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Readings of a pairing with their payment state, newest first."""
    return utility_service.get_utilities_with_payments(db, pairing_id, utility_type)


@router.patch("/{utility_id}", response_model=UtilityWithPayment)
def update_utility(
    utility_id: int,
    utility_data: UtilityUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    utility = utility_service.update_utility(db, utility_id, utility_data)
    return utility_service.to_record(utility)


@router.delete("/{utility_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_utility(
    utility_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    utility_service.delete_utility(db, utility_id)


@router.put("/{utility_id}/payment", response_model=UtilityPaymentRecord)
def record_payment(
    utility_id: int,
    payment_data: UtilityPaymentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Mark a utility bill as paid or not paid."""
    return utility_service.record_utility_payment(db, utility_id, payment_data, current_user.id)


@router.delete("/{utility_id}/payment", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment(
    utility_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    utility_service.delete_utility_payment(db, utility_id)


@router.get("/pairing/{pairing_id}/latest-billing", response_model=BillingDataForExport)
def latest_billing(
    pairing_id: int,
    utility_type: UtilityType = Query(alias="type"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Billing for the pairing's most recent reading against the one before it."""
    return utility_service.generate_latest_billing(
        db, pairing_id, utility_type, current_user.display_name
    )


@router.get("/pairing/{pairing_id}/tracker", response_model=list[UtilityTrackerRow])
def utility_tracker(
    pairing_id: int,
    utility_type: UtilityType = Query(alias="type"),
    year: int | None = None,
    month: int | None = Query(default=None, ge=1, le=12),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return utility_service.get_utility_tracker(db, pairing_id, utility_type, year, month)


@router.get("/pairing/{pairing_id}/tracker/document")
def utility_tracker_document(
    pairing_id: int,
    utility_type: UtilityType = Query(alias="type"),
    year: int | None = None,
    month: int | None = Query(default=None, ge=1, le=12),
    document_format: DocumentFormat = Query(default=DocumentFormat.PDF, alias="format"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> Response:
    """Tracker table as a PDF, Excel or Word download."""
    label = get_pairing_label(get_unit_pairing(db, pairing_id))
    rows = utility_service.get_utility_tracker(db, pairing_id, utility_type, year, month)
    content = TRACKER_EXPORTERS[document_format](label, utility_type, rows)
    filename = tracker_filename(label, utility_type, document_format.value)
    return _document_response(content, document_format, filename)


@router.get("/{utility_id}/billing", response_model=BillingDataForExport)
def utility_billing(
    utility_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Billing for a specific reading against the reading immediately before it."""
    return utility_service.generate_billing_for_utility(db, utility_id, current_user.display_name)


@router.get("/{utility_id}/billing/document")
def utility_billing_document(
    utility_id: int,
    document_format: DocumentFormat = Query(default=DocumentFormat.PDF, alias="format"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    """Billing statement for a specific reading as a PDF, Excel or Word download."""
    billing = utility_service.generate_billing_for_utility(
        db, utility_id, current_user.display_name
    )
    content = BILLING_EXPORTERS[document_format](billing)
    filename = billing_filename(
        billing.unit_name, billing.type, billing.current_date, document_format.value
    )
    return _document_response(content, document_format, filename)
