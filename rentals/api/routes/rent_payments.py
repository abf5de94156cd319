"""Rent payment API routes."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from rentals.api.dependencies import get_current_user
from rentals.core.database import get_db
from rentals.models.user import User
from rentals.schemas.rent_payment import RentPaymentRecord, RentPaymentResponse, RentTrackerRow
from rentals.services import rent_payment as rent_payment_service
from rentals.services.property import get_unit

router = APIRouter(prefix="/rent-payments", tags=["rent-payments"])


@router.get("/tracker", response_model=list[RentTrackerRow])
def rent_tracker(
    year: int | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Monthly rent status of every unit for a year (the current year by default)."""
    return rent_payment_service.get_rent_tracker(db, year or date.today().year)


@router.get("/unit/{unit_id}", response_model=list[RentPaymentResponse])
def list_unit_payments(
    unit_id: int,
    year: int | None = None,
    month: int | None = Query(default=None, ge=1, le=12),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    get_unit(db, unit_id)
    return rent_payment_service.get_rent_payments(db, unit_id, year or date.today().year, month)


@router.put("", response_model=RentPaymentResponse)
def record_payment(
    payment_data: RentPaymentRecord,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Mark a unit's rent for a month as paid or not paid."""
    return rent_payment_service.record_rent_payment(db, payment_data, current_user.id)


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment(
    payment_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    rent_payment_service.delete_rent_payment(db, payment_id)
