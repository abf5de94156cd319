"""Rent payment service: monthly paid/unpaid tracking per unit."""

import logging
from datetime import UTC, datetime

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from rentals.models.rent_payment import RentPayment
from rentals.schemas.rent_payment import RentPaymentRecord, RentTrackerRow
from rentals.services.formatting import format_amount
from rentals.services.property import get_properties_with_units, get_unit

logger = logging.getLogger(__name__)


def get_rent_payments(
    db: Session,
    unit_id: int,
    year: int,
    month: int | None = None,
) -> list[RentPayment]:
    """Get a unit's rent payments for a year (or a single month), by month."""
    query = db.query(RentPayment).filter(
        RentPayment.unit_id == unit_id,
        RentPayment.year == year,
    )
    if month is not None:
        query = query.filter(RentPayment.month == month)
    return query.order_by(RentPayment.month).all()


def get_rent_payment_for_month(
    db: Session,
    unit_id: int,
    year: int,
    month: int,
) -> RentPayment | None:
    return (
        db.query(RentPayment)
        .filter(
            RentPayment.unit_id == unit_id,
            RentPayment.year == year,
            RentPayment.month == month,
        )
        .first()
    )


def record_rent_payment(db: Session, data: RentPaymentRecord, user_id: int) -> RentPayment:
    """Create or update the rent status of a unit for one month."""
    get_unit(db, data.unit_id)
    payment = get_rent_payment_for_month(db, data.unit_id, data.year, data.month)
    if payment is None:
        payment = RentPayment(unit_id=data.unit_id, year=data.year, month=data.month)
        db.add(payment)

    payment.paid = data.paid
    payment.comments = data.comments
    payment.recorded_by_user_id = user_id
    payment.recorded_date = datetime.now(UTC)

    db.commit()
    db.refresh(payment)
    logger.info(
        "Rent for unit %s %04d-%02d recorded as %s",
        data.unit_id,
        data.year,
        data.month,
        "paid" if data.paid else "not paid",
    )
    return payment


def delete_rent_payment(db: Session, payment_id: int) -> None:
    payment = db.query(RentPayment).filter(RentPayment.id == payment_id).first()
    if not payment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Rent payment not found",
        )
    db.delete(payment)
    db.commit()


def get_rent_tracker(db: Session, year: int) -> list[RentTrackerRow]:
    """Rent status of every unit for each month of a year."""
    payments = db.query(RentPayment).filter(RentPayment.year == year).all()
    by_unit: dict[int, dict[int, bool]] = {}
    for payment in payments:
        by_unit.setdefault(payment.unit_id, {})[payment.month] = payment.paid

    rows: list[RentTrackerRow] = []
    for rental_property in get_properties_with_units(db):
        for unit in rental_property.units:
            recorded = by_unit.get(unit.id, {})
            rows.append(
                RentTrackerRow(
                    unit_id=unit.id,
                    unit_name=unit.name,
                    property_name=rental_property.name,
                    rent_amount=format_amount(unit.rent_amount),
                    months={month: recorded.get(month) for month in range(1, 13)},
                )
            )
    return rows
