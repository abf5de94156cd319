"""Utility reading service: readings, payments, billing generation and tracker."""

import logging
from datetime import UTC, date, datetime

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, selectinload

from rentals.models.enums import UtilityType
from rentals.models.utility import Utility, UtilityPayment
from rentals.schemas.utility import (
    BillingDataForExport,
    UtilityCreate,
    UtilityPaymentUpdate,
    UtilityTrackerRow,
    UtilityUpdate,
    UtilityWithPayment,
)
from rentals.services.billing_helpers import (
    BillingError,
    ResolutionFailure,
    calculate_billing_data,
    get_previous_reading,
    group_utilities_for_billing,
    require_reading_pair,
)
from rentals.services.property import get_unit
from rentals.services.unit_pairing import get_pairing_label, get_unit_pairing
from rentals.services.user import get_users_map_by_ids

logger = logging.getLogger(__name__)


def _month_bounds(day: date) -> tuple[date, date]:
    """Return [first day of the month, first day of the next month)."""
    start = day.replace(day=1)
    if start.month == 12:
        return start, start.replace(year=start.year + 1, month=1)
    return start, start.replace(month=start.month + 1)


def _check_unique_month(
    db: Session,
    pairing_id: int,
    utility_type: UtilityType,
    date_of_reading: date,
    exclude_id: int | None = None,
) -> None:
    """One reading per pairing, utility type and calendar month."""
    month_start, next_month = _month_bounds(date_of_reading)
    query = db.query(Utility.id).filter(
        Utility.pairing_id == pairing_id,
        Utility.type == utility_type,
        Utility.date_of_reading >= month_start,
        Utility.date_of_reading < next_month,
    )
    if exclude_id is not None:
        query = query.filter(Utility.id != exclude_id)
    if query.first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A utility reading for this pair, type, and month already exists.",
        )


def create_utility(db: Session, data: UtilityCreate) -> Utility:
    """Record a utility reading for a pairing."""
    get_unit_pairing(db, data.pairing_id)
    _check_unique_month(db, data.pairing_id, data.type, data.date_of_reading)

    utility = Utility(**data.model_dump())
    db.add(utility)
    db.commit()
    db.refresh(utility)
    return utility


def get_utility(db: Session, utility_id: int) -> Utility:
    """Get a utility reading by ID."""
    utility = db.query(Utility).filter(Utility.id == utility_id).first()
    if not utility:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Utility reading not found",
        )
    return utility


def update_utility(db: Session, utility_id: int, data: UtilityUpdate) -> Utility:
    utility = get_utility(db, utility_id)
    update_data = data.model_dump(exclude_unset=True)

    moves_month = "type" in update_data or "date_of_reading" in update_data
    if utility.pairing_id is not None and moves_month:
        _check_unique_month(
            db,
            utility.pairing_id,
            update_data.get("type", utility.type),
            update_data.get("date_of_reading", utility.date_of_reading),
            exclude_id=utility.id,
        )

    for field, value in update_data.items():
        setattr(utility, field, value)

    db.commit()
    db.refresh(utility)
    return utility


def delete_utility(db: Session, utility_id: int) -> None:
    utility = get_utility(db, utility_id)
    db.delete(utility)
    db.commit()


def to_record(utility: Utility) -> UtilityWithPayment:
    """Convert a Utility model (with its payment) to a billing record."""
    return UtilityWithPayment.model_validate(utility)


def get_utilities_with_payments_for_pairings(
    db: Session,
    pairing_ids: list[int],
    utility_type: UtilityType | None = None,
) -> list[UtilityWithPayment]:
    """Readings with payment info for the given pairings, newest first."""
    if not pairing_ids:
        return []

    query = (
        db.query(Utility)
        .options(selectinload(Utility.payment))
        .filter(Utility.pairing_id.in_(pairing_ids))
    )
    if utility_type is not None:
        query = query.filter(Utility.type == utility_type)
    utilities = query.order_by(Utility.date_of_reading.desc(), Utility.id.desc()).all()
    return [to_record(u) for u in utilities]


def get_utilities_with_payments(
    db: Session,
    pairing_id: int,
    utility_type: UtilityType | None = None,
) -> list[UtilityWithPayment]:
    get_unit_pairing(db, pairing_id)
    return get_utilities_with_payments_for_pairings(db, [pairing_id], utility_type)


def _series_for(db: Session, utility: Utility) -> list[UtilityWithPayment]:
    """All readings billed on the same meter as ``utility``."""
    query = db.query(Utility).options(selectinload(Utility.payment))
    if utility.pairing_id is not None:
        query = query.filter(Utility.pairing_id == utility.pairing_id)
    elif utility.unit_id is not None:
        query = query.filter(Utility.unit_id == utility.unit_id)
    else:
        query = query.filter(Utility.id == utility.id)
    return [to_record(u) for u in query.order_by(Utility.id).all()]


def _billing_unit_name(db: Session, utility: Utility) -> str:
    if utility.pairing_id is not None:
        return get_pairing_label(get_unit_pairing(db, utility.pairing_id))
    if utility.unit_id is not None:
        return get_unit(db, utility.unit_id).name
    return "Unknown unit"


def get_utility_payment(db: Session, utility_id: int) -> UtilityPayment | None:
    return db.query(UtilityPayment).filter(UtilityPayment.utility_id == utility_id).first()


def record_utility_payment(
    db: Session,
    utility_id: int,
    data: UtilityPaymentUpdate,
    user_id: int,
) -> UtilityPayment:
    """Create or update the payment record of a utility bill."""
    get_utility(db, utility_id)
    payment = get_utility_payment(db, utility_id)
    if payment is None:
        payment = UtilityPayment(utility_id=utility_id)
        db.add(payment)

    payment.paid = data.paid
    payment.comments = data.comments
    payment.recorded_by_user_id = user_id
    payment.recorded_date = datetime.now(UTC)

    db.commit()
    db.refresh(payment)
    logger.info(
        "Utility %s recorded as %s by user %s",
        utility_id,
        "paid" if data.paid else "not paid",
        user_id,
    )
    return payment


def delete_utility_payment(db: Session, utility_id: int) -> None:
    payment = get_utility_payment(db, utility_id)
    if not payment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Utility payment not found",
        )
    db.delete(payment)
    db.commit()


def generate_billing_for_utility(
    db: Session,
    utility_id: int,
    prepared_by: str,
) -> BillingDataForExport:
    """Bill a specific reading against the reading immediately before it.

    Raises:
        HTTPException: 422 when no older reading of the same type exists
    """
    utility = get_utility(db, utility_id)
    series = _series_for(db, utility)
    current = next(u for u in series if u.id == utility.id)

    try:
        previous = get_previous_reading(current, series)
    except BillingError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc

    unit_name = _billing_unit_name(db, utility)
    billing = calculate_billing_data(previous, current, unit_name, prepared_by)
    logger.info(
        "Generated %s billing for utility %s against utility %s",
        current.type.value,
        current.id,
        previous.id,
    )
    return billing


def generate_latest_billing(
    db: Session,
    pairing_id: int,
    utility_type: UtilityType,
    prepared_by: str,
) -> BillingDataForExport:
    """Bill the most recent reading of a pairing against the one before it.

    Raises:
        HTTPException: 422 when the pairing has fewer than two readings
    """
    pairing = get_unit_pairing(db, pairing_id)
    records = get_utilities_with_payments_for_pairings(db, [pairing_id], utility_type)
    series = group_utilities_for_billing(records, utility_type).get(str(pairing_id), [])

    try:
        previous, current = require_reading_pair(series)
    except BillingError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc

    return calculate_billing_data(previous, current, get_pairing_label(pairing), prepared_by)


def get_utility_tracker(
    db: Session,
    pairing_id: int,
    utility_type: UtilityType,
    year: int | None = None,
    month: int | None = None,
) -> list[UtilityTrackerRow]:
    """Tracker rows for a pairing's readings of one type, newest first.

    ``year``/``month`` restrict which readings get a row; the previous reading
    is always looked up in the full series.
    """
    series = get_utilities_with_payments(db, pairing_id, utility_type)
    recorders = get_users_map_by_ids(
        db, [u.payment.recorded_by_user_id for u in series if u.payment is not None]
    )

    rows: list[UtilityTrackerRow] = []
    for utility in series:
        reading_date = utility.date_of_reading
        if year is not None and reading_date.year != year:
            continue
        if month is not None and reading_date.month != month:
            continue

        try:
            previous = get_previous_reading(utility, series)
        except ResolutionFailure:
            previous = None

        payment = utility.payment
        rows.append(
            UtilityTrackerRow(
                utility_id=utility.id,
                due_date=utility.due_date,
                previous_date_of_reading=previous.date_of_reading if previous else None,
                previous_unit_reading=previous.unit_reading if previous else None,
                current_date_of_reading=reading_date,
                current_unit_reading=utility.unit_reading,
                usage=previous.unit_reading - utility.unit_reading if previous else None,
                amount=utility.amount,
                paid=bool(payment and payment.paid),
                recorded_by=(
                    recorders.get(payment.recorded_by_user_id)
                    if payment and payment.recorded_by_user_id is not None
                    else None
                ),
            )
        )
    return rows
