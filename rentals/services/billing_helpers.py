"""Utility billing helpers: reading-pair resolution and bill apportionment.

Everything here is a pure function over already-loaded records. The service
layer fetches readings, converts them to UtilityWithPayment and calls in.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import NamedTuple

from rentals.models.enums import UtilityType
from rentals.schemas.utility import BillingDataForExport, UtilityWithPayment

logger = logging.getLogger(__name__)

UNKNOWN_GROUP = "unknown"

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


class BillingError(Exception):
    """Base exception for billing resolution errors."""

    pass


class ResolutionFailure(BillingError):
    """No older reading exists to pair against the requested reading."""

    pass


class InsufficientData(BillingError):
    """Fewer than two readings exist for a unit/type."""

    pass


class ReadingPair(NamedTuple):
    """The (previous, current) readings for one billing period."""

    previous: UtilityWithPayment | None
    current: UtilityWithPayment | None


def _newest_first(utilities: Iterable[UtilityWithPayment]) -> list[UtilityWithPayment]:
    # sorted() is stable with reverse=True as well, so readings sharing a
    # date_of_reading keep their input order.
    return sorted(utilities, key=lambda u: u.date_of_reading, reverse=True)


def get_reading_pair(utilities: Iterable[UtilityWithPayment]) -> ReadingPair:
    """Return the most recent reading and the one immediately before it.

    Either side is None when the series is too short.
    """
    ordered = _newest_first(utilities)
    return ReadingPair(
        previous=ordered[1] if len(ordered) > 1 else None,
        current=ordered[0] if ordered else None,
    )


def require_reading_pair(utilities: Iterable[UtilityWithPayment]) -> ReadingPair:
    """Like get_reading_pair, but raise InsufficientData unless both sides exist."""
    pair = get_reading_pair(utilities)
    if pair.previous is None or pair.current is None:
        raise InsufficientData("At least two readings are required to generate a billing")
    return pair


def get_previous_reading(
    target: UtilityWithPayment,
    utilities: Iterable[UtilityWithPayment],
) -> UtilityWithPayment:
    """Return the reading immediately older than ``target`` of the same type.

    Raises:
        ResolutionFailure: target is the oldest reading or not in the series
    """
    ordered = _newest_first(u for u in utilities if u.type == target.type)
    index = next((i for i, u in enumerate(ordered) if u.id == target.id), None)
    if index is None or index + 1 >= len(ordered):
        raise ResolutionFailure("Previous reading not found")
    return ordered[index + 1]


def group_utilities_for_billing(
    utilities: Iterable[UtilityWithPayment],
    utility_type: UtilityType,
) -> dict[str, list[UtilityWithPayment]]:
    """Bucket readings of one type by pairing, falling back to unit, then "unknown"."""
    grouped: dict[str, list[UtilityWithPayment]] = {}
    for utility in utilities:
        if utility.type != utility_type:
            continue
        if utility.pairing_id is not None:
            key = str(utility.pairing_id)
        elif utility.unit_id is not None:
            key = str(utility.unit_id)
        else:
            key = UNKNOWN_GROUP
        grouped.setdefault(key, []).append(utility)
    return grouped


def get_non_negative_usage(previous_reading: Decimal, current_reading: Decimal) -> Decimal:
    """Consumption between two decreasing meter values, never below zero."""
    return max(previous_reading - current_reading, _ZERO)


def _floor_usage(
    floor: str,
    previous: UtilityWithPayment,
    current: UtilityWithPayment,
) -> Decimal:
    previous_reading = getattr(previous, f"{floor}_floor_reading")
    current_reading = getattr(current, f"{floor}_floor_reading")
    if previous_reading < current_reading:
        logger.warning(
            "Clamped %s floor usage to 0: reading %s (%s) is below reading %s (%s)",
            floor,
            previous.id,
            previous_reading,
            current.id,
            current_reading,
        )
    return get_non_negative_usage(previous_reading, current_reading)


def calculate_billing_data(
    previous: UtilityWithPayment,
    current: UtilityWithPayment,
    unit_name: str,
    prepared_by: str,
) -> BillingDataForExport:
    """Apportion the current bill between the two floors by their usage share.

    With no measured usage both shares, and both apportioned amounts, are 0.
    """
    first_floor_usage = _floor_usage("first", previous, current)
    second_floor_usage = _floor_usage("second", previous, current)
    total_usage = first_floor_usage + second_floor_usage

    if total_usage > 0:
        first_floor_percentage = first_floor_usage / total_usage * _HUNDRED
        second_floor_percentage = second_floor_usage / total_usage * _HUNDRED
    else:
        first_floor_percentage = _ZERO
        second_floor_percentage = _ZERO

    paid = current.payment is not None and current.payment.paid

    return BillingDataForExport(
        unit_name=unit_name,
        type=current.type,
        due_date=current.due_date,
        previous_date=previous.date_of_reading,
        previous_unit_reading=previous.unit_reading,
        previous_first_floor=previous.first_floor_reading,
        previous_second_floor=previous.second_floor_reading,
        current_date=current.date_of_reading,
        current_unit_reading=current.unit_reading,
        current_first_floor=current.first_floor_reading,
        current_second_floor=current.second_floor_reading,
        amount=current.amount,
        remarks="Paid" if paid else "Not Paid",
        prepared_by=prepared_by,
        first_floor_usage=first_floor_usage,
        second_floor_usage=second_floor_usage,
        total_usage=total_usage,
        first_floor_percentage=first_floor_percentage,
        second_floor_percentage=second_floor_percentage,
        first_floor_amount=current.amount * first_floor_percentage / _HUNDRED,
        second_floor_amount=current.amount * second_floor_percentage / _HUNDRED,
    )
