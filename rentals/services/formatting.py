"""Display formatting for readings, amounts, dates and export file names."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from rentals.core.config import settings
from rentals.models.enums import UtilityType

_CENTS = Decimal("0.01")


def _two_places(value: Decimal | float | int) -> Decimal:
    return Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_reading(value: Decimal | float | int | None) -> str:
    """Format a meter reading or usage figure with two decimals."""
    if value is None:
        return "-"
    return f"{_two_places(value):.2f}"


def format_percentage(value: Decimal | float | int) -> str:
    return f"{_two_places(value):.2f}%"


def format_amount(value: Decimal | float | int, prefix: str | None = None) -> str:
    """Format a monetary amount, e.g. "PHP 1,234.50"."""
    prefix = settings.CURRENCY_PREFIX if prefix is None else prefix
    return f"{prefix} {_two_places(value):,.2f}".strip()


def format_date(value: date | None) -> str:
    if value is None:
        return "-"
    return value.strftime("%m/%d/%Y")


def billing_filename(
    unit_name: str,
    utility_type: UtilityType | str,
    reading_date: date,
    extension: str,
) -> str:
    """File name for an exported billing: {unitName}-{type}-{YYYY-MM-DD}.{ext}."""
    type_name = utility_type.value if isinstance(utility_type, UtilityType) else utility_type
    return f"{unit_name}-{type_name}-{reading_date.isoformat()}.{extension.lstrip('.')}"


def tracker_filename(label: str, utility_type: UtilityType | str, extension: str) -> str:
    """File name for an exported tracker: {pairLabel}-{type}-Tracker.{ext}."""
    type_name = utility_type.value if isinstance(utility_type, UtilityType) else utility_type
    return f"{label}-{type_name}-Tracker.{extension.lstrip('.')}"


def pair_label(
    first_code: str,
    first_name: str,
    second_code: str,
    second_name: str,
) -> str:
    """Human label for a pairing; the property code is repeated only if it differs."""
    if first_code == second_code:
        return f"{first_code} {first_name} (First Floor) + {second_name} (Second Floor)"
    return (
        f"{first_code} {first_name} (First Floor) + "
        f"{second_code} {second_name} (Second Floor)"
    )
