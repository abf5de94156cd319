"""Printable utility tracker for a pairing."""

from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import Table

from rentals.exporters.common import (
    build_styles,
    grid_table_style,
    paragraph,
    render_pdf,
)
from rentals.models.enums import UtilityType
from rentals.schemas.utility import UtilityTrackerRow
from rentals.services.formatting import format_amount, format_date, format_reading

TRACKER_HEADER = [
    "Due Date",
    "Previous Date of Reading",
    "Previous Unit Reading",
    "Current Date of Reading",
    "Current Unit Reading",
    "Usage",
    "Amount",
    "Status",
]


def tracker_title(pair_label: str, utility_type: UtilityType) -> str:
    return f"{pair_label} - {utility_type.value} Tracker"


def tracker_rows(rows: list[UtilityTrackerRow]) -> list[list[str]]:
    table = [TRACKER_HEADER]
    for row in rows:
        table.append(
            [
                format_date(row.due_date),
                format_date(row.previous_date_of_reading),
                format_reading(row.previous_unit_reading),
                format_date(row.current_date_of_reading),
                format_reading(row.current_unit_reading),
                format_reading(row.usage),
                format_amount(row.amount),
                "Paid" if row.paid else "Not Paid",
            ]
        )
    return table


def generate_tracker_pdf(
    pair_label: str,
    utility_type: UtilityType,
    rows: list[UtilityTrackerRow],
) -> bytes:
    """Render the tracker table for a pairing and utility type."""
    styles = build_styles()
    title = tracker_title(pair_label, utility_type)
    story = [
        paragraph(title, styles["title"]),
        Table(tracker_rows(rows), style=grid_table_style(total_row=False), repeatRows=1),
    ]
    return render_pdf(story, title=title, pagesize=landscape(A4))
