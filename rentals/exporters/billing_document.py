"""Printable utility billing statement."""

from datetime import date

from reportlab.lib.units import mm
from reportlab.platypus import Flowable, PageBreak, Spacer, Table

from rentals.core.config import settings
from rentals.exporters.common import (
    build_styles,
    grid_table_style,
    paragraph,
    render_pdf,
)
from rentals.schemas.utility import BillingDataForExport
from rentals.services.formatting import (
    format_amount,
    format_date,
    format_percentage,
    format_reading,
)


def billing_title(data: BillingDataForExport) -> str:
    return f"{data.unit_name} ({data.type.value}) - {format_date(data.current_date)}"


def consumption_rows(data: BillingDataForExport) -> list[list[str]]:
    """Readings, consumption and share per floor."""
    return [
        ["Location", "Current RDG.", "Previous RDG.", "Consumption", "Percentage"],
        [
            "First Floor",
            format_reading(data.current_first_floor),
            format_reading(data.previous_first_floor),
            format_reading(data.first_floor_usage),
            format_percentage(data.first_floor_percentage),
        ],
        [
            "Second Floor",
            format_reading(data.current_second_floor),
            format_reading(data.previous_second_floor),
            format_reading(data.second_floor_usage),
            format_percentage(data.second_floor_percentage),
        ],
        ["TOTAL", "", "", format_reading(data.total_usage), "100%"],
    ]


def amount_rows(data: BillingDataForExport) -> list[list[str]]:
    """Total bill, share and apportioned amount per floor."""
    total = format_amount(data.amount)
    return [
        ["Location", "Total Amount", "Percentage", "Amount per Location"],
        [
            "First Floor",
            total,
            format_percentage(data.first_floor_percentage),
            format_amount(data.first_floor_amount),
        ],
        [
            "Second Floor",
            total,
            format_percentage(data.second_floor_percentage),
            format_amount(data.second_floor_amount),
        ],
        ["TOTAL", "", "", total],
    ]


def summary_lines(data: BillingDataForExport, generated_on: date) -> list[str]:
    return [
        f"First Floor Amount Due: {format_amount(data.first_floor_amount)}",
        f"Second Floor Amount Due: {format_amount(data.second_floor_amount)}",
        f"Total Amount Due: {format_amount(data.amount)}",
        f"Due Date: {format_date(data.due_date)}",
        f"Prepared by: {data.prepared_by}",
        f"Date: {format_date(generated_on)}",
        f"Status: {data.remarks}",
    ]


def resolve_copies(copies: int | None) -> int:
    """Number of copies to print, falling back to the configured default."""
    if copies is None:
        copies = settings.BILLING_COPIES
    if copies < 1:
        raise ValueError(f"At least one copy is required, got {copies}")
    return copies


def _copy_story(data: BillingDataForExport, generated_on: date) -> list[Flowable]:
    styles = build_styles()
    story: list[Flowable] = [
        paragraph(billing_title(data), styles["title"]),
        paragraph("Consumption Breakdown", styles["heading"]),
        Table(consumption_rows(data), style=grid_table_style(), hAlign="LEFT"),
        Spacer(1, 4 * mm),
        paragraph("Amount Breakdown", styles["heading"]),
        Table(amount_rows(data), style=grid_table_style(), hAlign="LEFT"),
        Spacer(1, 4 * mm),
    ]
    story.extend(paragraph(line, styles["body"]) for line in summary_lines(data, generated_on))
    return story


def generate_billing_pdf(
    data: BillingDataForExport,
    copies: int | None = None,
    generated_on: date | None = None,
) -> bytes:
    """Render the billing statement, one copy per page."""
    copies = resolve_copies(copies)
    generated_on = generated_on or date.today()

    story: list[Flowable] = []
    for copy in range(copies):
        if copy:
            story.append(PageBreak())
        story.extend(_copy_story(data, generated_on))
    return render_pdf(story, title=billing_title(data))
