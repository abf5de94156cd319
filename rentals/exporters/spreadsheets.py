"""Excel workbooks for billing statements and utility trackers.

Figures are written as numbers with a display format rather than as
preformatted text, so the workbook stays usable for further calculation.
Percentages are stored as fractions (80% as 0.8).
"""

from datetime import date
from decimal import Decimal
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from rentals.core.config import settings
from rentals.exporters.billing_document import billing_title, resolve_copies, summary_lines
from rentals.exporters.tracker_document import TRACKER_HEADER, tracker_title
from rentals.models.enums import UtilityType
from rentals.schemas.utility import BillingDataForExport, UtilityTrackerRow

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

READING_FORMAT = "#,##0.00"
PERCENT_FORMAT = "0.00%"
DATE_FORMAT = "mm/dd/yyyy"

_HUNDRED = Decimal("100")
_BOLD = Font(bold=True)
_TITLE_FONT = Font(bold=True, size=14)
_HEADER_FILL = PatternFill(start_color="D3D3D3", end_color="D3D3D3", fill_type="solid")
_THIN = Side(style="thin")
_GRID = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)


def _amount_format() -> str:
    return f'"{settings.CURRENCY_PREFIX} "#,##0.00'


def _write_table(
    sheet: Worksheet,
    start_row: int,
    rows: list[list],
    number_formats: dict[int, str],
    total_row: bool = True,
) -> int:
    """Write a bordered table with a header row; returns the next free row."""
    for offset, values in enumerate(rows):
        row = start_row + offset
        for column, value in enumerate(values, start=1):
            cell = sheet.cell(row=row, column=column, value=value)
            cell.border = _GRID
            if offset == 0:
                cell.font = _BOLD
                cell.fill = _HEADER_FILL
                cell.alignment = Alignment(horizontal="center", wrap_text=True)
                continue
            if column in number_formats and value not in (None, ""):
                cell.number_format = number_formats[column]
            if total_row and offset == len(rows) - 1:
                cell.font = _BOLD
    return start_row + len(rows)


def _write_billing_copy(
    sheet: Worksheet,
    start_row: int,
    data: BillingDataForExport,
    generated_on: date,
) -> int:
    row = start_row
    title = sheet.cell(row=row, column=1, value=billing_title(data))
    title.font = _TITLE_FONT
    sheet.merge_cells(start_row=row, start_column=1, end_row=row, end_column=5)
    row += 2

    sheet.cell(row=row, column=1, value="Consumption Breakdown").font = _BOLD
    row = _write_table(
        sheet,
        row + 1,
        [
            ["Location", "Current RDG.", "Previous RDG.", "Consumption", "Percentage"],
            [
                "First Floor",
                data.current_first_floor,
                data.previous_first_floor,
                data.first_floor_usage,
                data.first_floor_percentage / _HUNDRED,
            ],
            [
                "Second Floor",
                data.current_second_floor,
                data.previous_second_floor,
                data.second_floor_usage,
                data.second_floor_percentage / _HUNDRED,
            ],
            ["TOTAL", "", "", data.total_usage, Decimal(1)],
        ],
        {2: READING_FORMAT, 3: READING_FORMAT, 4: READING_FORMAT, 5: PERCENT_FORMAT},
    )
    row += 1

    sheet.cell(row=row, column=1, value="Amount Breakdown").font = _BOLD
    amount_format = _amount_format()
    row = _write_table(
        sheet,
        row + 1,
        [
            ["Location", "Total Amount", "Percentage", "Amount per Location"],
            [
                "First Floor",
                data.amount,
                data.first_floor_percentage / _HUNDRED,
                data.first_floor_amount,
            ],
            [
                "Second Floor",
                data.amount,
                data.second_floor_percentage / _HUNDRED,
                data.second_floor_amount,
            ],
            ["TOTAL", "", "", data.amount],
        ],
        {2: amount_format, 3: PERCENT_FORMAT, 4: amount_format},
    )
    row += 1

    for line in summary_lines(data, generated_on):
        sheet.cell(row=row, column=1, value=line)
        row += 1
    return row


def _save(workbook: Workbook) -> bytes:
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def _set_widths(sheet: Worksheet, widths: list[int]) -> None:
    for column, width in enumerate(widths, start=1):
        sheet.column_dimensions[get_column_letter(column)].width = width


def generate_billing_xlsx(
    data: BillingDataForExport,
    copies: int | None = None,
    generated_on: date | None = None,
) -> bytes:
    """Write the billing statement copies one below another on a "Billing" sheet."""
    copies = resolve_copies(copies)
    generated_on = generated_on or date.today()

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Billing"
    _set_widths(sheet, [16, 18, 18, 22, 14])

    row = 1
    for _ in range(copies):
        row = _write_billing_copy(sheet, row, data, generated_on) + 2
    return _save(workbook)


def generate_tracker_xlsx(
    pair_label: str,
    utility_type: UtilityType,
    rows: list[UtilityTrackerRow],
) -> bytes:
    """Write the tracker table for a pairing and utility type on a "Tracker" sheet."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Tracker"
    _set_widths(sheet, [14, 16, 16, 16, 16, 12, 16, 12])

    title = sheet.cell(row=1, column=1, value=tracker_title(pair_label, utility_type))
    title.font = _TITLE_FONT
    sheet.merge_cells(start_row=1, start_column=1, end_row=1, end_column=len(TRACKER_HEADER))

    table: list[list] = [TRACKER_HEADER]
    for row in rows:
        table.append(
            [
                row.due_date,
                row.previous_date_of_reading,
                row.previous_unit_reading,
                row.current_date_of_reading,
                row.current_unit_reading,
                row.usage,
                row.amount,
                "Paid" if row.paid else "Not Paid",
            ]
        )
    _write_table(
        sheet,
        3,
        table,
        {
            1: DATE_FORMAT,
            2: DATE_FORMAT,
            3: READING_FORMAT,
            4: DATE_FORMAT,
            5: READING_FORMAT,
            6: READING_FORMAT,
            7: _amount_format(),
        },
        total_row=False,
    )
    sheet.freeze_panes = "A4"
    return _save(workbook)
