"""Word documents for billing statements, utility trackers and lease agreements."""

from datetime import date
from io import BytesIO

from docx import Document
from docx.document import Document as DocumentType
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_BREAK
from docx.shared import Pt

from rentals.exporters.billing_document import (
    amount_rows,
    billing_title,
    consumption_rows,
    resolve_copies,
    summary_lines,
)
from rentals.exporters.contract_document import (
    SIGNATURE_LABELS,
    SIGNATURE_LINE,
    ContractDocumentData,
    contract_sections,
)
from rentals.exporters.tracker_document import tracker_rows, tracker_title
from rentals.models.enums import UtilityType
from rentals.schemas.utility import BillingDataForExport, UtilityTrackerRow
from rentals.services.formatting import format_date

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _title(document: DocumentType, text: str) -> None:
    paragraph = document.add_paragraph()
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = paragraph.add_run(text)
    run.bold = True
    run.font.size = Pt(14)


def _heading(document: DocumentType, text: str) -> None:
    document.add_paragraph().add_run(text).bold = True


def _table(document: DocumentType, rows: list[list[str]], total_row: bool = True) -> None:
    """Grid table with a bold header and, optionally, a bold last row."""
    table = document.add_table(rows=len(rows), cols=len(rows[0]))
    table.style = "Table Grid"
    for index, values in enumerate(rows):
        bold = index == 0 or (total_row and index == len(rows) - 1)
        for cell, value in zip(table.rows[index].cells, values):
            cell.text = ""
            cell.paragraphs[0].add_run(value).bold = bold


def _save(document: DocumentType) -> bytes:
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def generate_billing_docx(
    data: BillingDataForExport,
    copies: int | None = None,
    generated_on: date | None = None,
) -> bytes:
    """Billing statement with one copy per page."""
    copies = resolve_copies(copies)
    generated_on = generated_on or date.today()

    document = Document()
    for copy in range(copies):
        if copy:
            document.add_paragraph().add_run().add_break(WD_BREAK.PAGE)
        _title(document, billing_title(data))
        _heading(document, "Consumption Breakdown")
        _table(document, consumption_rows(data))
        _heading(document, "Amount Breakdown")
        _table(document, amount_rows(data))
        document.add_paragraph()
        for line in summary_lines(data, generated_on):
            document.add_paragraph(line)
    return _save(document)


def generate_tracker_docx(
    pair_label: str,
    utility_type: UtilityType,
    rows: list[UtilityTrackerRow],
) -> bytes:
    document = Document()
    section = document.sections[0]
    section.orientation = WD_ORIENT.LANDSCAPE
    section.page_width, section.page_height = section.page_height, section.page_width

    _title(document, tracker_title(pair_label, utility_type))
    _table(document, tracker_rows(rows), total_row=False)
    return _save(document)


def generate_contract_docx(data: ContractDocumentData, generated_on: date | None = None) -> bytes:
    """Lease agreement with the same sections as the printable version."""
    generated_on = generated_on or date.today()

    document = Document()
    _title(document, "LEASE AGREEMENT")
    document.add_paragraph(f"Prepared: {format_date(generated_on)}")
    for title, lines in contract_sections(data):
        _heading(document, title)
        for line in lines:
            document.add_paragraph(line)

    _heading(document, "SIGNATURES")
    for label in SIGNATURE_LABELS:
        document.add_paragraph()
        document.add_paragraph(SIGNATURE_LINE)
        document.add_paragraph(label)
    return _save(document)
