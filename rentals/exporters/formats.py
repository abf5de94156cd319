"""Downloadable document formats and the exporter behind each one."""

from enum import Enum

from rentals.exporters.billing_document import generate_billing_pdf
from rentals.exporters.common import PDF_MEDIA_TYPE
from rentals.exporters.contract_document import generate_contract_pdf
from rentals.exporters.spreadsheets import (
    XLSX_MEDIA_TYPE,
    generate_billing_xlsx,
    generate_tracker_xlsx,
)
from rentals.exporters.tracker_document import generate_tracker_pdf
from rentals.exporters.word_documents import (
    DOCX_MEDIA_TYPE,
    generate_billing_docx,
    generate_contract_docx,
    generate_tracker_docx,
)


class DocumentFormat(str, Enum):
    PDF = "pdf"
    XLSX = "xlsx"
    DOCX = "docx"


MEDIA_TYPES = {
    DocumentFormat.PDF: PDF_MEDIA_TYPE,
    DocumentFormat.XLSX: XLSX_MEDIA_TYPE,
    DocumentFormat.DOCX: DOCX_MEDIA_TYPE,
}

BILLING_EXPORTERS = {
    DocumentFormat.PDF: generate_billing_pdf,
    DocumentFormat.XLSX: generate_billing_xlsx,
    DocumentFormat.DOCX: generate_billing_docx,
}

TRACKER_EXPORTERS = {
    DocumentFormat.PDF: generate_tracker_pdf,
    DocumentFormat.XLSX: generate_tracker_xlsx,
    DocumentFormat.DOCX: generate_tracker_docx,
}

# A lease agreement has no tabular form
CONTRACT_EXPORTERS = {
    DocumentFormat.PDF: generate_contract_pdf,
    DocumentFormat.DOCX: generate_contract_docx,
}


def document_response_headers(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}
