"""Printable lease agreement."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from reportlab.lib.units import mm
from reportlab.platypus import Flowable, Spacer

from rentals.exporters.common import build_styles, paragraph, render_pdf
from rentals.services.formatting import format_amount, format_date

SIGNATURE_LINE = "_____________________________"
SIGNATURE_LABELS = ("Lessor/Owner", "Lessee/Tenant", "Date")


@dataclass(frozen=True)
class ContractDocumentData:
    """Fields printed on a lease agreement."""

    property_name: str
    unit_name: str
    contract_name: str
    tenant_address: str
    begin_contract: date
    end_contract: date
    contract_address: str
    rent_amount: Decimal
    cash_bond_amount: Decimal


def contract_title(data: ContractDocumentData) -> str:
    return f"Lease Agreement - {data.unit_name}"


def contract_sections(data: ContractDocumentData) -> list[tuple[str, list[str]]]:
    """Headed sections of the agreement, in print order, before the signatures."""
    return [
        (
            "PROPERTY INFORMATION",
            [
                f"Property Name: {data.property_name}",
                f"Unit Name: {data.unit_name}",
                f"Contract Address: {data.contract_address}",
            ],
        ),
        (
            "TENANT INFORMATION",
            [
                f"Contract Name: {data.contract_name}",
                f"Tenant Address: {data.tenant_address}",
            ],
        ),
        (
            "LEASE TERMS",
            [
                f"Contract Begin Date: {format_date(data.begin_contract)}",
                f"Contract End Date: {format_date(data.end_contract)}",
            ],
        ),
        (
            "FINANCIAL TERMS",
            [
                f"Monthly Rent: {format_amount(data.rent_amount)}",
                f"Cash Bond: {format_amount(data.cash_bond_amount)}",
            ],
        ),
    ]


def generate_contract_pdf(data: ContractDocumentData, generated_on: date | None = None) -> bytes:
    """Render the lease agreement for a contract."""
    styles = build_styles()
    generated_on = generated_on or date.today()

    story: list[Flowable] = [
        paragraph("LEASE AGREEMENT", styles["title"]),
        paragraph(f"Prepared: {format_date(generated_on)}", styles["body"]),
        Spacer(1, 8 * mm),
    ]
    for title, lines in contract_sections(data):
        story.append(paragraph(title, styles["heading"]))
        story.extend(paragraph(line, styles["body"]) for line in lines)
        story.append(Spacer(1, 4 * mm))

    story.append(paragraph("SIGNATURES", styles["heading"]))
    for label in SIGNATURE_LABELS:
        story.append(Spacer(1, 8 * mm))
        story.append(paragraph(SIGNATURE_LINE, styles["body"]))
        story.append(paragraph(label, styles["body"]))

    return render_pdf(story, title=contract_title(data))
