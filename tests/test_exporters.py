"""Tests for the PDF, Excel and Word document exporters."""

from datetime import date
from decimal import Decimal
from io import BytesIO

import pytest
from docx import Document
from docx.enum.section import WD_ORIENT
from openpyxl import load_workbook

from rentals.core.config import settings
from rentals.exporters.billing_document import (
    amount_rows,
    billing_title,
    consumption_rows,
    generate_billing_pdf,
    resolve_copies,
)
from rentals.exporters.contract_document import ContractDocumentData, generate_contract_pdf
from rentals.exporters.spreadsheets import generate_billing_xlsx, generate_tracker_xlsx
from rentals.exporters.tracker_document import TRACKER_HEADER, generate_tracker_pdf, tracker_rows
from rentals.exporters.word_documents import (
    generate_billing_docx,
    generate_contract_docx,
    generate_tracker_docx,
)
from rentals.models.enums import UtilityType
from rentals.schemas.utility import UtilityTrackerRow
from rentals.services.billing_helpers import calculate_billing_data


def _billing(make_reading):
    previous = make_reading(1, date(2024, 1, 15), "100", "50", utility_type=UtilityType.WATER)
    current = make_reading(
        2, date(2024, 2, 15), "80", "45", amount="1000", utility_type=UtilityType.WATER
    )
    return calculate_billing_data(previous, current, "SA Unit 1", "Maria Santos")


def _contract() -> ContractDocumentData:
    return ContractDocumentData(
        property_name="Sunrise Apartments",
        unit_name="Unit 1",
        contract_name="Ana Reyes Lim",
        tenant_address="45 Mabini St",
        begin_contract=date(2024, 1, 1),
        end_contract=date(2024, 12, 31),
        contract_address="12 Rizal St",
        rent_amount=Decimal("8000"),
        cash_bond_amount=Decimal("16000"),
    )


def _tracker_rows() -> list[UtilityTrackerRow]:
    return [
        UtilityTrackerRow(
            utility_id=2,
            due_date=date(2024, 2, 25),
            previous_date_of_reading=date(2024, 1, 15),
            previous_unit_reading=Decimal("150"),
            current_date_of_reading=date(2024, 2, 15),
            current_unit_reading=Decimal("125"),
            usage=Decimal("25"),
            amount=Decimal("1000"),
            paid=True,
            recorded_by="Maria Santos",
        ),
        UtilityTrackerRow(
            utility_id=1,
            due_date=date(2024, 1, 25),
            previous_date_of_reading=None,
            previous_unit_reading=None,
            current_date_of_reading=date(2024, 1, 15),
            current_unit_reading=Decimal("150"),
            usage=None,
            amount=Decimal("900"),
            paid=False,
            recorded_by=None,
        ),
    ]


class TestBillingDocument:
    """Tests for the billing statement."""

    def test_title(self, make_reading) -> None:
        assert billing_title(_billing(make_reading)) == "SA Unit 1 (MNWD) - 02/15/2024"

    def test_consumption_rows(self, make_reading) -> None:
        rows = consumption_rows(_billing(make_reading))
        assert rows[0] == ["Location", "Current RDG.", "Previous RDG.", "Consumption", "Percentage"]
        assert rows[1] == ["First Floor", "80.00", "100.00", "20.00", "80.00%"]
        assert rows[2] == ["Second Floor", "45.00", "50.00", "5.00", "20.00%"]
        assert rows[3][3] == "25.00"

    def test_amount_rows(self, make_reading) -> None:
        rows = amount_rows(_billing(make_reading))
        assert rows[1] == ["First Floor", "PHP 1,000.00", "80.00%", "PHP 800.00"]
        assert rows[2] == ["Second Floor", "PHP 1,000.00", "20.00%", "PHP 200.00"]
        assert rows[3][-1] == "PHP 1,000.00"

    def test_generates_pdf(self, make_reading) -> None:
        content = generate_billing_pdf(_billing(make_reading), generated_on=date(2024, 2, 20))
        assert content.startswith(b"%PDF")

    def test_more_copies_make_a_longer_document(self, make_reading) -> None:
        billing = _billing(make_reading)
        single = generate_billing_pdf(billing, copies=1, generated_on=date(2024, 2, 20))
        triple = generate_billing_pdf(billing, copies=3, generated_on=date(2024, 2, 20))
        assert len(triple) > len(single)

    def test_copies_default_to_configured_count(self) -> None:
        assert resolve_copies(None) == settings.BILLING_COPIES
        assert resolve_copies(2) == 2

    @pytest.mark.parametrize("copies", [0, -1])
    def test_rejects_fewer_than_one_copy(self, make_reading, copies: int) -> None:
        with pytest.raises(ValueError):
            generate_billing_pdf(_billing(make_reading), copies=copies)


class TestBillingSpreadsheet:
    """The Excel billing keeps figures numeric."""

    def test_billing_sheet(self, make_reading) -> None:
        content = generate_billing_xlsx(
            _billing(make_reading), copies=1, generated_on=date(2024, 2, 20)
        )
        sheet = load_workbook(BytesIO(content))["Billing"]

        assert sheet["A1"].value == "SA Unit 1 (MNWD) - 02/15/2024"
        assert sheet["A3"].value == "Consumption Breakdown"
        assert sheet["A4"].value == "Location"
        assert sheet["A5"].value == "First Floor"
        assert sheet["D5"].value == 20
        assert sheet["E5"].value == pytest.approx(0.8)
        assert sheet["E5"].number_format == "0.00%"
        assert sheet["D7"].value == 25
        assert sheet["A9"].value == "Amount Breakdown"
        assert sheet["D11"].value == 800
        assert sheet["D12"].value == 200
        assert sheet["A15"].value == "First Floor Amount Due: PHP 800.00"
        assert sheet["A21"].value == "Status: Not Paid"
        assert sheet.max_row == 21

    def test_copies_are_stacked(self, make_reading) -> None:
        billing = _billing(make_reading)
        content = generate_billing_xlsx(billing, copies=3, generated_on=date(2024, 2, 20))
        sheet = load_workbook(BytesIO(content))["Billing"]
        titles = [cell.value for cell in sheet["A"] if cell.value == billing_title(billing)]
        assert len(titles) == 3

    def test_rejects_zero_copies(self, make_reading) -> None:
        with pytest.raises(ValueError):
            generate_billing_xlsx(_billing(make_reading), copies=0)


class TestBillingWordDocument:
    def test_billing_tables_per_copy(self, make_reading) -> None:
        content = generate_billing_docx(
            _billing(make_reading), copies=2, generated_on=date(2024, 2, 20)
        )
        document = Document(BytesIO(content))

        assert len(document.tables) == 4
        consumption = document.tables[0]
        assert [cell.text for cell in consumption.rows[1].cells] == [
            "First Floor",
            "80.00",
            "100.00",
            "20.00",
            "80.00%",
        ]
        assert document.tables[1].cell(3, 3).text == "PHP 1,000.00"

        texts = [p.text for p in document.paragraphs]
        assert texts.count("SA Unit 1 (MNWD) - 02/15/2024") == 2
        assert "Prepared by: Maria Santos" in texts
        assert "Date: 02/20/2024" in texts


class TestContractDocument:
    def test_generates_pdf(self) -> None:
        assert generate_contract_pdf(_contract()).startswith(b"%PDF")

    def test_generates_word_document(self) -> None:
        content = generate_contract_docx(_contract(), generated_on=date(2024, 1, 2))
        texts = [p.text for p in Document(BytesIO(content)).paragraphs]

        assert texts[0] == "LEASE AGREEMENT"
        assert "Prepared: 01/02/2024" in texts
        for heading in (
            "PROPERTY INFORMATION",
            "TENANT INFORMATION",
            "LEASE TERMS",
            "FINANCIAL TERMS",
            "SIGNATURES",
        ):
            assert heading in texts
        assert "Monthly Rent: PHP 8,000.00" in texts
        assert "Cash Bond: PHP 16,000.00" in texts
        assert "Lessee/Tenant" in texts


class TestTrackerDocument:
    def test_tracker_rows(self) -> None:
        table = tracker_rows(_tracker_rows())
        assert table[0] == TRACKER_HEADER
        assert table[1][-1] == "Paid"
        assert table[1][5] == "25.00"
        assert table[2][1] == "-"
        assert table[2][-1] == "Not Paid"

    def test_generates_pdf(self) -> None:
        content = generate_tracker_pdf(
            "SA Unit 1 + Unit 2", UtilityType.ELECTRICITY, _tracker_rows()
        )
        assert content.startswith(b"%PDF")

    def test_tracker_sheet(self) -> None:
        content = generate_tracker_xlsx(
            "SA Unit 1 + Unit 2", UtilityType.ELECTRICITY, _tracker_rows()
        )
        sheet = load_workbook(BytesIO(content))["Tracker"]

        assert sheet["A1"].value == "SA Unit 1 + Unit 2 - Casureco Tracker"
        assert [cell.value for cell in sheet[3]] == TRACKER_HEADER
        assert sheet["A4"].value.date() == date(2024, 2, 25)
        assert sheet["F4"].value == 25
        assert sheet["G4"].value == 1000
        assert sheet["H4"].value == "Paid"
        assert sheet["B5"].value is None
        assert sheet["H5"].value == "Not Paid"

    def test_tracker_word_document_is_landscape(self) -> None:
        content = generate_tracker_docx(
            "SA Unit 1 + Unit 2", UtilityType.ELECTRICITY, _tracker_rows()
        )
        document = Document(BytesIO(content))

        assert document.sections[0].orientation == WD_ORIENT.LANDSCAPE
        assert document.paragraphs[0].text == "SA Unit 1 + Unit 2 - Casureco Tracker"
        table = document.tables[0]
        assert [cell.text for cell in table.rows[0].cells] == TRACKER_HEADER
        assert table.cell(1, 5).text == "25.00"
        assert table.cell(2, 7).text == "Not Paid"
