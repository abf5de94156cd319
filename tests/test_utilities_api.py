"""Tests for utility readings, payments, billing and tracker endpoints."""

from decimal import Decimal
from io import BytesIO

import pytest
from docx import Document
from fastapi.testclient import TestClient
from openpyxl import load_workbook

from rentals.core.config import settings
from rentals.exporters.spreadsheets import XLSX_MEDIA_TYPE
from rentals.exporters.word_documents import DOCX_MEDIA_TYPE

PAIR_LABEL = "SA Unit 1 (First Floor) + Unit 2 (Second Floor)"


def _reading_payload(pairing_id: int, reading_date: str, **overrides) -> dict:
    payload = {
        "pairing_id": pairing_id,
        "type": "Casureco",
        "due_date": reading_date,
        "date_of_reading": reading_date,
        "unit_reading": "150",
        "first_floor_reading": "100",
        "second_floor_reading": "50",
        "amount": "900",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def readings(client: TestClient, manager_headers: dict[str, str], pairing: dict) -> list[dict]:
    """January and February electricity readings for the pairing."""
    created = []
    for payload in (
        _reading_payload(pairing["id"], "2024-01-15"),
        _reading_payload(
            pairing["id"],
            "2024-02-15",
            unit_reading="125",
            first_floor_reading="80",
            second_floor_reading="45",
            amount="1000",
        ),
    ):
        response = client.post("/api/utilities", json=payload, headers=manager_headers)
        assert response.status_code == 201
        created.append(response.json())
    return created


class TestUtilityReadings:
    """Recording and listing readings."""

    def test_create_reading(self, readings: list[dict], pairing: dict) -> None:
        january = readings[0]
        assert january["pairing_id"] == pairing["id"]
        assert january["type"] == "Casureco"
        assert Decimal(january["first_floor_reading"]) == Decimal("100")
        assert january["payment"] is None

    def test_requires_existing_pairing(
        self, client: TestClient, manager_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/utilities", json=_reading_payload(999, "2024-01-15"), headers=manager_headers
        )
        assert response.status_code == 404

    def test_duplicate_month_rejected(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        response = client.post(
            "/api/utilities",
            json=_reading_payload(pairing["id"], "2024-01-28"),
            headers=manager_headers,
        )
        assert response.status_code == 400
        assert "already exists" in response.json()["detail"]

    def test_same_month_other_type_allowed(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        response = client.post(
            "/api/utilities",
            json=_reading_payload(pairing["id"], "2024-01-20", type="MNWD"),
            headers=manager_headers,
        )
        assert response.status_code == 201

    def test_negative_reading_rejected(
        self, client: TestClient, manager_headers: dict[str, str], pairing: dict
    ) -> None:
        response = client.post(
            "/api/utilities",
            json=_reading_payload(pairing["id"], "2024-01-15", first_floor_reading="-1"),
            headers=manager_headers,
        )
        assert response.status_code == 422

    def test_list_newest_first_filtered_by_type(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        client.post(
            "/api/utilities",
            json=_reading_payload(pairing["id"], "2024-03-01", type="MNWD"),
            headers=manager_headers,
        )

        response = client.get(
            f"/api/utilities/pairing/{pairing['id']}",
            params={"type": "Casureco"},
            headers=manager_headers,
        )
        assert response.status_code == 200
        assert [u["date_of_reading"] for u in response.json()] == ["2024-02-15", "2024-01-15"]

        everything = client.get(f"/api/utilities/pairing/{pairing['id']}", headers=manager_headers)
        assert len(everything.json()) == 3

    def test_update_into_taken_month_rejected(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        response = client.patch(
            f"/api/utilities/{readings[1]['id']}",
            json={"date_of_reading": "2024-01-31"},
            headers=manager_headers,
        )
        assert response.status_code == 400

    def test_update_and_delete(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        response = client.patch(
            f"/api/utilities/{readings[1]['id']}",
            json={"amount": "1100"},
            headers=manager_headers,
        )
        assert response.status_code == 200
        assert Decimal(response.json()["amount"]) == Decimal("1100")

        response = client.delete(f"/api/utilities/{readings[1]['id']}", headers=manager_headers)
        assert response.status_code == 204
        url = f"/api/utilities/{readings[1]['id']}/billing"
        response = client.get(url, headers=manager_headers)
        assert response.status_code == 404


class TestUtilityPayments:
    def test_record_payment_twice_updates(
        self,
        client: TestClient,
        manager: dict,
        manager_headers: dict[str, str],
        readings: list[dict],
    ) -> None:
        utility_id = readings[1]["id"]
        first = client.put(
            f"/api/utilities/{utility_id}/payment",
            json={"paid": False},
            headers=manager_headers,
        )
        assert first.status_code == 200

        second = client.put(
            f"/api/utilities/{utility_id}/payment",
            json={"paid": True, "comments": "GCash"},
            headers=manager_headers,
        )
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["paid"] is True
        assert second.json()["recorded_by_user_id"] == manager["id"]

    def test_delete_payment(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        utility_id = readings[1]["id"]
        client.put(
            f"/api/utilities/{utility_id}/payment", json={"paid": True}, headers=manager_headers
        )
        response = client.delete(f"/api/utilities/{utility_id}/payment", headers=manager_headers)
        assert response.status_code == 204
        response = client.delete(f"/api/utilities/{utility_id}/payment", headers=manager_headers)
        assert response.status_code == 404


class TestBilling:
    """Billing generation for a pairing's readings."""

    def test_billing_for_specific_reading(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        url = f"/api/utilities/{readings[1]['id']}/billing"
        response = client.get(url, headers=manager_headers)
        assert response.status_code == 200
        data = response.json()

        assert data["unitName"] == PAIR_LABEL
        assert data["type"] == "Casureco"
        assert data["preparedBy"] == "Maria Santos"
        assert data["remarks"] == "Not Paid"
        assert data["previousDate"] == "2024-01-15"
        assert data["currentDate"] == "2024-02-15"
        assert Decimal(data["firstFloorUsage"]) == Decimal("20")
        assert Decimal(data["secondFloorUsage"]) == Decimal("5")
        assert Decimal(data["totalUsage"]) == Decimal("25")
        assert Decimal(data["firstFloorPercentage"]) == Decimal("80")
        assert Decimal(data["secondFloorPercentage"]) == Decimal("20")
        assert Decimal(data["firstFloorAmount"]) == Decimal("800")
        assert Decimal(data["secondFloorAmount"]) == Decimal("200")

    def test_billing_reflects_payment(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        utility_id = readings[1]["id"]
        client.put(
            f"/api/utilities/{utility_id}/payment", json={"paid": True}, headers=manager_headers
        )
        response = client.get(f"/api/utilities/{utility_id}/billing", headers=manager_headers)
        assert response.json()["remarks"] == "Paid"

    def test_pairing_with_readings_cannot_be_deleted(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        pairing: dict,
        readings: list[dict],
    ) -> None:
        response = client.delete(f"/api/pairings/{pairing['id']}", headers=manager_headers)
        assert response.status_code == 409

        url = f"/api/utilities/{readings[1]['id']}/billing"
        response = client.get(url, headers=manager_headers)
        assert response.status_code == 200
        assert response.json()["unitName"] == PAIR_LABEL

    def test_oldest_reading_has_no_billing(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        url = f"/api/utilities/{readings[0]['id']}/billing"
        response = client.get(url, headers=manager_headers)
        assert response.status_code == 422
        assert response.json()["detail"] == "Previous reading not found"

    def test_previous_reading_is_same_type(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        water = client.post(
            "/api/utilities",
            json=_reading_payload(pairing["id"], "2024-03-10", type="MNWD"),
            headers=manager_headers,
        ).json()
        response = client.get(f"/api/utilities/{water['id']}/billing", headers=manager_headers)
        assert response.status_code == 422

    def test_latest_billing(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        response = client.get(
            f"/api/utilities/pairing/{pairing['id']}/latest-billing",
            params={"type": "Casureco"},
            headers=manager_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["currentDate"] == "2024-02-15"
        assert data["previousDate"] == "2024-01-15"
        assert Decimal(data["amount"]) == Decimal("1000")

    def test_latest_billing_needs_two_readings(
        self, client: TestClient, manager_headers: dict[str, str], pairing: dict
    ) -> None:
        client.post(
            "/api/utilities",
            json=_reading_payload(pairing["id"], "2024-01-15"),
            headers=manager_headers,
        )
        response = client.get(
            f"/api/utilities/pairing/{pairing['id']}/latest-billing",
            params={"type": "Casureco"},
            headers=manager_headers,
        )
        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail == "At least two readings are required to generate a billing"

    def test_latest_billing_requires_type(
        self, client: TestClient, manager_headers: dict[str, str], pairing: dict
    ) -> None:
        response = client.get(
            f"/api/utilities/pairing/{pairing['id']}/latest-billing", headers=manager_headers
        )
        assert response.status_code == 422

    def test_no_consumption_billing(
        self, client: TestClient, manager_headers: dict[str, str], pairing: dict
    ) -> None:
        for reading_date, amount in (("2024-01-15", "400"), ("2024-02-15", "500")):
            client.post(
                "/api/utilities",
                json=_reading_payload(pairing["id"], reading_date, amount=amount),
                headers=manager_headers,
            )
        data = client.get(
            f"/api/utilities/pairing/{pairing['id']}/latest-billing",
            params={"type": "Casureco"},
            headers=manager_headers,
        ).json()
        assert Decimal(data["totalUsage"]) == 0
        assert Decimal(data["firstFloorPercentage"]) == 0
        assert Decimal(data["firstFloorAmount"]) == 0
        assert Decimal(data["secondFloorAmount"]) == 0
        assert Decimal(data["amount"]) == Decimal("500")

    def test_billing_document(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        response = client.get(
            f"/api/utilities/{readings[1]['id']}/billing/document", headers=manager_headers
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        expected = f'filename="{PAIR_LABEL}-Casureco-2024-02-15.pdf"'
        assert expected in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    def test_billing_spreadsheet_and_word_downloads(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        url = f"/api/utilities/{readings[1]['id']}/billing/document"

        response = client.get(url, params={"format": "xlsx"}, headers=manager_headers)
        assert response.status_code == 200
        assert response.headers["content-type"] == XLSX_MEDIA_TYPE
        expected = f'filename="{PAIR_LABEL}-Casureco-2024-02-15.xlsx"'
        assert expected in response.headers["content-disposition"]
        sheet = load_workbook(BytesIO(response.content))["Billing"]
        assert sheet["A1"].value == f"{PAIR_LABEL} (Casureco) - 02/15/2024"

        response = client.get(url, params={"format": "docx"}, headers=manager_headers)
        assert response.status_code == 200
        assert response.headers["content-type"] == DOCX_MEDIA_TYPE
        assert f'filename="{PAIR_LABEL}-Casureco-2024-02-15.docx"' in (
            response.headers["content-disposition"]
        )
        assert len(Document(BytesIO(response.content)).tables) == 2 * settings.BILLING_COPIES

    def test_unknown_document_format_rejected(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        response = client.get(
            f"/api/utilities/{readings[1]['id']}/billing/document",
            params={"format": "png"},
            headers=manager_headers,
        )
        assert response.status_code == 422

    def test_billing_document_for_oldest_reading(
        self, client: TestClient, manager_headers: dict[str, str], readings: list[dict]
    ) -> None:
        response = client.get(
            f"/api/utilities/{readings[0]['id']}/billing/document", headers=manager_headers
        )
        assert response.status_code == 422

    def test_billing_requires_identity(self, client: TestClient, readings: list[dict]) -> None:
        response = client.get(f"/api/utilities/{readings[1]['id']}/billing")
        assert response.status_code == 401


class TestUtilityTracker:
    def test_tracker_rows(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        client.put(
            f"/api/utilities/{readings[1]['id']}/payment",
            json={"paid": True},
            headers=manager_headers,
        )

        response = client.get(
            f"/api/utilities/pairing/{pairing['id']}/tracker",
            params={"type": "Casureco"},
            headers=manager_headers,
        )
        assert response.status_code == 200
        february, january = response.json()

        assert february["utility_id"] == readings[1]["id"]
        assert february["previous_date_of_reading"] == "2024-01-15"
        assert Decimal(february["usage"]) == Decimal("25")
        assert february["paid"] is True
        assert february["recorded_by"] == "Maria Santos"

        assert january["previous_date_of_reading"] is None
        assert january["usage"] is None
        assert january["paid"] is False
        assert january["recorded_by"] is None

    def test_tracker_month_filter_keeps_previous_lookup(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        response = client.get(
            f"/api/utilities/pairing/{pairing['id']}/tracker",
            params={"type": "Casureco", "year": 2024, "month": 2},
            headers=manager_headers,
        )
        rows = response.json()
        assert len(rows) == 1
        assert rows[0]["previous_date_of_reading"] == "2024-01-15"

    def test_tracker_document(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        response = client.get(
            f"/api/utilities/pairing/{pairing['id']}/tracker/document",
            params={"type": "Casureco"},
            headers=manager_headers,
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")
        expected = f'filename="{PAIR_LABEL}-Casureco-Tracker.pdf"'
        assert expected in response.headers["content-disposition"]

    def test_tracker_spreadsheet(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        response = client.get(
            f"/api/utilities/pairing/{pairing['id']}/tracker/document",
            params={"type": "Casureco", "format": "xlsx"},
            headers=manager_headers,
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == XLSX_MEDIA_TYPE
        expected = f'filename="{PAIR_LABEL}-Casureco-Tracker.xlsx"'
        assert expected in response.headers["content-disposition"]

        sheet = load_workbook(BytesIO(response.content))["Tracker"]
        assert sheet["A1"].value == f"{PAIR_LABEL} - Casureco Tracker"
        assert sheet.max_row == 5

    def test_tracker_word_document(
        self,
        client: TestClient,
        manager_headers: dict[str, str],
        readings: list[dict],
        pairing: dict,
    ) -> None:
        response = client.get(
            f"/api/utilities/pairing/{pairing['id']}/tracker/document",
            params={"type": "Casureco", "format": "docx"},
            headers=manager_headers,
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == DOCX_MEDIA_TYPE
        expected = f'filename="{PAIR_LABEL}-Casureco-Tracker.docx"'
        assert expected in response.headers["content-disposition"]
        assert len(Document(BytesIO(response.content)).tables[0].rows) == 3
