"""Shared fixtures: in-memory database, API client and acting users."""

from datetime import date, datetime, time
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import rentals.models  # noqa: F401
from rentals.core.database import Base, get_db
from rentals.main import app
from rentals.models.enums import UserRole, UtilityType
from rentals.schemas.utility import UtilityPaymentRecord, UtilityWithPayment


@pytest.fixture()
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestingSessionLocal
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(test_db) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def manager(client: TestClient) -> dict:
    """The bootstrap user, who is always a manager."""
    response = client.post(
        "/api/users",
        json={"email": "manager@example.com", "full_name": "Maria Santos"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def manager_headers(manager: dict) -> dict[str, str]:
    return {"X-User-Id": str(manager["id"])}


@pytest.fixture()
def contributor_headers(client: TestClient, manager_headers: dict[str, str]) -> dict[str, str]:
    response = client.post(
        "/api/users",
        json={
            "email": "helper@example.com",
            "full_name": "Jose Cruz",
            "role": UserRole.CONTRIBUTOR.value,
        },
        headers=manager_headers,
    )
    assert response.status_code == 201
    return {"X-User-Id": str(response.json()["id"])}


@pytest.fixture()
def property_with_units(client: TestClient, manager_headers: dict[str, str]) -> dict:
    """A two-unit property with both units created."""
    response = client.post(
        "/api/properties",
        json={"name": "Sunrise Apartments", "address": "12 Rizal St", "code": "SA", "no_units": 2},
        headers=manager_headers,
    )
    assert response.status_code == 201
    rental_property = response.json()

    units = []
    for name in ("Unit 1", "Unit 2"):
        response = client.post(
            "/api/units",
            json={
                "rental_property_id": rental_property["id"],
                "name": name,
                "track_utilities": True,
                "rent_amount": "8000.00",
                "cash_bond_amount": "16000.00",
            },
            headers=manager_headers,
        )
        assert response.status_code == 201
        units.append(response.json())

    rental_property["units"] = units
    return rental_property


@pytest.fixture()
def pairing(client: TestClient, manager_headers: dict[str, str], property_with_units: dict) -> dict:
    first, second = property_with_units["units"]
    response = client.post(
        "/api/pairings",
        json={"first_unit_id": first["id"], "second_unit_id": second["id"]},
        headers=manager_headers,
    )
    assert response.status_code == 200
    return response.json()


def _make_reading(
    id: int,
    reading_date: date,
    first_floor: str | Decimal = "0",
    second_floor: str | Decimal = "0",
    *,
    unit_reading: str | Decimal = "0",
    amount: str | Decimal = "0",
    utility_type: UtilityType = UtilityType.ELECTRICITY,
    pairing_id: int | None = 1,
    unit_id: int | None = None,
    paid: bool | None = None,
) -> UtilityWithPayment:
    """Build a UtilityWithPayment record without touching the database."""
    payment = None
    if paid is not None:
        payment = UtilityPaymentRecord(
            id=id,
            utility_id=id,
            paid=paid,
            recorded_by_user_id=None,
            recorded_date=datetime.combine(reading_date, time()),
            comments=None,
        )
    return UtilityWithPayment(
        id=id,
        pairing_id=pairing_id,
        unit_id=unit_id,
        type=utility_type,
        due_date=reading_date,
        date_of_reading=reading_date,
        unit_reading=Decimal(unit_reading),
        first_floor_reading=Decimal(first_floor),
        second_floor_reading=Decimal(second_floor),
        amount=Decimal(amount),
        payment=payment,
    )


@pytest.fixture()
def make_reading():
    return _make_reading
