"""Tests for digital album order endpoints."""

from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from photo_studio.api.app import create_app
from photo_studio.containers import AppContainer
from tests.fakes import InMemoryBookingRepository

DANA_BOOKING = {
    "clientName": "Dana",
    "phone": "0501234567",
    "email": "Dana@Example.com",
    "sessionType": "family",
    "preferredDate": "2099-01-01",
}


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def booking_id(
    client: TestClient, booking_repository: InMemoryBookingRepository
) -> str:
    created = client.post("/api/bookings", json=DANA_BOOKING).json()["data"]
    booking_repository.set_status(UUID(created["id"]), "confirmed")
    return created["id"]


def _order(booking_id: str, **overrides: str) -> dict[str, str]:
    return {
        "bookingId": booking_id,
        "customerEmail": "dana@example.com",
        "customerName": "Dana",
        "packageType": "premium",
        **overrides,
    }


def test_order_for_confirmed_booking_is_created(
    client: TestClient, booking_id: str
) -> None:
    response = client.post("/api/digital-album-orders", json=_order(booking_id))

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "pending"
    assert data["bookingId"] == booking_id
    assert data["booking"]["email"] == "dana@example.com"
    assert data["createdAt"] == data["updatedAt"]


def test_repeated_order_is_conflict(client: TestClient, booking_id: str) -> None:
    client.post("/api/digital-album-orders", json=_order(booking_id))

    response = client.post("/api/digital-album-orders", json=_order(booking_id))

    assert response.status_code == 409
    assert response.json()["success"] is False


def test_other_email_is_forbidden(client: TestClient, booking_id: str) -> None:
    response = client.post(
        "/api/digital-album-orders",
        json=_order(booking_id, customerEmail="other@example.com"),
    )

    assert response.status_code == 403
    assert response.json()["message"].startswith("Email doesn't match booking")


def test_unknown_booking_is_not_found(client: TestClient) -> None:
    response = client.post("/api/digital-album-orders", json=_order(str(uuid4())))

    assert response.status_code == 404


def test_pending_booking_is_bad_request(client: TestClient) -> None:
    created = client.post("/api/bookings", json=DANA_BOOKING).json()["data"]

    response = client.post("/api/digital-album-orders", json=_order(created["id"]))

    assert response.status_code == 400
    assert "not confirmed" in response.json()["message"]


def test_invalid_package_is_bad_request(client: TestClient, booking_id: str) -> None:
    response = client.post(
        "/api/digital-album-orders", json=_order(booking_id, packageType="gold")
    )

    assert response.status_code == 400
    assert response.json()["fields"] == ["packageType"]


def test_list_and_get_orders(client: TestClient, booking_id: str) -> None:
    created = client.post("/api/digital-album-orders", json=_order(booking_id)).json()
    order_id = created["data"]["id"]

    listed = client.get("/api/digital-album-orders").json()
    fetched = client.get(f"/api/digital-album-orders/{order_id}")
    bare = client.get(
        f"/api/digital-album-orders/{order_id}", params={"includeBooking": "false"}
    )

    assert listed["success"] is True
    assert listed["count"] == 1
    assert listed["data"][0]["id"] == order_id
    assert fetched.status_code == 200
    assert fetched.json()["data"]["booking"]["id"] == booking_id
    assert bare.json()["data"]["booking"] is None


def test_get_unknown_order_is_not_found(client: TestClient) -> None:
    assert client.get(f"/api/digital-album-orders/{uuid4()}").status_code == 404
    assert client.get("/api/digital-album-orders/oops").status_code == 404


def test_orders_by_booking(client: TestClient, booking_id: str) -> None:
    client.post("/api/digital-album-orders", json=_order(booking_id))

    response = client.get(f"/api/digital-album-orders/by-booking/{booking_id}")
    empty = client.get(f"/api/digital-album-orders/by-booking/{uuid4()}")

    assert response.status_code == 200
    assert response.json()["count"] == 1
    assert empty.json() == {"success": True, "count": 0, "data": []}
