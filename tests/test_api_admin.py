import dataclasses

import pytest
from fastapi.testclient import TestClient

from catering_api.app.main import create_app

from .helpers import booking_form, inquiry_body


@pytest.fixture
def booking(client):
    return client.post("/api/bookings", json=booking_form()).json()


def test_list_bookings(client, booking):
    response = client.get("/api/admin/bookings")

    assert response.status_code == 200
    assert response.json() == [booking]


def test_confirm_booking(client, clock, booking):
    clock.advance(hours=2)

    response = client.patch(f"/api/admin/bookings/{booking['id']}", json={"status": "confirmed"})

    assert response.status_code == 200
    updated = response.json()
    assert updated["status"] == "confirmed"
    assert updated["createdAt"] == booking["createdAt"]
    assert updated["updatedAt"] > booking["updatedAt"]
    assert updated["totalAmount"] == "4750.00"


def test_patch_unknown_booking(client):
    response = client.patch("/api/admin/bookings/77", json={"status": "confirmed"})

    assert response.status_code == 404
    assert response.json() == {"message": "Booking not found"}


def test_status_change_notifies_client(client, notifier, booking):
    notifier.sent.clear()

    client.patch(f"/api/admin/bookings/{booking['id']}", json={"eventLocation": "Harbour Hall"})
    assert notifier.sent == []

    client.patch(f"/api/admin/bookings/{booking['id']}", json={"status": "confirmed"})
    assert [n.subject for n in notifier.sent] == [f"Booking #{booking['id']} is now confirmed"]

    client.patch(f"/api/admin/bookings/{booking['id']}", json={"status": "confirmed"})
    assert len(notifier.sent) == 1


def test_server_managed_fields_cannot_be_patched(client, booking):
    response = client.patch(
        f"/api/admin/bookings/{booking['id']}",
        json={"id": 500, "clientId": 9, "createdAt": "2001-01-01T00:00:00", "guestCount": 60},
    )

    updated = response.json()
    assert updated["id"] == booking["id"]
    assert updated["clientId"] == booking["clientId"]
    assert updated["createdAt"] == booking["createdAt"]
    assert updated["guestCount"] == 60


def test_any_status_is_accepted_by_default(client, booking):
    response = client.patch(f"/api/admin/bookings/{booking['id']}", json={"status": "completed"})

    assert response.status_code == 200
    assert response.json()["status"] == "completed"


def test_invalid_patch_body(client, booking):
    response = client.patch(f"/api/admin/bookings/{booking['id']}", json={"guestCount": 0})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "guestCount"


@pytest.fixture
def strict_client(settings, storage, notifier):
    strict = dataclasses.replace(settings, enforce_status_transitions=True)
    with TestClient(create_app(settings=strict, storage=storage, notifier=notifier)) as test_client:
        yield test_client


def test_strict_mode_rejects_illegal_transition(strict_client, storage):
    booking = strict_client.post("/api/bookings", json=booking_form()).json()

    response = strict_client.patch(f"/api/admin/bookings/{booking['id']}", json={"status": "completed"})

    assert response.status_code == 409
    assert "pending" in response.json()["message"]
    assert storage.get_booking(booking["id"]).status == "pending"

    assert strict_client.patch(
        f"/api/admin/bookings/{booking['id']}", json={"status": "confirmed"}
    ).status_code == 200


def test_strict_mode_inquiry_lifecycle(strict_client):
    inquiry = strict_client.post("/api/inquiries", json=inquiry_body()).json()
    path = f"/api/admin/inquiries/{inquiry['id']}"

    assert strict_client.patch(path, json={"status": "converted"}).status_code == 409
    assert strict_client.patch(path, json={"status": "responded"}).json()["status"] == "responded"
    assert strict_client.patch(path, json={"status": "converted"}).json()["status"] == "converted"


def test_inquiry_admin_routes(client):
    inquiry = client.post("/api/inquiries", json=inquiry_body()).json()

    assert client.get("/api/admin/inquiries").json() == [inquiry]

    response = client.patch(f"/api/admin/inquiries/{inquiry['id']}", json={"status": "responded"})
    assert response.status_code == 200
    assert response.json()["status"] == "responded"
    assert response.json()["message"] == inquiry["message"]

    missing = client.patch("/api/admin/inquiries/9", json={"status": "responded"})
    assert missing.status_code == 404
    assert missing.json() == {"message": "Inquiry not found"}


@pytest.fixture
def guarded_client(settings, storage, notifier):
    guarded = dataclasses.replace(settings, admin_token="s3cret")
    with TestClient(create_app(settings=guarded, storage=storage, notifier=notifier)) as test_client:
        yield test_client


@pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer wrong"}])
def test_admin_token_is_required_when_configured(guarded_client, headers):
    response = guarded_client.get("/api/admin/bookings", headers=headers)

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_admin_token_grants_access(guarded_client):
    response = guarded_client.get("/api/admin/bookings", headers={"Authorization": "Bearer s3cret"})

    assert response.status_code == 200
    assert guarded_client.get("/api/packages").status_code == 200
    assert guarded_client.post("/api/bookings", json=booking_form()).status_code == 201


def test_deactivated_package_is_hidden(client):
    response = client.patch("/api/admin/packages/3", json={"isActive": False})

    assert response.status_code == 200
    assert response.json()["isActive"] is False
    assert [p["id"] for p in client.get("/api/packages").json()] == [1, 2]
    assert [p["id"] for p in client.get("/api/admin/packages").json()] == [1, 2, 3]


def test_package_price_change_applies_to_new_bookings(client):
    response = client.patch("/api/admin/packages/2", json={"pricePerPerson": "99.5"})

    assert response.json()["pricePerPerson"] == "99.50"
    assert response.json()["name"] == "Wedding Bliss"
    booking = client.post("/api/bookings", json=booking_form()).json()
    assert booking["totalAmount"] == "4975.00"


def test_patch_unknown_package(client):
    response = client.patch("/api/admin/packages/8", json={"isActive": False})

    assert response.status_code == 404
    assert response.json() == {"message": "Package not found"}


def test_statistics(client):
    first = client.post("/api/bookings", json=booking_form()).json()
    client.post("/api/bookings", json=booking_form(selectedPackage="1", guestCount=20, email="ops@example.com"))
    client.post("/api/inquiries", json=inquiry_body())
    client.patch(f"/api/admin/bookings/{first['id']}", json={"status": "confirmed"})

    stats = client.get("/api/admin/statistics").json()

    assert stats["totalBookings"] == 2
    assert stats["pendingBookings"] == 1
    assert stats["confirmedBookings"] == 1
    assert stats["cancelledBookings"] == 0
    assert stats["totalRevenue"] == "5650.00"
    assert stats["averageBookingValue"] == "2825.00"
    assert stats["totalInquiries"] == 1
    assert stats["newInquiries"] == 1
