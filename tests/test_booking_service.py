import asyncio
from decimal import Decimal

import pytest

from catering_api.app.core.errors import InvalidTransitionError, NotFoundError, ValidationError
from catering_api.app.schemas.booking import BookingPatch, BookingRequest
from catering_api.app.schemas.package import PackagePatch
from catering_api.app.services.booking_service import BookingService, quote_total
from catering_api.app.services.inquiry_service import InquiryService

from .helpers import booking_form


def create(storage, **overrides):
    request = BookingRequest.model_validate(booking_form(**overrides))
    return asyncio.run(BookingService.create_booking(storage, request))


def test_quote_total():
    assert quote_total("95.00", 50) == "4750.00"
    assert quote_total("28.00", 15) == "420.00"
    assert quote_total("45.50", 3) == "136.50"


@pytest.mark.parametrize("package_id", [1, 2, 3])
@pytest.mark.parametrize("guests", [1, 17, 250])
def test_package_booking_is_priced_per_guest(storage, package_id, guests):
    booking, _, _ = create(storage, selectedPackage=str(package_id), guestCount=guests)

    price = Decimal(storage.get_package(package_id).price_per_person)
    assert booking.total_amount == str((price * guests).quantize(Decimal("0.01")))
    assert booking.package_id == package_id
    assert booking.status == "pending"


def test_custom_flag_keeps_given_total(storage):
    booking, _, _ = create(storage, customPackage=True, totalAmount="1200")

    assert booking.is_custom_package is True
    assert booking.package_id == 2
    assert booking.total_amount == "1200.00"


def test_booking_without_package_has_no_total(storage):
    booking, _, _ = create(storage, selectedPackage="")

    assert booking.package_id is None
    assert booking.total_amount is None


def test_new_email_creates_client_before_booking(storage):
    booking, client, created = create(storage)

    assert created is True
    assert booking.client_id == client.id
    assert storage.get_client_by_email("jane@example.com") == client
    assert len(storage.list_clients()) == 1


def test_existing_email_reuses_client(storage):
    first, client, _ = create(storage)
    second, same_client, created = create(storage, fullName="Jane Smith", phone="555-0200", guestCount=80)

    assert created is False
    assert second.client_id == first.client_id == client.id
    assert same_client.full_name == "Jane Doe"
    assert same_client.phone == "555-0100"
    assert len(storage.list_clients()) == 1


def test_unknown_package_fails_before_anything_is_written(storage):
    with pytest.raises(ValidationError) as excinfo:
        create(storage, selectedPackage="99")

    assert excinfo.value.errors[0]["field"] == "packageId"
    assert storage.list_clients() == []
    assert storage.list_bookings() == []


def test_update_booking_reports_status_change(storage):
    booking, _, _ = create(storage)

    updated, changed = asyncio.run(
        BookingService.update_booking(storage, booking.id, BookingPatch(status="confirmed"))
    )
    assert changed is True
    assert updated.status == "confirmed"

    updated, changed = asyncio.run(
        BookingService.update_booking(storage, booking.id, BookingPatch(event_location="Rooftop"))
    )
    assert changed is False
    assert updated.event_location == "Rooftop"


def test_update_missing_booking(storage):
    with pytest.raises(NotFoundError):
        asyncio.run(BookingService.update_booking(storage, 5, BookingPatch(status="confirmed")))


def test_any_status_is_accepted_by_default(storage):
    booking, _, _ = create(storage)

    updated, _ = asyncio.run(BookingService.update_booking(storage, booking.id, BookingPatch(status="on-hold")))

    assert updated.status == "on-hold"


@pytest.mark.parametrize(
    "path",
    [
        ["confirmed", "completed"],
        ["cancelled"],
        ["pending", "confirmed"],
    ],
)
def test_legal_transitions_pass_when_enforced(storage, path):
    booking, _, _ = create(storage)
    for status in path:
        booking, _ = asyncio.run(
            BookingService.update_booking(
                storage, booking.id, BookingPatch(status=status), enforce_transitions=True
            )
        )
    assert booking.status == path[-1]


@pytest.mark.parametrize(
    "path",
    [
        ["completed"],
        ["cancelled", "confirmed"],
        ["confirmed", "pending"],
        ["on-hold"],
    ],
)
def test_illegal_transitions_are_rejected_when_enforced(storage, path):
    booking, _, _ = create(storage)
    with pytest.raises(InvalidTransitionError):
        for status in path:
            booking, _ = asyncio.run(
                BookingService.update_booking(
                    storage, booking.id, BookingPatch(status=status), enforce_transitions=True
                )
            )
    assert storage.get_booking(booking.id).status == (path[-2] if len(path) > 1 else "pending")


def test_custom_quote_form_becomes_inquiry(storage):
    request = BookingRequest.model_validate(
        booking_form(customPackage=True, selectedPackage="", budgetRange="$3,000 - $5,000")
    )
    assert request.is_custom_quote

    inquiry = asyncio.run(InquiryService.create_inquiry(storage, InquiryService.from_booking_request(request)))

    assert inquiry.client_name == "Jane Doe"
    assert inquiry.client_email == "jane@example.com"
    assert inquiry.budget_range == "$3,000 - $5,000"
    assert inquiry.message == "Custom package request for wedding with 50 guests."
    assert inquiry.status == "new"
    assert storage.list_clients() == []


def test_total_overflow_is_a_field_error_and_writes_nothing(storage):
    storage.update_package(2, PackagePatch(price_per_person="9" * 24))

    with pytest.raises(ValidationError) as excinfo:
        create(storage, guestCount=100_000)

    assert excinfo.value.errors[0]["field"] == "guestCount"
    assert storage.list_clients() == []
    assert storage.list_bookings() == []
