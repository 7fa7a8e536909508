"""
Business logic for bookings.

``BookingService.create_booking`` implements the public booking flow:

1. The request body has already been validated by its pydantic model
   (required fields, e‑mail format, ``guestCount >= 1``).
2. A referenced package must exist, otherwise the request fails with
   a field error before anything is written.
3. For a package booking that is not flagged custom, the total is
   ``pricePerPerson * guestCount`` rounded to cents.
4. The client is resolved by e‑mail, or created from the contact
   fields.  An existing client's name and phone are left untouched.
5. The booking is stored with status ``pending``.

Notifications are not sent from here; the endpoint schedules them so
that they run after the response.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import List, Optional, Tuple

from ..core.errors import NotFoundError, ValidationError
from ..core.storage import MemoryStorage
from ..schemas.booking import (
    BOOKING_TRANSITIONS,
    Booking,
    BookingCreate,
    BookingPatch,
    BookingRequest,
)
from ..schemas.client import Client
from ..schemas.common import CENTS
from ..schemas.package import Package
from .status_rules import ensure_transition

logger = logging.getLogger(__name__)


def quote_total(price_per_person: str, guest_count: int) -> str:
    """Return ``price_per_person * guest_count`` as a two‑place decimal string."""
    total = Decimal(price_per_person) * guest_count
    return str(total.quantize(CENTS, rounding=ROUND_HALF_UP))


class BookingService:
    """Service for creating and administering bookings."""

    @classmethod
    async def create_booking(
        cls, storage: MemoryStorage, request: BookingRequest
    ) -> Tuple[Booking, Client, bool]:
        """Create a booking from a validated form submission.

        Returns the booking, the resolved client and whether the client
        was newly created.
        """
        package: Optional[Package] = None
        if request.package_id is not None:
            package = storage.get_package(request.package_id)
            if package is None:
                raise ValidationError.for_field(
                    "packageId", f"Package {request.package_id} does not exist", "not_found"
                )

        total_amount = request.total_amount
        if package is not None and not request.is_custom_package:
            try:
                total_amount = quote_total(package.price_per_person, request.guest_count)
            except InvalidOperation:
                raise ValidationError.for_field(
                    "guestCount", "Booking total is too large to compute", "value_error"
                )

        client, created = storage.get_or_create_client(
            full_name=request.full_name, email=request.email, phone=request.phone
        )
        if created:
            logger.info("Client %s created for %s", client.id, client.email)

        booking = storage.create_booking(
            BookingCreate(
                client_id=client.id,
                package_id=request.package_id,
                event_type=request.event_type,
                event_date=request.event_date,
                event_time=request.event_time,
                event_location=request.event_location,
                guest_count=request.guest_count,
                total_amount=total_amount,
                status="pending",
                special_requests=request.special_requests,
                budget_range=request.budget_range,
                is_custom_package=request.is_custom_package,
            )
        )
        logger.info(
            "Booking %s created for client %s (package=%s, total=%s)",
            booking.id,
            client.id,
            booking.package_id,
            booking.total_amount,
        )
        return booking, client, created

    @classmethod
    async def list_bookings(cls, storage: MemoryStorage) -> List[Booking]:
        return storage.list_bookings()

    @classmethod
    async def update_booking(
        cls,
        storage: MemoryStorage,
        booking_id: int,
        patch: BookingPatch,
        enforce_transitions: bool = False,
    ) -> Tuple[Booking, bool]:
        """Apply an admin patch to a booking.

        Returns the updated booking and whether its status changed.
        With ``enforce_transitions`` the status must follow the booking
        lifecycle; otherwise any status string is accepted.
        """
        previous: List[str] = []

        def check(current: Booking, change: BookingPatch) -> None:
            previous.append(current.status)
            if enforce_transitions:
                ensure_transition("Booking", BOOKING_TRANSITIONS, current.status, change.status)

        booking = storage.update_booking(booking_id, patch, check=check)
        if booking is None:
            raise NotFoundError("Booking")
        status_changed = booking.status != previous[0]
        if status_changed:
            logger.info("Booking %s status %s -> %s", booking_id, previous[0], booking.status)
        return booking, status_changed
