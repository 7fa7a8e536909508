"""
In‑memory entity store.

``MemoryStorage`` keeps clients, packages, bookings and inquiries in
plain dictionaries keyed by integer id, each kind with its own
auto‑incrementing counter.  Data lives for the lifetime of the
process.  The store is constructed explicitly (see ``main.create_app``)
and reached from request handlers through the ``get_storage``
dependency in ``api.deps``, so tests can build an isolated store per case.

Every compound read‑then‑write (id assignment, client lookup‑or‑create,
patch merge) runs under one re‑entrant lock.  FastAPI executes sync
dependencies and sync endpoints in a threadpool, so these sequences
must be atomic.

Entities are pydantic models; the store hands out copies so callers
can never mutate stored state in place.  There are no delete
operations.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from ..schemas.booking import Booking, BookingCreate, BookingPatch
from ..schemas.client import Client
from ..schemas.inquiry import Inquiry, InquiryCreate, InquiryPatch
from ..schemas.package import Package, PackageCreate, PackagePatch

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def email_key(email: str) -> str:
    """Key clients are matched on.  The address is stored as submitted."""
    return email.strip().lower()


DEFAULT_PACKAGES: List[PackageCreate] = [
    PackageCreate(
        name="Corporate Elegance",
        description=(
            "Perfect for business meetings, conferences, and corporate events. "
            "Professional presentation with gourmet flavors."
        ),
        price_per_person="45.00",
        min_guests=20,
        features=[
            "Gourmet sandwich platters",
            "Fresh fruit and cheese boards",
            "Premium beverages included",
            "Professional service staff",
        ],
        category="corporate",
    ),
    PackageCreate(
        name="Wedding Bliss",
        description=(
            "Make your special day unforgettable with our premium wedding catering "
            "featuring multi-course meals and elegant service."
        ),
        price_per_person="95.00",
        min_guests=50,
        features=[
            "Three-course plated dinner",
            "Cocktail hour appetizers",
            "Wedding cake service",
            "Full bar service available",
        ],
        category="wedding",
    ),
    PackageCreate(
        name="Casual Gatherings",
        description=(
            "Perfect for family reunions, birthday parties, and casual celebrations. "
            "Delicious comfort food in a relaxed setting."
        ),
        price_per_person="28.00",
        min_guests=15,
        features=[
            "BBQ buffet with all fixings",
            "Homestyle side dishes",
            "Soft drinks and water",
            "Setup and cleanup",
        ],
        category="casual",
    ),
]


class MemoryStorage:
    """Process‑lifetime repository for the four entity kinds."""

    def __init__(self, seed_packages: bool = True, clock: Optional[Clock] = None) -> None:
        self._clock = clock or utcnow
        self._lock = threading.RLock()
        self._clients: Dict[int, Client] = {}
        self._packages: Dict[int, Package] = {}
        self._bookings: Dict[int, Booking] = {}
        self._inquiries: Dict[int, Inquiry] = {}
        self._next_ids: Dict[str, int] = {"client": 1, "package": 1, "booking": 1, "inquiry": 1}
        if seed_packages:
            for package in DEFAULT_PACKAGES:
                self.create_package(package)
            logger.debug("Seeded %d default packages", len(DEFAULT_PACKAGES))

    def _allocate_id(self, kind: str) -> int:
        with self._lock:
            new_id = self._next_ids[kind]
            self._next_ids[kind] = new_id + 1
            return new_id

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------

    def create_client(self, full_name: str, email: str, phone: str) -> Client:
        with self._lock:
            client = Client(
                id=self._allocate_id("client"),
                full_name=full_name,
                email=email,
                phone=phone,
                member_since=self._clock(),
            )
            self._clients[client.id] = client
            return client.model_copy(deep=True)

    def get_client(self, client_id: int) -> Optional[Client]:
        client = self._clients.get(client_id)
        return client.model_copy(deep=True) if client else None

    def get_client_by_email(self, email: str) -> Optional[Client]:
        """Find a client by e-mail, ignoring case and surrounding whitespace."""
        key = email_key(email)
        with self._lock:
            for client in self._clients.values():
                if email_key(client.email) == key:
                    return client.model_copy(deep=True)
        return None

    def get_or_create_client(self, full_name: str, email: str, phone: str) -> Tuple[Client, bool]:
        """Return the client registered under ``email``, creating it if absent.

        The second element is ``True`` when a new record was created.
        An existing client's name and phone are never overwritten.
        """
        with self._lock:
            existing = self.get_client_by_email(email)
            if existing is not None:
                return existing, False
            return self.create_client(full_name, email, phone), True

    def list_clients(self) -> List[Client]:
        with self._lock:
            return [c.model_copy(deep=True) for c in self._clients.values()]

    # ------------------------------------------------------------------
    # Packages
    # ------------------------------------------------------------------

    def create_package(self, data: PackageCreate) -> Package:
        with self._lock:
            package = Package(id=self._allocate_id("package"), **data.model_dump())
            self._packages[package.id] = package
            return package.model_copy(deep=True)

    def get_package(self, package_id: int) -> Optional[Package]:
        package = self._packages.get(package_id)
        return package.model_copy(deep=True) if package else None

    def list_packages(self, active_only: bool = True) -> List[Package]:
        with self._lock:
            return [
                p.model_copy(deep=True)
                for p in self._packages.values()
                if p.is_active or not active_only
            ]

    def update_package(self, package_id: int, patch: PackagePatch) -> Optional[Package]:
        with self._lock:
            package = self._packages.get(package_id)
            if package is None:
                return None
            updated = package.model_copy(update=patch.changes(), deep=True)
            self._packages[package_id] = updated
            return updated.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------

    def create_booking(self, data: BookingCreate) -> Booking:
        with self._lock:
            now = self._clock()
            booking = Booking(
                id=self._allocate_id("booking"),
                created_at=now,
                updated_at=now,
                **data.model_dump(),
            )
            self._bookings[booking.id] = booking
            return booking.model_copy(deep=True)

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        booking = self._bookings.get(booking_id)
        return booking.model_copy(deep=True) if booking else None

    def list_bookings(self) -> List[Booking]:
        with self._lock:
            return [b.model_copy(deep=True) for b in self._bookings.values()]

    def list_bookings_by_client(self, client_id: int) -> List[Booking]:
        with self._lock:
            return [
                b.model_copy(deep=True)
                for b in self._bookings.values()
                if b.client_id == client_id
            ]

    def update_booking(
        self,
        booking_id: int,
        patch: BookingPatch,
        check: Optional[Callable[[Booking, BookingPatch], None]] = None,
    ) -> Optional[Booking]:
        """Merge ``patch`` into the booking and refresh ``updated_at``.

        ``check`` is called with the current booking and the patch while
        the lock is held; it may raise to reject the update.
        """
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None
            if check is not None:
                check(booking, patch)
            changes = patch.changes()
            changes["updated_at"] = self._clock()
            updated = booking.model_copy(update=changes, deep=True)
            self._bookings[booking_id] = updated
            return updated.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Inquiries
    # ------------------------------------------------------------------

    def create_inquiry(self, data: InquiryCreate) -> Inquiry:
        with self._lock:
            inquiry = Inquiry(
                id=self._allocate_id("inquiry"),
                status="new",
                created_at=self._clock(),
                **data.model_dump(),
            )
            self._inquiries[inquiry.id] = inquiry
            return inquiry.model_copy(deep=True)

    def get_inquiry(self, inquiry_id: int) -> Optional[Inquiry]:
        inquiry = self._inquiries.get(inquiry_id)
        return inquiry.model_copy(deep=True) if inquiry else None

    def list_inquiries(self) -> List[Inquiry]:
        with self._lock:
            return [i.model_copy(deep=True) for i in self._inquiries.values()]

    def update_inquiry(
        self,
        inquiry_id: int,
        patch: InquiryPatch,
        check: Optional[Callable[[Inquiry, InquiryPatch], None]] = None,
    ) -> Optional[Inquiry]:
        with self._lock:
            inquiry = self._inquiries.get(inquiry_id)
            if inquiry is None:
                return None
            if check is not None:
                check(inquiry, patch)
            updated = inquiry.model_copy(update=patch.changes(), deep=True)
            self._inquiries[inquiry_id] = updated
            return updated.model_copy(deep=True)

