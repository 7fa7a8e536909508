"""
Pydantic models for bookings.

``BookingRequest`` is the body posted by the public booking form: event
details plus the contact fields used to resolve the client.  The form
historically sent ``selectedPackage``/``customPackage``; the API names
are ``packageId``/``isCustomPackage`` and both spellings are accepted.
``BookingCreate`` is what the service hands to the store once the
client is resolved and the price computed.  ``BookingPatch`` lists
the fields administrators may change.
"""

from datetime import datetime
from typing import ClassVar, Dict, FrozenSet, Optional

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from .common import CAMEL_CONFIG, MAX_GUESTS, PatchModel, to_money, to_utc

BOOKING_STATUSES = ("pending", "confirmed", "completed", "cancelled")

# Legal lifecycle moves, enforced only when ENFORCE_STATUS_TRANSITIONS is on.
BOOKING_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "pending": frozenset({"confirmed", "cancelled"}),
    "confirmed": frozenset({"completed"}),
    "completed": frozenset(),
    "cancelled": frozenset(),
}


class BookingRequest(BaseModel):
    event_type: str = Field(..., min_length=1, examples=["wedding"])
    event_date: datetime = Field(..., examples=["2025-06-01"])
    event_time: str = Field(..., min_length=1, examples=["18:00"])
    event_location: Optional[str] = None
    guest_count: int = Field(..., ge=1, le=MAX_GUESTS, examples=[50])
    package_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("packageId", "selectedPackage", "package_id"),
        examples=[2],
    )
    is_custom_package: bool = Field(
        default=False,
        validation_alias=AliasChoices("isCustomPackage", "customPackage", "is_custom_package"),
    )
    budget_range: Optional[str] = None
    special_requests: Optional[str] = None
    total_amount: Optional[str] = None

    full_name: str = Field(..., min_length=1, examples=["Jane Doe"])
    email: EmailStr = Field(..., examples=["jane@example.com"])
    phone: str = Field(..., min_length=1, examples=["555-0100"])

    model_config = CAMEL_CONFIG

    @field_validator("package_id", mode="before")
    @classmethod
    def _blank_package_is_none(cls, value):
        # The form's package <select> posts "" when nothing is chosen.
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("event_date")
    @classmethod
    def _event_date_utc(cls, value):
        return to_utc(value)

    @field_validator("total_amount", mode="before")
    @classmethod
    def _normalise_amount(cls, value):
        return to_money(value)

    @property
    def is_custom_quote(self) -> bool:
        """True when the form asked for a custom quote without a package."""
        return self.is_custom_package and self.package_id is None


class BookingCreate(BaseModel):
    client_id: int
    package_id: Optional[int] = None
    event_type: str
    event_date: datetime
    event_time: str
    event_location: Optional[str] = None
    guest_count: int = Field(..., ge=1, le=MAX_GUESTS)
    total_amount: Optional[str] = None
    status: str = "pending"
    special_requests: Optional[str] = None
    budget_range: Optional[str] = None
    is_custom_package: bool = False

    model_config = CAMEL_CONFIG

    @field_validator("event_date")
    @classmethod
    def _event_date_utc(cls, value):
        return to_utc(value)


class Booking(BookingCreate):
    id: int
    created_at: datetime
    updated_at: datetime


class BookingPatch(PatchModel):
    """Fields an administrator may change on a booking.

    Server‑managed fields (``id``, ``clientId``, ``createdAt``,
    ``updatedAt``) are not listed and therefore cannot be overwritten.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"event_location", "total_amount", "special_requests", "budget_range"})

    status: Optional[str] = Field(default=None, min_length=1, examples=["confirmed"])
    event_date: Optional[datetime] = None
    event_time: Optional[str] = Field(default=None, min_length=1)
    event_location: Optional[str] = None
    guest_count: Optional[int] = Field(default=None, ge=1, le=MAX_GUESTS)
    total_amount: Optional[str] = None
    special_requests: Optional[str] = None
    budget_range: Optional[str] = None

    @field_validator("total_amount", mode="before")
    @classmethod
    def _normalise_amount(cls, value):
        return to_money(value)

    @field_validator("event_date")
    @classmethod
    def _event_date_utc(cls, value):
        return to_utc(value)
