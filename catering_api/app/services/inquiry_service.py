"""
Business logic for custom‑quote inquiries.

Inquiries are leads: they are stored with status ``new`` and are not
linked to a client record.  They arrive either from the inquiry
endpoint or from the booking form when the visitor asks for a custom
package without choosing one of the catalogue packages.
"""

import logging
from typing import List

from ..core.errors import NotFoundError
from ..core.storage import MemoryStorage
from ..schemas.booking import BookingRequest
from ..schemas.inquiry import INQUIRY_TRANSITIONS, Inquiry, InquiryCreate, InquiryPatch
from .status_rules import ensure_transition

logger = logging.getLogger(__name__)


class InquiryService:
    """Service for creating and administering inquiries."""

    @classmethod
    async def create_inquiry(cls, storage: MemoryStorage, data: InquiryCreate) -> Inquiry:
        inquiry = storage.create_inquiry(data)
        logger.info("Inquiry %s created (%s, %s guests)", inquiry.id, inquiry.event_type, inquiry.guest_count)
        return inquiry

    @staticmethod
    def from_booking_request(request: BookingRequest) -> InquiryCreate:
        """Translate a custom‑package booking form into an inquiry."""
        message = request.special_requests or (
            f"Custom package request for {request.event_type} with {request.guest_count} guests."
        )
        return InquiryCreate(
            client_name=request.full_name,
            client_email=request.email,
            client_phone=request.phone,
            event_type=request.event_type,
            guest_count=request.guest_count,
            budget_range=request.budget_range or "",
            message=message,
        )

    @classmethod
    async def list_inquiries(cls, storage: MemoryStorage) -> List[Inquiry]:
        return storage.list_inquiries()

    @classmethod
    async def update_inquiry(
        cls,
        storage: MemoryStorage,
        inquiry_id: int,
        patch: InquiryPatch,
        enforce_transitions: bool = False,
    ) -> Inquiry:
        def check(current: Inquiry, change: InquiryPatch) -> None:
            if enforce_transitions:
                ensure_transition("Inquiry", INQUIRY_TRANSITIONS, current.status, change.status)

        inquiry = storage.update_inquiry(inquiry_id, patch, check=check)
        if inquiry is None:
            raise NotFoundError("Inquiry")
        logger.info("Inquiry %s updated, status=%s", inquiry_id, inquiry.status)
        return inquiry
