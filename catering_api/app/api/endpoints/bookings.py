"""
Booking endpoint for the public booking form.

A regular submission creates a booking (resolving or creating the
client by e‑mail and pricing the selected package).  A submission with
``customPackage`` set and no package selected is a request for a
custom quote and is stored as an inquiry instead.  Either way the
confirmation notification is sent in the background after the
response.
"""

from typing import Union

from fastapi import APIRouter, BackgroundTasks, Depends, status

from catering_api.app.api.deps import get_notifier, get_storage
from catering_api.app.core.storage import MemoryStorage
from catering_api.app.schemas.booking import Booking, BookingRequest
from catering_api.app.schemas.inquiry import Inquiry
from catering_api.app.services.booking_service import BookingService
from catering_api.app.services.inquiry_service import InquiryService
from catering_api.app.services.notification_service import NotificationService, Notifier

router = APIRouter()


@router.post(
    "/bookings",
    response_model=Union[Booking, Inquiry],
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    body: BookingRequest,
    background_tasks: BackgroundTasks,
    storage: MemoryStorage = Depends(get_storage),
    notifier: Notifier = Depends(get_notifier),
) -> Union[Booking, Inquiry]:
    """Submit the booking form.

    Returns the created booking with status ``pending``, or the created
    inquiry with status ``new`` for custom‑quote requests.  Validation
    failures return 400 with a list of field errors.
    """
    if body.is_custom_quote:
        inquiry = await InquiryService.create_inquiry(storage, InquiryService.from_booking_request(body))
        background_tasks.add_task(
            NotificationService.dispatch, notifier, NotificationService.inquiry_acknowledgement(inquiry)
        )
        return inquiry

    booking, client, _ = await BookingService.create_booking(storage, body)
    background_tasks.add_task(
        NotificationService.dispatch, notifier, NotificationService.booking_confirmation(booking, client)
    )
    return booking
