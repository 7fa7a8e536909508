"""Custom‑quote inquiry endpoint."""

from fastapi import APIRouter, BackgroundTasks, Depends, status

from catering_api.app.api.deps import get_notifier, get_storage
from catering_api.app.core.storage import MemoryStorage
from catering_api.app.schemas.inquiry import Inquiry, InquiryCreate
from catering_api.app.services.inquiry_service import InquiryService
from catering_api.app.services.notification_service import NotificationService, Notifier

router = APIRouter()


@router.post("", response_model=Inquiry, status_code=status.HTTP_201_CREATED)
async def create_inquiry(
    body: InquiryCreate,
    background_tasks: BackgroundTasks,
    storage: MemoryStorage = Depends(get_storage),
    notifier: Notifier = Depends(get_notifier),
) -> Inquiry:
    """Store an inquiry with status ``new`` and acknowledge it by e‑mail."""
    inquiry = await InquiryService.create_inquiry(storage, body)
    background_tasks.add_task(
        NotificationService.dispatch, notifier, NotificationService.inquiry_acknowledgement(inquiry)
    )
    return inquiry
