"""Contact form endpoint.  Messages are forwarded to the business inbox, not stored."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends

from catering_api.app.api.deps import get_notifier, get_settings
from catering_api.app.core.config import Settings
from catering_api.app.schemas.contact import ContactAck, ContactMessage
from catering_api.app.services.notification_service import NotificationService, Notifier

router = APIRouter()


@router.post("", response_model=ContactAck)
async def send_contact_message(
    body: ContactMessage,
    background_tasks: BackgroundTasks,
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> ContactAck:
    logging.getLogger(__name__).info("Contact message received from %s", body.email)
    background_tasks.add_task(
        NotificationService.dispatch,
        notifier,
        NotificationService.contact_forward(body, settings.business_email),
    )
    return ContactAck()
