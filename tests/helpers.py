from datetime import datetime, timedelta
from typing import List

from catering_api.app.services.notification_service import (
    Notification,
    NotificationError,
    Notifier,
)


class RecordingNotifier(Notifier):
    def __init__(self) -> None:
        self.sent: List[Notification] = []

    def send(self, notification: Notification) -> None:
        self.sent.append(notification)


class FailingNotifier(Notifier):
    def __init__(self) -> None:
        self.attempts = 0

    def send(self, notification: Notification) -> None:
        self.attempts += 1
        raise NotificationError("mail server unreachable")


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def booking_form(**overrides):
    """The booking form as posted by the website for Jane's wedding."""
    form = {
        "eventType": "wedding",
        "guestCount": 50,
        "eventDate": "2025-06-01",
        "eventTime": "18:00",
        "selectedPackage": "2",
        "customPackage": False,
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
    }
    form.update(overrides)
    return form


def inquiry_body(**overrides):
    body = {
        "clientName": "Sam Lee",
        "clientEmail": "sam@example.com",
        "clientPhone": "555-0199",
        "eventType": "corporate",
        "guestCount": 120,
        "budgetRange": "$5,000 - $10,000",
        "message": "Product launch dinner, vegetarian options needed.",
    }
    body.update(overrides)
    return body