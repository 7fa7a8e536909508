"""
Outbound notifications (confirmation e‑mails and the contact inbox).

A ``Notifier`` delivers a ``Notification`` somewhere.  Three
implementations are provided:

* ``LoggingNotifier`` writes the message to the log.  It is the
  default so the service runs without any mail infrastructure.
* ``SmtpNotifier`` sends a plain text e‑mail with ``smtplib``.
* ``WebhookNotifier`` POSTs the notification as JSON to an HTTP
  endpoint (for example a transactional mail provider or a chat hook).

Endpoints never call a notifier directly.  They schedule
``NotificationService.dispatch`` as a background task, which runs after
the response has been sent and swallows delivery errors after logging
them, so a failed notification can never fail the booking, inquiry or
contact request that triggered it.
"""

import logging
import smtplib
from dataclasses import asdict, dataclass
from email.message import EmailMessage
from typing import Optional

import requests

from ..core.config import Settings
from ..schemas.booking import Booking
from ..schemas.client import Client
from ..schemas.contact import ContactMessage
from ..schemas.inquiry import Inquiry

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    """Raised by a notifier when a message could not be delivered."""


@dataclass(frozen=True)
class Notification:
    recipient: str
    subject: str
    body: str
    reply_to: Optional[str] = None


class Notifier:
    """Interface for notification channels."""

    def send(self, notification: Notification) -> None:
        raise NotImplementedError


class LoggingNotifier(Notifier):
    def send(self, notification: Notification) -> None:
        logger.info(
            "Notification to %s would be sent: %s", notification.recipient, notification.subject
        )


class SmtpNotifier(Notifier):
    """Send notifications as plain text e‑mail."""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str = "",
        password: str = "",
        use_ssl: bool = False,
        timeout: int = 10,
    ) -> None:
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.timeout = timeout

    def build_message(self, notification: Notification) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = notification.recipient
        message["Subject"] = notification.subject
        if notification.reply_to:
            message["Reply-To"] = notification.reply_to
        message.set_content(notification.body)
        return message

    def send(self, notification: Notification) -> None:
        message = self.build_message(notification)
        try:
            if self.use_ssl:
                server = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
            else:
                server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            with server:
                if not self.use_ssl:
                    server.starttls()
                if self.username:
                    server.login(self.username, self.password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationError(f"SMTP delivery to {notification.recipient} failed: {exc}") from exc
        logger.info("E-mail sent to %s: %s", notification.recipient, notification.subject)


class WebhookNotifier(Notifier):
    """POST each notification as JSON to ``url``."""

    def __init__(self, url: str, timeout: int = 10, session: Optional[requests.Session] = None) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, notification: Notification) -> None:
        try:
            response = self.session.post(self.url, json=asdict(notification), timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NotificationError(f"Webhook delivery to {self.url} failed: {exc}") from exc
        logger.info("Webhook notification posted for %s", notification.recipient)


def build_notifier(settings: Settings) -> Notifier:
    """Create the notifier selected by ``settings.notifier``."""
    kind = settings.notifier.lower()
    if kind == "smtp":
        if not settings.smtp_host:
            raise ValueError("NOTIFIER=smtp requires SMTP_HOST")
        return SmtpNotifier(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.business_email,
            username=settings.smtp_user,
            password=settings.smtp_password,
            use_ssl=settings.smtp_use_ssl,
            timeout=settings.notify_timeout,
        )
    if kind == "webhook":
        if not settings.notify_webhook_url:
            raise ValueError("NOTIFIER=webhook requires NOTIFY_WEBHOOK_URL")
        return WebhookNotifier(settings.notify_webhook_url, timeout=settings.notify_timeout)
    if kind != "log":
        raise ValueError(f"Unknown notifier '{settings.notifier}'")
    return LoggingNotifier()


class NotificationService:
    """Compose notification texts and deliver them without raising."""

    @classmethod
    def dispatch(cls, notifier: Notifier, notification: Notification) -> bool:
        """Deliver ``notification``; log and return ``False`` on any failure."""
        try:
            notifier.send(notification)
        except Exception:
            logger.warning(
                "Failed to deliver notification '%s' to %s",
                notification.subject,
                notification.recipient,
                exc_info=True,
            )
            return False
        return True

    @staticmethod
    def booking_confirmation(booking: Booking, client: Client) -> Notification:
        lines = [
            f"Dear {client.full_name},",
            "",
            f"Thank you for your booking request (reference #{booking.id}).",
            f"Event: {booking.event_type} on {booking.event_date:%Y-%m-%d} at {booking.event_time}",
            f"Guests: {booking.guest_count}",
        ]
        if booking.event_location:
            lines.append(f"Location: {booking.event_location}")
        if booking.total_amount is not None:
            lines.append(f"Estimated total: ${booking.total_amount}")
        lines += ["", "We will confirm your booking within 24 hours."]
        return Notification(
            recipient=client.email,
            subject=f"Booking request #{booking.id} received",
            body="\n".join(lines),
        )

    @staticmethod
    def booking_status_update(booking: Booking, client: Client) -> Notification:
        return Notification(
            recipient=client.email,
            subject=f"Booking #{booking.id} is now {booking.status}",
            body=(
                f"Dear {client.full_name},\n\n"
                f"The status of your {booking.event_type} booking on "
                f"{booking.event_date:%Y-%m-%d} has changed to '{booking.status}'."
            ),
        )

    @staticmethod
    def inquiry_acknowledgement(inquiry: Inquiry) -> Notification:
        return Notification(
            recipient=inquiry.client_email,
            subject="We received your custom quote request",
            body=(
                f"Dear {inquiry.client_name},\n\n"
                f"Thank you for your inquiry about a {inquiry.event_type} event for "
                f"{inquiry.guest_count} guests. We will get back to you with a custom "
                "quote within 24 hours."
            ),
        )

    @staticmethod
    def contact_forward(message: ContactMessage, inbox: str) -> Notification:
        return Notification(
            recipient=inbox,
            subject=f"Contact form: {message.subject}",
            body=f"From: {message.name} <{message.email}>\n\n{message.message}",
            reply_to=message.email,
        )
