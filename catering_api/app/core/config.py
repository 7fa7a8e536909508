"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an in‑memory store and a logging notifier without
any configuration at all.  In a production deployment you should
override these via environment variables.
"""

import os
from dataclasses import dataclass


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catering Booking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Static bearer token for the admin routes.  When empty the admin
    # routes are open.  Set ADMIN_TOKEN in any deployment reachable from the
    # internet.
    admin_token: str = os.getenv("ADMIN_TOKEN", "")

    # When enabled, booking and inquiry status changes must follow the
    # documented lifecycle (pending -> confirmed|cancelled,
    # confirmed -> completed; new -> responded -> converted).
    enforce_status_transitions: bool = _flag("ENFORCE_STATUS_TRANSITIONS")

    # Notification channel: ``log`` (default), ``smtp`` or ``webhook``.
    notifier: str = os.getenv("NOTIFIER", "log")
    business_email: str = os.getenv("BUSINESS_EMAIL", "events@example.com")

    smtp_host: str = os.getenv("SMTP_HOST", "")
    smtp_port: int = int(os.getenv("SMTP_PORT", "587"))
    smtp_user: str = os.getenv("SMTP_USER", "")
    smtp_password: str = os.getenv("SMTP_PASSWORD", "")
    smtp_use_ssl: bool = _flag("SMTP_USE_SSL")

    notify_webhook_url: str = os.getenv("NOTIFY_WEBHOOK_URL", "")
    notify_timeout: int = int(os.getenv("NOTIFY_TIMEOUT", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
