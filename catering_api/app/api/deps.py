"""
Request‑scoped dependencies.

``create_app`` attaches the store, the notifier and the settings to
``app.state``; these helpers hand them to endpoints via ``Depends`` so
handlers never touch module‑level singletons.
"""

from fastapi import Request

from ..core.config import Settings
from ..core.storage import MemoryStorage
from ..services.notification_service import Notifier


def get_storage(request: Request) -> MemoryStorage:
    return request.app.state.storage


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
