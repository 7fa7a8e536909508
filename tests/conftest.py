from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from catering_api.app.core.config import Settings
from catering_api.app.core.storage import MemoryStorage
from catering_api.app.main import create_app

from .helpers import FakeClock, RecordingNotifier


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 3, 14, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def storage(clock):
    return MemoryStorage(clock=clock)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def settings():
    return Settings(
        admin_token="",
        enforce_status_transitions=False,
        notifier="log",
        business_email="events@example.com",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings, storage, notifier):
    return create_app(settings=settings, storage=storage, notifier=notifier)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
