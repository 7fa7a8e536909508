"""
Main entrypoint for the catering booking API.

This module assembles the FastAPI application, sets up logging,
installs the error handlers and includes the API router under
``/api``.  ``create_app`` builds and configures the app; a default
instance is created at import time as ``app`` so it can be served
directly, e.g.::

    uvicorn catering_api.app.main:app --reload

The entity store and the notifier are created here and attached to
``app.state``.  Tests pass their own instances to get an isolated
application per test.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.storage import MemoryStorage
from .services.notification_service import Notifier, build_notifier


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[MemoryStorage] = None,
    notifier: Optional[Notifier] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the environment‑derived
        module settings.
    storage : Optional[MemoryStorage]
        Entity store.  A freshly seeded store is created if omitted.
    notifier : Optional[Notifier]
        Notification channel.  Built from ``settings.notifier`` if
        omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.storage = storage if storage is not None else MemoryStorage()
    app.state.notifier = notifier if notifier is not None else build_notifier(settings)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    logging.getLogger(__name__).info(
        "%s %s ready (notifier=%s, admin token %s)",
        settings.project_name,
        settings.api_version,
        type(app.state.notifier).__name__,
        "set" if settings.admin_token else "not set",
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
