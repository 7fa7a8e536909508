"""
Domain exceptions and their HTTP rendering.

Services raise the exceptions defined here; endpoints let them
propagate and the handlers registered by ``register_exception_handlers``
turn them into JSON responses.  Every error body carries a ``message``
key, validation errors additionally carry a list of field errors.
"""

import logging
from typing import Any, Dict, Iterable, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Input is malformed or references something that does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[Dict[str, Any]], message: str = "Validation error") -> None:
        super().__init__(message)
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str, error_type: str = "value_error") -> "ValidationError":
        return cls([{"field": field, "message": message, "type": error_type}])


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} not found")
        self.kind = kind


class InvalidTransitionError(ServiceError):
    """A status change violates the booking or inquiry lifecycle."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, kind: str, current: str, requested: str) -> None:
        super().__init__(f"Cannot change {kind.lower()} status from '{current}' to '{requested}'")
        self.current = current
        self.requested = requested


def _field_errors(raw_errors: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic error dicts to ``{field, message, type}``.

    The leading ``body``/``query``/``path`` element of the location is
    dropped so clients see the JSON key they sent.
    """
    errors: List[Dict[str, Any]] = []
    for err in raw_errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in {"body", "query", "path"}:
            loc = loc[1:]
        errors.append(
            {
                "field": ".".join(loc) or "body",
                "message": err.get("msg", "Invalid value"),
                "type": err.get("type", "value_error"),
            }
        )
    return errors


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    content: Dict[str, Any] = {"message": exc.message}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation error", "errors": _field_errors(exc.errors())},
    )


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)
