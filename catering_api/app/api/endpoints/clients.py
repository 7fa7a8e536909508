"""
Client portal endpoints.

Clients are identified by e‑mail address; there is no separate login.
"""

from typing import List

from fastapi import APIRouter, Depends, Path

from catering_api.app.api.deps import get_storage
from catering_api.app.core.storage import MemoryStorage
from catering_api.app.schemas.booking import Booking
from catering_api.app.schemas.client import Client
from catering_api.app.services.client_service import ClientService

router = APIRouter()


@router.get("/{email}", response_model=Client)
async def get_client(
    email: str = Path(..., description="E-mail address the client booked with"),
    storage: MemoryStorage = Depends(get_storage),
) -> Client:
    """Return the client record, or 404 if no booking was made with this address."""
    return await ClientService.get_client_by_email(storage, email)


@router.get("/{email}/bookings", response_model=List[Booking])
async def list_client_bookings(
    email: str = Path(..., description="E-mail address the client booked with"),
    storage: MemoryStorage = Depends(get_storage),
) -> List[Booking]:
    """List the client's bookings.  Returns 404 if the client is unknown."""
    return await ClientService.list_client_bookings(storage, email)
