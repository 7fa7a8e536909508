"""Client lookups used by the client portal."""

from typing import List

from ..core.errors import NotFoundError
from ..core.storage import MemoryStorage
from ..schemas.booking import Booking
from ..schemas.client import Client


class ClientService:
    """Clients are created implicitly by the booking flow; this service only reads them."""

    @classmethod
    async def get_client_by_email(cls, storage: MemoryStorage, email: str) -> Client:
        client = storage.get_client_by_email(email)
        if client is None:
            raise NotFoundError("Client")
        return client

    @classmethod
    async def list_client_bookings(cls, storage: MemoryStorage, email: str) -> List[Booking]:
        """Return every booking of the client registered under ``email``."""
        client = await cls.get_client_by_email(storage, email)
        return storage.list_bookings_by_client(client.id)
