"""Pydantic model for client records."""

from datetime import datetime

from pydantic import BaseModel, Field

from .common import CAMEL_CONFIG


class Client(BaseModel):
    """A customer, deduplicated by e‑mail address."""

    id: int
    full_name: str = Field(..., examples=["Jane Doe"])
    email: str = Field(..., examples=["jane@example.com"])
    phone: str = Field(..., examples=["555-0100"])
    member_since: datetime

    model_config = CAMEL_CONFIG
