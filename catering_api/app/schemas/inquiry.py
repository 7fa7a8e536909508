"""
Pydantic models for custom‑quote inquiries.

Inquiries are standalone leads: the contact fields are stored on the
inquiry itself and no client record is created.
"""

from datetime import datetime
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, EmailStr, Field

from .common import CAMEL_CONFIG, MAX_GUESTS, PatchModel

INQUIRY_STATUSES = ("new", "responded", "converted")

INQUIRY_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "new": frozenset({"responded"}),
    "responded": frozenset({"converted"}),
    "converted": frozenset(),
}


class InquiryCreate(BaseModel):
    client_name: str = Field(..., min_length=1, examples=["Jane Doe"])
    client_email: EmailStr = Field(..., examples=["jane@example.com"])
    client_phone: Optional[str] = None
    event_type: str = Field(..., min_length=1, examples=["wedding"])
    guest_count: int = Field(..., ge=1, le=MAX_GUESTS, examples=[120])
    # The booking form sends "" when no budget was picked.
    budget_range: str = Field(..., examples=["$5,000 - $10,000"])
    message: str = Field(..., min_length=1)

    model_config = CAMEL_CONFIG


class Inquiry(InquiryCreate):
    id: int
    client_email: str
    status: str = "new"
    created_at: datetime


class InquiryPatch(PatchModel):
    status: Optional[str] = Field(default=None, min_length=1, examples=["responded"])
