"""
Pydantic models for catering packages.

Packages are reference data seeded at startup.  ``PackageCreate`` is
used by the store when seeding, ``Package`` is the stored and returned
shape, and ``PackagePatch`` lists the fields an administrator may
change.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .common import CAMEL_CONFIG, PatchModel, to_money

PackageCategory = Literal["corporate", "wedding", "casual", "custom"]


class PackageBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Wedding Bliss"])
    description: str = Field(..., min_length=1)
    price_per_person: str = Field(..., examples=["95.00"])
    min_guests: int = Field(..., ge=1, examples=[50])
    features: List[str] = Field(default_factory=list)
    category: PackageCategory
    is_active: bool = True

    model_config = CAMEL_CONFIG

    @field_validator("price_per_person", mode="before")
    @classmethod
    def _normalise_price(cls, value):
        price = to_money(value)
        if price is None:
            raise ValueError("Price per person is required")
        return price


class PackageCreate(PackageBase):
    """Schema for inserting a package into the store."""
    pass


class Package(PackageBase):
    id: int


class PackagePatch(PatchModel):
    """Admin‑editable package fields.  Omitted fields keep their value."""

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    price_per_person: Optional[str] = None
    min_guests: Optional[int] = Field(default=None, ge=1)
    features: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @field_validator("price_per_person", mode="before")
    @classmethod
    def _normalise_price(cls, value):
        return to_money(value)
