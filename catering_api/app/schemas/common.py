"""
Shared schema helpers.

The public API speaks camelCase JSON while the Python side uses
snake_case attributes.  ``CAMEL_CONFIG`` generates the camelCase
aliases and still accepts the attribute names on input.  Monetary
values travel as two‑place decimal strings (``"4750.00"``); ``to_money``
normalises anything numeric into that form.  Strings are stripped, so a
whitespace-only value fails a ``min_length=1`` constraint.
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, ClassVar, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

CENTS = Decimal("0.01")

CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

# Upper bound on guestCount; keeps package totals within decimal precision.
MAX_GUESTS = 100_000


class PatchModel(BaseModel):
    """Base class for partial updates.

    Only fields present in the request body are applied.  An explicit
    ``null`` clears a field only if it is listed in ``nullable_fields``;
    for required fields it is treated as "leave unchanged".  Unknown
    keys (``id``, ``createdAt`` ...) are ignored.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    model_config = CAMEL_CONFIG

    def changes(self) -> Dict[str, Any]:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.nullable_fields
        }


def to_money(value: Any) -> Optional[str]:
    """Return ``value`` as a two‑place decimal string, or ``None``.

    Raises ``ValueError`` for values that are not numbers or are
    negative, which pydantic reports as a field error.
    """
    if isinstance(value, str):
        value = value.strip()
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("Amount must be a decimal number")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError("Amount must be a decimal number")
    if not amount.is_finite() or amount < 0:
        raise ValueError("Amount must be a non-negative decimal number")
    try:
        return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        raise ValueError("Amount is too large")


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
