"""
Service layer for the admin dashboard figures.

Counts bookings per status and inquiries awaiting a reply, and sums
booking totals.  Revenue considers every booking with a known total,
whatever its status; bookings without a total (custom quotes) are
counted but contribute nothing.  ``monthlyRevenue`` is restricted to
bookings created in the current calendar month (UTC).
"""

from collections import Counter
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ..core.storage import MemoryStorage, utcnow
from ..schemas.booking import Booking
from ..schemas.common import CENTS
from ..schemas.statistics import DashboardStatistics


def _money(amount: Decimal) -> str:
    return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))


def _revenue(bookings: Iterable[Booking]) -> Decimal:
    return sum(
        (Decimal(b.total_amount) for b in bookings if b.total_amount is not None),
        Decimal("0"),
    )


class StatisticsService:
    """Aggregated metrics for administrators."""

    @classmethod
    async def overview(cls, storage: MemoryStorage, now: Optional[datetime] = None) -> DashboardStatistics:
        now = now or utcnow()
        bookings = storage.list_bookings()
        inquiries = storage.list_inquiries()

        by_status = Counter(b.status for b in bookings)
        total_revenue = _revenue(bookings)
        monthly_revenue = _revenue(
            b for b in bookings
            if b.created_at.year == now.year and b.created_at.month == now.month
        )
        average = total_revenue / len(bookings) if bookings else Decimal("0")

        return DashboardStatistics(
            total_bookings=len(bookings),
            pending_bookings=by_status["pending"],
            confirmed_bookings=by_status["confirmed"],
            completed_bookings=by_status["completed"],
            cancelled_bookings=by_status["cancelled"],
            total_revenue=_money(total_revenue),
            monthly_revenue=_money(monthly_revenue),
            average_booking_value=_money(average),
            total_inquiries=len(inquiries),
            new_inquiries=sum(1 for i in inquiries if i.status == "new"),
        )
