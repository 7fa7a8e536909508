"""Response model for the admin dashboard figures."""

from pydantic import BaseModel

from .common import CAMEL_CONFIG


class DashboardStatistics(BaseModel):
    total_bookings: int
    pending_bookings: int
    confirmed_bookings: int
    completed_bookings: int
    cancelled_bookings: int
    total_revenue: str
    monthly_revenue: str
    average_booking_value: str
    total_inquiries: int
    new_inquiries: int

    model_config = CAMEL_CONFIG
