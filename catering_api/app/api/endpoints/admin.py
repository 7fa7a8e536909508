"""
Admin dashboard endpoints.

All routes here require the admin bearer token when ``ADMIN_TOKEN`` is
configured (see ``core.security``).  Status updates accept any status
string unless ``ENFORCE_STATUS_TRANSITIONS`` is enabled, in which case
illegal lifecycle moves are rejected with 409.
"""

from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, Path

from catering_api.app.api.deps import get_notifier, get_settings, get_storage
from catering_api.app.core.config import Settings
from catering_api.app.core.security import require_admin
from catering_api.app.core.storage import MemoryStorage
from catering_api.app.schemas.booking import Booking, BookingPatch
from catering_api.app.schemas.inquiry import Inquiry, InquiryPatch
from catering_api.app.schemas.package import Package, PackagePatch
from catering_api.app.schemas.statistics import DashboardStatistics
from catering_api.app.services.booking_service import BookingService
from catering_api.app.services.inquiry_service import InquiryService
from catering_api.app.services.notification_service import NotificationService, Notifier
from catering_api.app.services.package_service import PackageService
from catering_api.app.services.statistics_service import StatisticsService

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/bookings", response_model=List[Booking])
async def list_bookings(storage: MemoryStorage = Depends(get_storage)) -> List[Booking]:
    """List all bookings in creation order."""
    return await BookingService.list_bookings(storage)


@router.patch("/bookings/{booking_id}", response_model=Booking)
async def update_booking(
    patch: BookingPatch,
    background_tasks: BackgroundTasks,
    booking_id: int = Path(..., description="ID of the booking"),
    storage: MemoryStorage = Depends(get_storage),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> Booking:
    """Partially update a booking, typically to change its status.

    The client is notified in the background when the status changes.
    Returns 404 if the booking does not exist.
    """
    booking, status_changed = await BookingService.update_booking(
        storage, booking_id, patch, enforce_transitions=settings.enforce_status_transitions
    )
    if status_changed:
        client = storage.get_client(booking.client_id)
        if client is not None:
            background_tasks.add_task(
                NotificationService.dispatch,
                notifier,
                NotificationService.booking_status_update(booking, client),
            )
    return booking


@router.get("/inquiries", response_model=List[Inquiry])
async def list_inquiries(storage: MemoryStorage = Depends(get_storage)) -> List[Inquiry]:
    return await InquiryService.list_inquiries(storage)


@router.patch("/inquiries/{inquiry_id}", response_model=Inquiry)
async def update_inquiry(
    patch: InquiryPatch,
    inquiry_id: int = Path(..., description="ID of the inquiry"),
    storage: MemoryStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> Inquiry:
    """Change an inquiry's status (``new`` -> ``responded`` -> ``converted``)."""
    return await InquiryService.update_inquiry(
        storage, inquiry_id, patch, enforce_transitions=settings.enforce_status_transitions
    )


@router.get("/packages", response_model=List[Package])
async def list_all_packages(storage: MemoryStorage = Depends(get_storage)) -> List[Package]:
    """List every package, including deactivated ones."""
    return await PackageService.list_packages(storage, include_inactive=True)


@router.patch("/packages/{package_id}", response_model=Package)
async def update_package(
    patch: PackagePatch,
    package_id: int = Path(..., description="ID of the package"),
    storage: MemoryStorage = Depends(get_storage),
) -> Package:
    """Edit a package or toggle ``isActive`` to hide it from the public list."""
    return await PackageService.update_package(storage, package_id, patch)


@router.get("/statistics", response_model=DashboardStatistics)
async def dashboard_statistics(storage: MemoryStorage = Depends(get_storage)) -> DashboardStatistics:
    """Booking counts per status, revenue figures and open inquiries."""
    return await StatisticsService.overview(storage)
