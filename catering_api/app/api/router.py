"""
Top‑level API router.

Aggregates the domain routers.  ``main.create_app`` mounts this router
under ``/api``.  When new domains are introduced, include their
routers here.
"""

from fastapi import APIRouter

from .endpoints import admin, bookings, clients, contact, inquiries, packages

router = APIRouter()

router.include_router(packages.router, prefix="/packages", tags=["packages"])
# The bookings router defines its own "/bookings" path.
router.include_router(bookings.router, tags=["bookings"])
router.include_router(clients.router, prefix="/clients", tags=["clients"])
router.include_router(inquiries.router, prefix="/inquiries", tags=["inquiries"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
