"""
Endpoint modules.

Each module defines an APIRouter for one domain (packages, bookings,
clients, inquiries, contact, admin).  The routers are aggregated in
``api/router.py``.
"""
