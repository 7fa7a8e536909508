"""
Pydantic schema definitions for API payloads.

Each domain (clients, packages, bookings, inquiries) defines its own
models for stored entities, request bodies and partial updates.  The
stored models double as response models; they serialise with camelCase
keys.
"""
