"""
Service layer.

Each service encapsulates the business logic for one domain and
operates on the ``MemoryStorage`` instance passed in by the endpoint.
Services raise the exceptions from ``core.errors``; they never build
HTTP responses themselves.
"""
