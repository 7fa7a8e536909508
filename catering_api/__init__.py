"""
Top-level package for the catering booking API.

All functionality lives in the ``app`` subpackage; the ASGI application
is ``catering_api.app.main:app``.
"""

__all__ = []
