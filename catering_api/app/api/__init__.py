"""
HTTP surface of the catering API.

The routers in ``endpoints`` translate HTTP requests into service calls
and are aggregated by ``router.py``.
"""
