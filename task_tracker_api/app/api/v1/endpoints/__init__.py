"""
Endpoint subpackage for API v1.

Each module defines an ``APIRouter`` for one domain; they are
aggregated in ``router.py``.
"""
