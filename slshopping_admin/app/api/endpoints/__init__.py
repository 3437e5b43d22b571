"""
Endpoint modules, one per entity family.

Each module defines an ``APIRouter`` serving the list, new, save,
detail, edit and delete screens of its family.  The routers are
aggregated in ``api/router.py``.
"""
