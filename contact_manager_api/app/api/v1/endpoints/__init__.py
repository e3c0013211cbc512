"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for one concern
(contacts, view revisions, health).  The routers are aggregated in
``router.py`` at the package level.
"""
