"""
View revision endpoint for API v1.

Front ends poll this route with the path of a rendered view (for
example ``/contacts`` or ``/contacts/7``) and re-fetch when the
revision is newer than the one they rendered.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from contact_manager_api.app.api.deps import get_view_invalidator
from contact_manager_api.app.core.views import ViewInvalidator

router = APIRouter()


@router.get("/revision")
async def view_revision(
    path: str = Query(..., min_length=1),
    views: ViewInvalidator = Depends(get_view_invalidator),
) -> Dict[str, Any]:
    invalidated_at = views.invalidated_at(path)
    return {
        "path": path,
        "revision": views.revision(path),
        "invalidated_at": invalidated_at.isoformat() if invalidated_at else None,
    }
