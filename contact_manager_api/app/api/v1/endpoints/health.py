"""
Health endpoint for API v1.

Reports whether the contact store answers a trivial query.  Returns
HTTP 200 with ``status: ok`` when it does and HTTP 500 otherwise.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from contact_manager_api.app.api.deps import get_contact_service
from contact_manager_api.app.core.config import settings
from contact_manager_api.app.core.errors import ContactError
from contact_manager_api.app.services.contact_service import ContactService

router = APIRouter()


@router.get("/")
async def health(service: ContactService = Depends(get_contact_service)) -> JSONResponse:
    try:
        await service.count()
    except ContactError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": exc.message, "database": "disconnected"},
        )
    return JSONResponse(
        content={
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "connected",
            "environment": settings.environment,
        }
    )
