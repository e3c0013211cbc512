"""
HTTP mapping for contact errors.

Actions report errors by class name on ``ActionResult.error_type``;
read endpoints let ``ContactError`` propagate to
:func:`contact_error_handler`.  Both paths use the same status table.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from contact_manager_api.app.core.errors import ContactError

ERROR_STATUS = {
    "ValidationError": 422,
    "NotFoundError": status.HTTP_404_NOT_FOUND,
    "ConflictError": status.HTTP_409_CONFLICT,
    "PersistenceError": status.HTTP_503_SERVICE_UNAVAILABLE,
    "UnknownError": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error_type: str) -> int:
    return ERROR_STATUS.get(error_type, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def contact_error_handler(request: Request, exc: ContactError) -> JSONResponse:
    return JSONResponse(status_code=status_for(type(exc).__name__), content={"detail": exc.message})
