"""
Contact endpoints for API v1.

Reads go straight to ``ContactService``; mutations go through
``ContactActions`` so that every create, update and delete is
validated, returns the uniform ``{success, data|error}`` body and
invalidates the affected views.  Mutation endpoints accept either a
JSON object or browser form data.
"""

import json
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from fastapi.responses import JSONResponse

from contact_manager_api.app.actions.contact_actions import ContactActions
from contact_manager_api.app.api.deps import get_contact_actions, get_contact_service
from contact_manager_api.app.api.errors import status_for
from contact_manager_api.app.schemas.action import ActionResult
from contact_manager_api.app.schemas.contact import MAX_CONTACT_ID, ContactRead
from contact_manager_api.app.services.contact_service import ContactService


router = APIRouter()

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

# Ids outside this range cannot exist in the store.
ContactId = Path(..., ge=1, le=MAX_CONTACT_ID)


class SubmissionError(Exception):
    pass


async def read_submission(request: Request) -> Dict[str, Any]:
    """Return the request body as a field map (form data or JSON object)."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return dict(form)
    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise SubmissionError("Request body must be valid JSON") from exc
    if not isinstance(data, dict):
        raise SubmissionError("Request body must be a JSON object")
    return data


def _respond(result: ActionResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    code = success_status if result.success else status_for(result.error_type or "")
    return JSONResponse(status_code=code, content=result.to_payload())


def _bad_submission(exc: SubmissionError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"success": False, "error": str(exc)},
    )


@router.get("/", response_model=List[ContactRead])
async def list_contacts(service: ContactService = Depends(get_contact_service)) -> List[ContactRead]:
    """Return all contacts, most recently created first."""
    return await service.find_all()


@router.get("/count")
async def count_contacts(service: ContactService = Depends(get_contact_service)) -> Dict[str, int]:
    """Return the total number of contacts."""
    return {"count": await service.count()}


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(
    contact_id: int = ContactId,
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    """Retrieve a single contact by ID.

    Returns HTTP 404 if the contact is not found.
    """
    contact = await service.find_by_id(contact_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return contact


@router.post("/")
async def create_contact(
    request: Request,
    actions: ContactActions = Depends(get_contact_actions),
) -> JSONResponse:
    """Create a contact from a JSON body or form submission."""
    try:
        submission = await read_submission(request)
    except SubmissionError as exc:
        return _bad_submission(exc)
    result = await actions.create_contact(submission)
    return _respond(result, success_status=status.HTTP_201_CREATED)


@router.patch("/{contact_id}")
async def update_contact(
    request: Request,
    contact_id: int = ContactId,
    actions: ContactActions = Depends(get_contact_actions),
) -> JSONResponse:
    """Apply a partial update; omitted fields are left unchanged."""
    try:
        submission = await read_submission(request)
    except SubmissionError as exc:
        return _bad_submission(exc)
    result = await actions.update_contact(contact_id, submission)
    return _respond(result)


@router.delete("/{contact_id}")
async def delete_contact(
    contact_id: int = ContactId,
    actions: ContactActions = Depends(get_contact_actions),
) -> JSONResponse:
    """Delete a contact permanently."""
    result = await actions.delete_contact(contact_id)
    return _respond(result)
