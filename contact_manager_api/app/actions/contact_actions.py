"""
Action boundary for contact mutations.

Each action adapts one raw submission (browser form data or a JSON
body) into one validated ``ContactService`` call and always returns an
:class:`ActionResult`; no exception escapes.  The protocol per call is:

1. validate the submission, stopping with a failure result on error
   without touching the service;
2. execute the service operation and map its outcome;
3. on success, invalidate the affected views (the contact listing and,
   for update and delete, the page of that contact).

Invalidation runs after the result is final; a failing notifier is
logged and does not turn a successful mutation into a failure.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, Mapping, Optional

from contact_manager_api.app.core.errors import ContactError, UnknownError, ValidationError
from contact_manager_api.app.core.views import ViewInvalidator
from contact_manager_api.app.schemas.action import ActionResult
from contact_manager_api.app.schemas.contact import (
    CONTACT_FIELDS,
    ContactRead,
    validate_contact_id,
    validate_create,
    validate_update,
)
from contact_manager_api.app.services.contact_service import ContactService

logger = logging.getLogger(__name__)

CONTACTS_VIEW = "/contacts"


def contact_view(contact_id: int) -> str:
    """Path of the page showing a single contact."""
    return f"{CONTACTS_VIEW}/{contact_id}"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def extract_submission(
    form: Mapping[str, Any],
    *,
    optional: Iterable[str] = CONTACT_FIELDS,
) -> Dict[str, Any]:
    """Pick the contact fields out of a raw form.

    Blank values of the fields listed in ``optional`` are dropped so
    they count as absent; other fields are passed through as submitted
    and left to the validator.
    """
    optional = set(optional)
    submission: Dict[str, Any] = {}
    for field in CONTACT_FIELDS:
        value = form.get(field)
        if field in optional and _is_blank(value):
            continue
        submission[field] = value
    return submission


class ContactActions:
    """Validated, outcome-normalizing entry points for contact mutations."""

    def __init__(self, service: ContactService, views: ViewInvalidator) -> None:
        self.service = service
        self.views = views

    async def create_contact(self, form: Mapping[str, Any]) -> ActionResult:
        try:
            payload = validate_create(extract_submission(form, optional=("phone", "company")))
        except ValidationError as exc:
            return ActionResult.fail(exc)
        return await self._execute(
            "create", lambda: self.service.create(payload), (CONTACTS_VIEW,)
        )

    async def update_contact(self, contact_id: Any, form: Mapping[str, Any]) -> ActionResult:
        try:
            contact_id = validate_contact_id(contact_id)
            payload = validate_update(extract_submission(form))
        except ValidationError as exc:
            return ActionResult.fail(exc)
        return await self._execute(
            "update",
            lambda: self.service.update(contact_id, payload),
            (CONTACTS_VIEW, contact_view(contact_id)),
        )

    async def delete_contact(self, contact_id: Any) -> ActionResult:
        try:
            contact_id = validate_contact_id(contact_id)
        except ValidationError as exc:
            return ActionResult.fail(exc)
        return await self._execute(
            "delete",
            lambda: self.service.delete(contact_id),
            (CONTACTS_VIEW, contact_view(contact_id)),
        )

    async def _execute(
        self,
        action: str,
        operation: Callable[[], Awaitable[Optional[ContactRead]]],
        views: Iterable[str],
    ) -> ActionResult:
        try:
            data = await operation()
        except ContactError as exc:
            logger.info("Contact %s failed: %s", action, exc.message)
            return ActionResult.fail(exc)
        except Exception:
            logger.exception("Unexpected error during contact %s", action)
            return ActionResult.fail(UnknownError())

        result = ActionResult.ok(data)
        await self._invalidate(views)
        return result

    async def _invalidate(self, views: Iterable[str]) -> None:
        for view_path in views:
            try:
                await self.views.invalidate(view_path)
            except Exception:
                logger.warning("Failed to invalidate view %s", view_path, exc_info=True)
