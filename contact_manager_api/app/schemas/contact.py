"""
Pydantic schemas and validators for contact records.

``ContactCreate`` and ``ContactUpdate`` describe what callers may
submit; ``ContactRead`` is what the service returns.  The store owns
``id`` and the timestamps, so they only appear on the read schema.

``validate_create`` and ``validate_update`` wrap the models so that
callers get a :class:`~contact_manager_api.app.core.errors.ValidationError`
listing every invalid field with a readable reason instead of a raw
pydantic error.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, EmailStr, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import ValidationError

CONTACT_FIELDS = ("email", "name", "phone", "company")

_FIELD_MESSAGES = {
    "email": "Invalid email address",
    "name": "Name must be at least 2 characters",
}


class ContactCreate(BaseModel):
    """Schema for creating a new contact."""

    email: EmailStr = Field(..., examples=["ann@acme.io"])
    name: str = Field(..., min_length=2, examples=["Ann Lee"])
    phone: Optional[str] = Field(None, examples=["555-1000"])
    company: Optional[str] = Field(None, examples=["Acme"])


class ContactUpdate(BaseModel):
    """Schema for updating an existing contact.

    All fields are optional; only provided values will be updated.
    """

    email: Optional[EmailStr] = None
    name: Optional[str] = Field(None, min_length=2)
    phone: Optional[str] = None
    company: Optional[str] = None


class ContactRead(BaseModel):
    """Schema for reading a contact."""

    id: int
    email: str
    name: str
    phone: Optional[str] = None
    company: Optional[str] = None
    created_at: str
    updated_at: str

    model_config = {
        "from_attributes": True,
    }


def _reason(field: str, err: Dict[str, Any]) -> str:
    label = field.capitalize()
    if err["type"] == "missing" or (err["type"] == "string_type" and err.get("input") is None):
        return f"{label} is required"
    if err["type"] == "string_type":
        return f"{label} must be a string"
    return _FIELD_MESSAGES.get(field, err["msg"])


def _field_errors(exc: PydanticValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "__root__"
        # keep the first reason per field
        errors.setdefault(field, _reason(field, err))
    return errors


def validate_create(raw: Mapping[str, Any]) -> ContactCreate:
    """Validate a submission for a new contact.

    ``email`` and ``name`` are required, ``phone`` and ``company``
    optional; unknown keys are ignored.  Raises ``ValidationError``
    naming every invalid field.
    """
    try:
        return ContactCreate.model_validate(dict(raw))
    except PydanticValidationError as exc:
        raise ValidationError(_field_errors(exc)) from None


def validate_update(raw: Mapping[str, Any]) -> ContactUpdate:
    """Validate a partial update.

    Same per-field rules as :func:`validate_create` but every field is
    optional.  ``None`` values are treated as absent, so an empty map
    is a valid no-op update.
    """
    present = {key: value for key, value in raw.items() if value is not None}
    try:
        return ContactUpdate.model_validate(present)
    except PydanticValidationError as exc:
        raise ValidationError(_field_errors(exc)) from None


# SQLite INTEGER is a signed 64-bit value.
MAX_CONTACT_ID = 2**63 - 1

_INVALID_ID = "Contact id must be a positive integer"


def validate_contact_id(raw: Any) -> int:
    """Coerce a record id from untrusted input to a positive integer
    that fits the store's INTEGER column."""
    if isinstance(raw, bool):
        raise ValidationError({"id": _INVALID_ID})
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isdecimal():
        try:
            value = int(raw.strip())
        except ValueError:
            raise ValidationError({"id": _INVALID_ID}) from None
    else:
        raise ValidationError({"id": _INVALID_ID})
    if value < 1 or value > MAX_CONTACT_ID:
        raise ValidationError({"id": _INVALID_ID})
    return value
