# tests/test_contact_schema.py
import pytest

from contact_manager_api.app.core.errors import ValidationError
from contact_manager_api.app.schemas.contact import (
    MAX_CONTACT_ID,
    validate_contact_id,
    validate_create,
    validate_update,
)


def test_validate_create_accepts_minimal_contact():
    payload = validate_create({"email": "ann@acme.io", "name": "Ann"})
    assert payload.email == "ann@acme.io"
    assert payload.name == "Ann"
    assert payload.phone is None
    assert payload.company is None


def test_validate_create_ignores_unknown_fields():
    payload = validate_create({"email": "ann@acme.io", "name": "Ann", "id": 99, "role": "admin"})
    assert "id" not in payload.model_dump()
    assert "role" not in payload.model_dump()


def test_validate_create_reports_every_invalid_field():
    with pytest.raises(ValidationError) as exc_info:
        validate_create({"email": "not-an-email", "name": "A"})
    err = exc_info.value
    assert err.field_errors == {
        "email": "Invalid email address",
        "name": "Name must be at least 2 characters",
    }
    assert err.message == "email: Invalid email address; name: Name must be at least 2 characters"


def test_validate_create_requires_email_and_name():
    with pytest.raises(ValidationError) as exc_info:
        validate_create({"phone": "555-1000"})
    assert exc_info.value.field_errors == {
        "email": "Email is required",
        "name": "Name is required",
    }


def test_validate_create_rejects_non_string_values():
    with pytest.raises(ValidationError) as exc_info:
        validate_create({"email": "ann@acme.io", "name": "Ann", "phone": 5551000})
    assert exc_info.value.field_errors == {"phone": "Phone must be a string"}


def test_validate_update_empty_payload_is_noop():
    payload = validate_update({})
    assert payload.model_dump(exclude_unset=True) == {}


def test_validate_update_only_checks_present_fields():
    payload = validate_update({"phone": "555-1000", "name": None})
    assert payload.model_dump(exclude_unset=True) == {"phone": "555-1000"}


def test_validate_update_rejects_invalid_present_field():
    with pytest.raises(ValidationError) as exc_info:
        validate_update({"email": "nope", "company": "Acme"})
    assert exc_info.value.field_errors == {"email": "Invalid email address"}


@pytest.mark.parametrize("raw,expected", [(1, 1), ("42", 42), (" 7 ", 7), (MAX_CONTACT_ID, MAX_CONTACT_ID)])
def test_validate_contact_id_accepts_positive_integers(raw, expected):
    assert validate_contact_id(raw) == expected


@pytest.mark.parametrize("raw", [0, -3, "abc", "", None, True, 1.5, "²", "٣x", MAX_CONTACT_ID + 1, str(MAX_CONTACT_ID + 1)])
def test_validate_contact_id_rejects_everything_else(raw):
    with pytest.raises(ValidationError) as exc_info:
        validate_contact_id(raw)
    assert "id" in exc_info.value.field_errors
