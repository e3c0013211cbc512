"""
Error taxonomy shared by the validator, the service and the action layer.

Every error carries a human-readable ``message`` that is safe to show
to end users.  Store internals (SQL, driver messages) never end up in
it; they are logged instead.
"""

from typing import Dict, Optional


class ContactError(Exception):
    """Base class for all contact errors."""

    default_message = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ContactError):
    """One or more submitted fields are invalid.

    ``field_errors`` maps each invalid field to its reason.  The
    message lists all of them, not just the first.
    """

    def __init__(self, field_errors: Dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        message = "; ".join(f"{field}: {reason}" for field, reason in self.field_errors.items())
        super().__init__(message or "Invalid input")


class NotFoundError(ContactError):
    """The targeted contact does not exist."""

    def __init__(self, contact_id: Optional[int] = None) -> None:
        self.contact_id = contact_id
        if contact_id is None:
            super().__init__("Contact not found")
        else:
            super().__init__(f"Contact {contact_id} not found")


class ConflictError(ContactError):
    """A uniqueness constraint was violated."""

    default_message = "A contact with this email already exists"


class PersistenceError(ContactError):
    """Any other store-level fault, e.g. the database is unreachable."""

    default_message = "The contact store is currently unavailable"


class UnknownError(ContactError):
    """Fallback for failures that match no known kind."""
