"""
Uniform result returned by every contact action.

On success the payload is ``{"success": true, "data": ...}``; on
failure ``{"success": false, "error": "..."}``.  ``error_type`` names
the error class for the HTTP layer and is never serialized.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..core.errors import ContactError
from .contact import ContactRead


class ActionResult(BaseModel):
    success: bool
    data: Optional[ContactRead] = None
    error: Optional[str] = None
    error_type: Optional[str] = Field(None, exclude=True)

    @classmethod
    def ok(cls, data: Optional[ContactRead] = None) -> "ActionResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ContactError) -> "ActionResult":
        return cls(success=False, error=error.message, error_type=type(error).__name__)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the discriminated success/failure shape."""
        if self.success:
            return {"success": True, "data": self.data.model_dump() if self.data else None}
        return {"success": False, "error": self.error}
