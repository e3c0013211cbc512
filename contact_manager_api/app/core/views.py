"""
View invalidation bookkeeping.

Rendered views (the contact listing, a single contact page) are
identified by path.  After a successful mutation the action layer
calls :meth:`ViewInvalidator.invalidate` for every affected path; a
front end compares the revision it rendered with :meth:`revision` to
decide whether to re-fetch.  Invalidation is best effort and is not
part of the correctness contract of the mutation itself.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class ViewInvalidator:
    """In-process registry of view revisions."""

    def __init__(self) -> None:
        self._revisions: Dict[str, int] = {}
        self._invalidated_at: Dict[str, datetime] = {}

    async def invalidate(self, view_path: str) -> None:
        """Mark ``view_path`` stale by bumping its revision."""
        self._revisions[view_path] = self._revisions.get(view_path, 0) + 1
        self._invalidated_at[view_path] = datetime.now(timezone.utc)
        logger.debug("Invalidated view %s (revision %s)", view_path, self._revisions[view_path])

    def revision(self, view_path: str) -> int:
        """Return the current revision of a view; 0 if never invalidated."""
        return self._revisions.get(view_path, 0)

    def invalidated_at(self, view_path: str) -> Optional[datetime]:
        return self._invalidated_at.get(view_path)

    def is_stale(self, view_path: str, seen_revision: int) -> bool:
        """True if the view changed since ``seen_revision`` was rendered."""
        return self.revision(view_path) > seen_revision
