"""BaseService — foundation for the ServiceResult-returning services.

Every service receives a :class:`TimeSession` at construction time and
reads the active zone through it, so a preference change picked up by the
session is visible to the next call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tznorm.services.session import TimeSession


class BaseService:
    """Base for service-layer classes.

    Subclasses expose CLI-facing operations and wrap the pure layer's
    results (or explicit-input errors) in a ServiceResult.
    """

    def __init__(self, session: TimeSession) -> None:
        self._session = session

    def _meta(self, **extra: Any) -> dict[str, Any]:
        """Metadata attached to every result: the zone that was in effect."""
        return {"timezone": self._session.timezone, **extra}
