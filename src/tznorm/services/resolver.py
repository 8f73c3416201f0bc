"""TimezoneResolver — the single active zone for one authenticated session.

Resolution order:

1. The cached resolution, unless :meth:`TimezoneResolver.invalidate` ran.
2. The user's persisted preference, if authenticated and set.
3. The runtime environment's detected local zone.
4. The configured fallback (``UTC`` by default).

INVARIANT: :meth:`resolve` always returns a valid IANA identifier and never
raises.  A stale or mistyped preference falls through to step 3.

The cache is the only mutable state in the layer.  It is guarded by a lock
so one resolver may be shared across threads serving the same session;
separate sessions get separate resolvers.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from tznorm.domain.zones import UTC_ZONE, detect_local_timezone, is_valid_timezone

logger = logging.getLogger(__name__)

type PreferenceSource = Callable[[], str | None]
type ZoneDetector = Callable[[], str | None]


def _no_preference() -> str | None:
    return None


class TimezoneResolver:
    """Resolve and cache the active timezone for a session.

    Args:
        preference: Returns the user's stored zone, or None when the user is
            not authenticated or has not set one.  Called on every
            uncached resolution; it must be a cheap local read.
        detector: Returns the environment's zone, or None.
        fallback: Last-resort identifier.  An invalid value is replaced
            with ``UTC``.
        detect_local: Skip environment detection when False.
    """

    def __init__(
        self,
        preference: PreferenceSource = _no_preference,
        *,
        detector: ZoneDetector = detect_local_timezone,
        fallback: str = UTC_ZONE,
        detect_local: bool = True,
    ) -> None:
        self._preference = preference
        self._detector = detector
        self._detect_local = detect_local
        if not is_valid_timezone(fallback):
            logger.warning("Fallback timezone %r is invalid, using %s", fallback, UTC_ZONE)
            fallback = UTC_ZONE
        self._fallback = fallback
        self._cached: str | None = None
        self._lock = threading.Lock()

    @classmethod
    def fixed(cls, tz: str) -> TimezoneResolver:
        """A resolver whose preference is always *tz* (no detection)."""
        return cls(lambda: tz, detect_local=False)

    @property
    def cached(self) -> str | None:
        """The cached resolution, or None if the next call will re-derive."""
        return self._cached

    def resolve(self) -> str:
        """Return the active timezone identifier."""
        cached = self._cached
        if cached is not None:
            return cached
        with self._lock:
            if self._cached is None:
                self._cached = self._derive()
            return self._cached

    def invalidate(self) -> None:
        """Drop the cached resolution.

        The profile collaborator calls this after a successful preference
        update so the next :meth:`resolve` sees the new value.
        """
        with self._lock:
            self._cached = None

    def _read_preference(self) -> str | None:
        try:
            return self._preference()
        except Exception:
            logger.warning("Timezone preference lookup failed", exc_info=True)
            return None

    def _derive(self) -> str:
        preference = self._read_preference()
        if preference:
            if is_valid_timezone(preference):
                logger.debug("Resolved timezone from preference: %s", preference)
                return preference.strip()
            logger.warning("Ignoring invalid timezone preference %r", preference)

        if self._detect_local:
            detected = self._detector()
            if detected and is_valid_timezone(detected):
                logger.debug("Resolved timezone from environment: %s", detected)
                return detected

        logger.info("No timezone preference or local zone, using %s", self._fallback)
        return self._fallback
