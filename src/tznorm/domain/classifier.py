"""Timestamp candidate classification for JSON object entries.

Ordered decision policy, first match wins:

1. Non-string values are never timestamp leaves.
2. A strict ISO-8601 instant (``Z`` or explicit offset) matches whatever
   the key is called.
3. A key that follows a timestamp naming convention matches only if its
   value also parses as a real calendar date under a secondary pattern.
4. Everything else is left alone.

False negatives are preferred to false positives: an untouched string is
always safer than a corrupted one.  The classifier is pure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tznorm.domain.instants import is_strict_iso, is_wall_time


class Reason(StrEnum):
    """Why a (key, value) pair was or was not classified as a timestamp."""

    NOT_STRING = "not_string"
    STRICT_ISO = "strict_iso"
    KEY_CONVENTION = "key_convention"
    UNPARSEABLE = "unparseable"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class Classification:
    """Tagged classification decision."""

    matched: bool
    reason: Reason

    def __bool__(self) -> bool:
        return self.matched


@dataclass(frozen=True)
class KeyConventions:
    """Closed set of key-name rules that mark a field as timestamp-bearing.

    All comparisons are case-insensitive.
    """

    suffixes: tuple[str, ...] = ("_at", "_date")
    substrings: tuple[str, ...] = ("timestamp", "date")
    exact_names: frozenset[str] = frozenset(
        {
            "date",
            "date_time",
            "created_at",
            "updated_at",
            "last_login_at",
            "next_run_at",
            "last_run_at",
            "started_at",
            "completed_at",
            "scheduled_at",
            "check_in_date",
            "check_out_date",
        }
    )

    def matches(self, key: str) -> bool:
        """Whether *key* follows one of the timestamp naming conventions."""
        name = key.lower()
        if name in self.exact_names:
            return True
        if any(name.endswith(suffix) for suffix in self.suffixes):
            return True
        return any(part in name for part in self.substrings)


DEFAULT_CONVENTIONS = KeyConventions()

_NOT_STRING = Classification(False, Reason.NOT_STRING)
_STRICT = Classification(True, Reason.STRICT_ISO)
_CONVENTION = Classification(True, Reason.KEY_CONVENTION)
_UNPARSEABLE = Classification(False, Reason.UNPARSEABLE)
_NO_MATCH = Classification(False, Reason.NO_MATCH)


def explain(
    key: str,
    value: object,
    conventions: KeyConventions = DEFAULT_CONVENTIONS,
) -> Classification:
    """Classify a (key, value) pair and report which rule decided it."""
    if not isinstance(value, str):
        return _NOT_STRING
    text = value.strip()
    if is_strict_iso(text):
        return _STRICT
    if not conventions.matches(key):
        return _NO_MATCH
    if is_wall_time(text):
        return _CONVENTION
    return _UNPARSEABLE


def classify(
    key: str,
    value: object,
    conventions: KeyConventions = DEFAULT_CONVENTIONS,
) -> bool:
    """Whether *value* under *key* is a timestamp candidate.

    Examples:
        >>> classify("foo", "2025-06-01T12:00:00.000Z")
        True
        >>> classify("name", "Dubai Festival City Mall")
        False
        >>> classify("created_at", "01-02-2025 10:00:00")
        True
    """
    return explain(key, value, conventions).matched
