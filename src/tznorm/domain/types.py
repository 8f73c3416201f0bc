"""Display modes, conversion directions, and the JSON value shape.

JSON payloads arrive already parsed, so the transformer only has to handle
the six JSON value kinds.  ``JSONValue`` names that closed set for type
checkers; ``JSONObject`` and ``JSONArray`` are the two recursive cases.
"""

from __future__ import annotations

from enum import StrEnum

type JSONScalar = str | int | float | bool | None
type JSONObject = dict[str, JSONValue]
type JSONArray = list[JSONValue]
type JSONValue = JSONScalar | JSONObject | JSONArray


class FormatMode(StrEnum):
    """Fixed display patterns for rendering an instant."""

    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    FULL = "full"
    RELATIVE = "relative"


class ConversionDirection(StrEnum):
    """Which way a payload tree is converted."""

    TO_UTC = "toUTC"
    FROM_UTC = "fromUTC"
