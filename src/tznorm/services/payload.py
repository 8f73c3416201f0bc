"""PayloadService — classification and whole-document conversion."""

from __future__ import annotations

import json
from typing import Any

from tznorm.domain.classifier import explain
from tznorm.domain.types import ConversionDirection, FormatMode, JSONValue
from tznorm.services.base import BaseService
from tznorm.services.result import ServiceResult, failure
from tznorm.services.transformer import transform


def _count_changes(before: JSONValue, after: JSONValue) -> int:
    """Number of leaves that differ between two same-shaped trees."""
    if isinstance(before, dict) and isinstance(after, dict):
        return sum(_count_changes(before[k], after[k]) for k in before)
    if isinstance(before, list) and isinstance(after, list):
        return sum(_count_changes(b, a) for b, a in zip(before, after, strict=True))
    return int(before != after)


class PayloadService(BaseService):
    """Classify single fields and convert JSON documents."""

    def classify(self, key: str, value: Any) -> ServiceResult:
        """Report whether *value* under *key* would be treated as a timestamp."""
        decision = explain(key, value, self._session.conventions)
        return ServiceResult(
            ok=True,
            op="classify",
            data={
                "key": key,
                "value": value,
                "matched": decision.matched,
                "reason": str(decision.reason),
            },
        )

    def convert(
        self,
        document: str,
        direction: ConversionDirection | str,
        *,
        display_mode: FormatMode | str | None = None,
    ) -> ServiceResult:
        """Parse *document* as JSON and convert its timestamp leaves."""
        op = "convert"
        try:
            payload = json.loads(document)
        except json.JSONDecodeError as exc:
            msg = f"Input is not valid JSON: {exc.msg}"
            return failure(op, "INVALID_JSON", msg, line=exc.lineno)

        direction = ConversionDirection(direction)
        if display_mode is not None and direction is ConversionDirection.TO_UTC:
            return failure(op, "INVALID_INPUT", "A display mode only applies to fromUTC conversion")
        if display_mode is None and direction is ConversionDirection.FROM_UTC:
            display_mode = self._session.transport_config.response_mode

        tz = self._session.timezone
        converted = transform(
            payload,
            direction,
            tz,
            conventions=self._session.conventions,
            display_mode=display_mode,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"payload": converted},
            meta=self._meta(direction=str(direction), converted=_count_changes(payload, converted)),
        )
