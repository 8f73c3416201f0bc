"""Command: explain the timestamp classification of one field."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from tznorm.commands._base import TzCommand

if TYPE_CHECKING:
    from tznorm.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tznorm classify foo 2025-06-01T12:00:00.000Z
  tznorm classify created_at "01-02-2025 10:00:00"
  tznorm classify name "Dubai Festival City Mall"
  tznorm classify --raw-json count 42""",
)
@click.argument("key")
@click.argument("value")
@click.option("--raw-json", is_flag=True, help="Parse VALUE as a JSON literal.")
@click.pass_obj
def classify(app: AppContext, key: str, value: str, raw_json: bool) -> None:
    """Decide whether VALUE under KEY is a timestamp candidate."""
    from tznorm.services.payload import PayloadService
    from tznorm.services.result import failure

    parsed: Any = value
    if raw_json:
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as exc:
            app.emit(failure("classify", "INVALID_JSON", f"VALUE is not JSON: {exc.msg}"))
            return
    app.emit(PayloadService(app.session).classify(key, parsed))
