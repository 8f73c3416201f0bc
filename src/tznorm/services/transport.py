"""TransportAdapter — timezone conversion around a caller's HTTP send.

The adapter owns no network code.  It wraps a ``send(method, path, body)``
callable supplied by the transport collaborator: request bodies are
converted local to UTC before sending, response bodies UTC to local after
receiving, using the resolver's current zone each time.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tznorm.domain.types import JSONValue
    from tznorm.services.transformer import PayloadTransformer

type Send = Callable[[str, str, JSONValue], JSONValue]


class TransportAdapter:
    """Apply payload conversion to every request and response body."""

    def __init__(
        self,
        send: Send,
        transformer: PayloadTransformer,
        *,
        convert_responses: bool = True,
    ) -> None:
        self._send = send
        self._transformer = transformer
        self._convert_responses = convert_responses

    def request(self, method: str, path: str, body: JSONValue = None) -> JSONValue:
        outgoing = self._transformer.to_utc(body) if body is not None else None
        response = self._send(method.upper(), path, outgoing)
        if self._convert_responses and response is not None:
            return self._transformer.from_utc(response)
        return response

    def get(self, path: str) -> JSONValue:
        return self.request("GET", path)

    def post(self, path: str, body: JSONValue) -> JSONValue:
        return self.request("POST", path, body)

    def put(self, path: str, body: JSONValue) -> JSONValue:
        return self.request("PUT", path, body)

    def delete(self, path: str) -> JSONValue:
        return self.request("DELETE", path)
