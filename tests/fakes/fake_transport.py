"""Fake de transporte para testes deterministas do dispatcher."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from cielo.protocols import TransportError, TransportResponse


@dataclass(frozen=True)
class SentRequest:
    method: str
    path: str
    body: Mapping[str, Any] | None


class FakeTransport:
    """Implementa TransportProtocol sem IO.

    Por padrão ecoa o corpo recebido com status 200. `respond_with`
    fixa uma resposta; `fail_with` faz o envio levantar TransportError.
    """

    def __init__(self) -> None:
        self.calls: list[SentRequest] = []
        self._response: TransportResponse | None = None
        self._error: str | None = None

    def respond_with(self, status: int, body: Any) -> None:
        self._response = TransportResponse(status=status, body=body)

    def fail_with(self, reason: str) -> None:
        self._error = reason

    def send(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any] | None,
    ) -> TransportResponse:
        self.calls.append(SentRequest(method=method, path=path, body=body))
        if self._error is not None:
            raise TransportError(self._error)
        if self._response is not None:
            return self._response
        return TransportResponse(status=200, body=body)

    @property
    def last_call(self) -> SentRequest:
        return self.calls[-1]
