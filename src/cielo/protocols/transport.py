"""Contrato do transporte HTTP consumido pelo dispatcher.

URL base, headers de autenticação e serialização ficam a cargo do
transporte; o dispatcher só conhece método, path e corpo.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal, Protocol

HttpMethod = Literal["GET", "POST", "PUT"]


@dataclass(frozen=True)
class TransportResponse:
    """Resposta crua do gateway: status HTTP e corpo já decodificado."""

    status: int
    body: Any


class TransportError(Exception):
    """Falha de transporte (conexão, timeout, resposta ilegível).

    A mensagem é opaca e não carrega dados sensíveis.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class TransportProtocol(Protocol):
    """Contrato mínimo para transporte de requisições à API."""

    def send(
        self,
        method: HttpMethod,
        path: str,
        body: Mapping[str, Any] | None,
    ) -> TransportResponse: ...
