"""Filters e helpers de logging sem dados de cartão.

Campos injetados pelo filter:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço que consome o SDK
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Dígitos visíveis no início e no fim do cartão mascarado (padrão PCI)
_VISIBLE_PREFIX = 6
_VISIBLE_SUFFIX = 4


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via `extra`, o valor é preservado.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


def mask_card_number(card_number: object) -> str:
    """Mascara número de cartão para exibição em logs.

    Mantém os 6 primeiros e os 4 últimos dígitos, como a própria Cielo
    devolve nas respostas (ex: "455187******0183"). Valores curtos demais
    ou que não são string são mascarados por completo.

    Args:
        card_number: Número do cartão (qualquer tipo vindo do payload).

    Returns:
        Representação segura para logs.
    """
    if not isinstance(card_number, str):
        return "***"
    digits = card_number.strip()
    if len(digits) <= _VISIBLE_PREFIX + _VISIBLE_SUFFIX:
        return "*" * len(digits)
    hidden = len(digits) - _VISIBLE_PREFIX - _VISIBLE_SUFFIX
    return f"{digits[:_VISIBLE_PREFIX]}{'*' * hidden}{digits[-_VISIBLE_SUFFIX:]}"
