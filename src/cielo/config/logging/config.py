"""Logging JSON do SDK.

Só o logger `cielo` é configurado; o root logger e os handlers da
aplicação que consome o SDK ficam intactos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cielo.config.logging.filters import CorrelationIdFilter
from cielo.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "cielo_client"
SDK_LOGGER_NAME = "cielo"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """Anexa um handler JSON ao logger `cielo` e o retorna.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem distinção de caixa).
        service_name: Valor do campo `service`.
        correlation_id_getter: Retorna o correlation_id do contexto atual.
        propagate: Se True, os eventos também sobem para o root logger.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(level_upper)
    sdk_logger.propagate = propagate
    # Chamadas repetidas substituem o handler anterior
    sdk_logger.handlers = [handler]
    return sdk_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
