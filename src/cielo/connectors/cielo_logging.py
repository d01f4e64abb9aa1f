"""Helpers de logging para a API Cielo (sem dados de cartão ou credenciais)."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def log_gateway_error(method: str, path: str, status_code: int, body: Any) -> None:
    """Loga resposta de erro registrando apenas os códigos retornados."""
    codes = []
    if isinstance(body, list):
        codes = [item.get("code") for item in body if isinstance(item, dict)]
    logger.warning(
        "cielo_gateway_error",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "error_codes": codes,
        },
    )


def log_success(method: str, path: str, status_code: int) -> None:
    logger.debug(
        "cielo_request_ok",
        extra={"method": method, "path": path, "status_code": status_code},
    )
