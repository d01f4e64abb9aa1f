"""Formatter JSON para os eventos do SDK."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

# Campos de contexto de operação; ausentes no registro saem como null
OPERATION_FIELDS = ("operation", "outcome")


def create_json_formatter() -> JsonFormatter:
    """Formatter com os campos obrigatórios e os de operação.

    Ex: {"level": "INFO", "logger": "cielo.services.dispatcher",
    "message": "cielo_operation_finished", "operation": "capture",
    "outcome": "Ok", "status_code": 201, ...}
    """
    fields = REQUIRED_LOG_FIELDS + OPERATION_FIELDS
    return JsonFormatter(
        " ".join(f"%({field})s" for field in fields),
        rename_fields=FIELD_RENAME_MAP,
    )
