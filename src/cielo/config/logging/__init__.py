"""Logging estruturado do cliente Cielo.

Uso, na inicialização da aplicação que consome o SDK:

    from cielo.config.logging import configure_logging

    configure_logging(level="INFO", service_name="loja_checkout")

Nunca logar número de cartão, código de segurança ou MerchantKey;
use `mask_card_number` para exibir cartões.
"""

from cielo.config.logging.config import SDK_LOGGER_NAME, configure_logging, get_logger
from cielo.config.logging.filters import CorrelationIdFilter, mask_card_number
from cielo.config.logging.formatters import (
    FIELD_RENAME_MAP,
    OPERATION_FIELDS,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "OPERATION_FIELDS",
    "REQUIRED_LOG_FIELDS",
    "SDK_LOGGER_NAME",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "mask_card_number",
]
