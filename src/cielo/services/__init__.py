"""Serviços de orquestração de transações."""

from cielo.services.dispatcher import TransactionDispatcher
from cielo.services.paths import DEFAULT_TEMPLATES, EndpointTemplates
from cielo.services.results import (
    ErrorHttp,
    ErrorInvalidArgument,
    ErrorTransport,
    ErrorValidation,
    GatewayError,
    Ok,
    OperationResult,
)

__all__ = [
    "DEFAULT_TEMPLATES",
    "EndpointTemplates",
    "ErrorHttp",
    "ErrorInvalidArgument",
    "ErrorTransport",
    "ErrorValidation",
    "GatewayError",
    "Ok",
    "OperationResult",
    "TransactionDispatcher",
]
