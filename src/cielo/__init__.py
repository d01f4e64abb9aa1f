"""Cliente Python para a API Cielo E-commerce.

Valida payloads localmente antes de qualquer chamada de rede e normaliza
todas as respostas em OperationResult (Ok, ErrorValidation,
ErrorInvalidArgument, ErrorHttp, ErrorTransport).
"""

import logging

from cielo.constants import PaymentType, RecurrencyInterval, TransactionKind
from cielo.protocols import TransportError, TransportProtocol, TransportResponse
from cielo.services import (
    EndpointTemplates,
    ErrorHttp,
    ErrorInvalidArgument,
    ErrorTransport,
    ErrorValidation,
    GatewayError,
    Ok,
    OperationResult,
    TransactionDispatcher,
)
from cielo.transaction import (
    bankslip,
    cancel_payment,
    capture,
    credit,
    deactivate_recurrent_payment,
    debit,
    get_default_dispatcher,
    recurrent,
)
from cielo.validators import is_valid_guid, validate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EndpointTemplates",
    "ErrorHttp",
    "ErrorInvalidArgument",
    "ErrorTransport",
    "ErrorValidation",
    "GatewayError",
    "Ok",
    "OperationResult",
    "PaymentType",
    "RecurrencyInterval",
    "TransactionDispatcher",
    "TransactionKind",
    "TransportError",
    "TransportProtocol",
    "TransportResponse",
    "bankslip",
    "cancel_payment",
    "capture",
    "credit",
    "deactivate_recurrent_payment",
    "debit",
    "get_default_dispatcher",
    "is_valid_guid",
    "recurrent",
    "validate",
]
