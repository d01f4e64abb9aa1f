"""Dispatcher de transações da API Cielo E-commerce.

Valida argumentos e payloads localmente, monta o endpoint a partir do
template, chama o transporte e normaliza a resposta em OperationResult.
Nenhuma operação lança exceção para o chamador.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cielo.config.logging import mask_card_number
from cielo.constants import TransactionKind
from cielo.protocols import TransportError
from cielo.services.paths import (
    AMOUNT_TOKEN,
    DEFAULT_TEMPLATES,
    PAYMENT_ID_TOKEN,
    EndpointTemplates,
    encode_url_args,
    substitute,
)
from cielo.services.results import (
    ErrorInvalidArgument,
    ErrorTransport,
    ErrorValidation,
    OperationResult,
    map_response,
)
from cielo.validators import is_valid_guid, validate

if TYPE_CHECKING:
    from cielo.protocols import HttpMethod, TransportProtocol

logger = logging.getLogger(__name__)

INVALID_GUID = "Invalid GUID"
PAYMENT_ID_NOT_STRING = "payment_id must be a string"
PARAMS_NOT_MAPPING = "params must be a mapping"
INVALID_AMOUNT = "amount must be a non-negative integer"
UNSUPPORTED_KIND = "unsupported transaction kind"


class TransactionDispatcher:
    """Orquestra criação, captura, cancelamento e desativação de vendas.

    Args:
        transport: Implementação de TransportProtocol
        templates: Templates de endpoint (padrão: endpoints da Cielo)

    Example:
        dispatcher = TransactionDispatcher(create_cielo_http_client())
        result = dispatcher.capture("26e5da86-d975-4e2f-aa25-862b5a43e9f4")
    """

    def __init__(
        self,
        transport: TransportProtocol,
        templates: EndpointTemplates = DEFAULT_TEMPLATES,
    ) -> None:
        self._transport = transport
        self._templates = templates

    def create(self, kind: TransactionKind | str, payload: Any) -> OperationResult:
        """Cria uma venda se o payload satisfaz as regras do tipo.

        Returns:
            ErrorValidation com a árvore de erros, ou o resultado do POST.
        """
        try:
            kind = TransactionKind(kind)
        except ValueError:
            return ErrorInvalidArgument(UNSUPPORTED_KIND)

        errors = validate(kind, payload)
        if errors:
            logger.info(
                "cielo_payload_rejected",
                extra={"operation": "create", "kind": str(kind)},
            )
            return ErrorValidation(errors)

        logger.info(
            "cielo_sale_requested",
            extra={
                "kind": str(kind),
                "merchant_order_id": payload["merchant_order_id"],
                "card": mask_card_number(_card_number(payload["payment"])),
            },
        )
        return self._send("create", "POST", self._templates.create, payload)

    def capture(
        self,
        payment_id: Any,
        params: Mapping[str, Any] | None = None,
    ) -> OperationResult:
        """Captura uma venda autorizada, total ou parcialmente.

        O valor parcial vai apenas na query string (`?amount=5000`);
        o PUT é enviado sem corpo.

        Args:
            payment_id: PaymentId (GUID) da venda
            params: Argumentos de query opcionais (ex: {"amount": 5000});
                `amount`, se presente, deve ser inteiro não negativo
        """
        invalid = _check_payment_id(payment_id, "capture")
        if invalid:
            return invalid
        if params is not None and not isinstance(params, Mapping):
            return ErrorInvalidArgument(PARAMS_NOT_MAPPING)
        if params and "amount" in params and not _is_valid_amount(params["amount"]):
            return ErrorInvalidArgument(INVALID_AMOUNT)

        path = substitute(self._templates.capture, [(PAYMENT_ID_TOKEN, payment_id)])
        return self._send("capture", "PUT", encode_url_args(path, params), None)

    def cancel(self, payment_id: Any, amount: Any = None) -> OperationResult:
        """Cancela uma venda; com `amount`, o cancelamento é parcial."""
        invalid = _check_payment_id(payment_id, "cancel")
        if invalid:
            return invalid

        if amount is None:
            path = substitute(self._templates.cancel, [(PAYMENT_ID_TOKEN, payment_id)])
        else:
            if not _is_valid_amount(amount):
                return ErrorInvalidArgument(INVALID_AMOUNT)
            path = substitute(
                self._templates.cancel_partial,
                [(PAYMENT_ID_TOKEN, payment_id), (AMOUNT_TOKEN, amount)],
            )
        return self._send("cancel", "PUT", path, None)

    def deactivate_recurrent(self, payment_id: Any) -> OperationResult:
        """Desativa uma recorrência pelo RecurrentPaymentId."""
        invalid = _check_payment_id(payment_id, "deactivate_recurrent")
        if invalid:
            return invalid

        path = substitute(
            self._templates.deactivate_recurrent,
            [(PAYMENT_ID_TOKEN, payment_id)],
        )
        return self._send("deactivate_recurrent", "PUT", path, None)

    def _send(
        self,
        operation: str,
        method: HttpMethod,
        path: str,
        body: Mapping[str, Any] | None,
    ) -> OperationResult:
        try:
            response = self._transport.send(method, path, body)
        except TransportError as exc:
            logger.warning(
                "cielo_transport_failed",
                extra={"operation": operation, "method": method, "reason": exc.reason},
            )
            return ErrorTransport(exc.reason)

        result = map_response(response)
        logger.info(
            "cielo_operation_finished",
            extra={
                "operation": operation,
                "method": method,
                "status_code": response.status,
                "outcome": type(result).__name__,
            },
        )
        return result


def _card_number(payment: Mapping[str, Any]) -> Any:
    card = payment.get("credit_card") or payment.get("debit_card") or {}
    return card.get("card_number")


def _is_valid_amount(amount: Any) -> bool:
    return isinstance(amount, int) and not isinstance(amount, bool) and amount >= 0


def _check_payment_id(payment_id: Any, operation: str) -> ErrorInvalidArgument | None:
    if not isinstance(payment_id, str):
        return ErrorInvalidArgument(PAYMENT_ID_NOT_STRING)
    if not is_valid_guid(payment_id):
        logger.info("cielo_invalid_guid", extra={"operation": operation})
        return ErrorInvalidArgument(INVALID_GUID)
    return None
