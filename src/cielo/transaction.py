"""Transações de crédito, débito, boleto e recorrência na Cielo.

Funções de conveniência sobre um TransactionDispatcher padrão, criado na
primeira chamada a partir das variáveis de ambiente (CIELO_MERCHANT_ID,
CIELO_MERCHANT_KEY, CIELO_ENVIRONMENT).

Uso:
    import cielo

    result = cielo.credit({
        "merchant_order_id": "2014111703",
        "customer": {"name": "Comprador crédito simples"},
        "payment": {
            "type": "CreditCard",
            "amount": 15700,
            "installments": 1,
            "credit_card": {
                "card_number": "1234123412341231",
                "holder": "Teste Holder",
                "expiration_date": "12/2030",
                "security_code": "123",
                "brand": "Visa",
            },
        },
    })
    if result.is_ok:
        payment_id = result.payload["payment"]["payment_id"]

Referência: https://developercielo.github.io/manual/cielo-ecommerce
"""

from __future__ import annotations

import warnings
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from cielo.connectors import create_cielo_http_client
from cielo.constants import TransactionKind
from cielo.services import TransactionDispatcher

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cielo.services import OperationResult


@lru_cache(maxsize=1)
def get_default_dispatcher() -> TransactionDispatcher:
    """Dispatcher padrão sobre o cliente HTTP configurado pelo ambiente.

    Raises:
        ValueError: Se as credenciais Cielo não estão configuradas.
    """
    return TransactionDispatcher(create_cielo_http_client())


def credit(params: Any) -> OperationResult:
    """Cria uma venda no cartão de crédito."""
    return get_default_dispatcher().create(TransactionKind.CREDIT, params)


def debit(params: Any) -> OperationResult:
    """Cria uma venda no cartão de débito."""
    return get_default_dispatcher().create(TransactionKind.DEBIT, params)


def bankslip(params: Any) -> OperationResult:
    """Emite um boleto.

    Consulte a lista de providers integrados antes de usar:
    https://developercielo.github.io/manual/cielo-ecommerce#boleto
    """
    return get_default_dispatcher().create(TransactionKind.BANK_SLIP, params)


def recurrent(params: Any) -> OperationResult:
    """Cria uma venda recorrente.

    Deprecated: use `create(TransactionKind.RECURRENT, params)` de um
    TransactionDispatcher.
    """
    warnings.warn(
        "cielo.recurrent() is deprecated; use "
        "TransactionDispatcher.create(TransactionKind.RECURRENT, params)",
        DeprecationWarning,
        stacklevel=2,
    )
    return get_default_dispatcher().create(TransactionKind.RECURRENT, params)


def capture(payment_id: Any, params: Mapping[str, Any] | None = None) -> OperationResult:
    """Captura uma venda de crédito; `{"amount": n}` captura parcialmente."""
    return get_default_dispatcher().capture(payment_id, params)


def cancel_payment(payment_id: Any, amount: Any = None) -> OperationResult:
    """Cancela uma venda de cartão; com `amount`, cancela parcialmente."""
    return get_default_dispatcher().cancel(payment_id, amount)


def deactivate_recurrent_payment(recurrent_payment_id: Any) -> OperationResult:
    """Desativa uma recorrência."""
    return get_default_dispatcher().deactivate_recurrent(recurrent_payment_id)
