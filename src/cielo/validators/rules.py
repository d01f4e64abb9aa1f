"""Tabelas declarativas de regras por tipo de transação.

Cada tipo de transação é descrito por uma tupla de `FieldRule`; o walker
em `cielo.validators.walker` avalia qualquer tabela da mesma forma.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from cielo.constants import PaymentType, RecurrencyInterval, TransactionKind

FieldType = Literal["string", "integer", "boolean", "mapping", "date", "guid"]


@dataclass(frozen=True)
class FieldRule:
    """Regra de um campo do payload.

    Attributes:
        name: Chave do campo no objeto atual
        type: Tipo esperado do valor
        required: Campo obrigatório sempre
        required_when: (campo_irmão, valor) que torna o campo obrigatório
        choices: Valores literais aceitos (strings)
        minimum: Valor mínimo aceito (inteiros)
        fields: Regras dos campos filhos (mappings)
    """

    name: str
    type: FieldType = "string"
    required: bool = False
    required_when: tuple[str, str] | None = None
    choices: tuple[str, ...] = ()
    minimum: int | None = None
    fields: tuple[FieldRule, ...] = ()


_ADDRESS_FIELDS = tuple(
    FieldRule(name)
    for name in (
        "street",
        "number",
        "complement",
        "zip_code",
        "city",
        "state",
        "country",
        "district",
    )
)


def _customer_fields(*, identity_required: bool) -> tuple[FieldRule, ...]:
    return (
        FieldRule("name", required=True),
        FieldRule("identity", required=identity_required),
        FieldRule("identity_type"),
        FieldRule("email"),
        FieldRule("birthdate", type="date"),
        FieldRule("address", type="mapping", fields=_ADDRESS_FIELDS),
        FieldRule("delivery_address", type="mapping", fields=_ADDRESS_FIELDS),
    )


_CARD_FIELDS = (
    FieldRule("card_number", required=True),
    FieldRule("expiration_date", required=True),
    FieldRule("holder", required=True),
    FieldRule("security_code", required=True),
    FieldRule("brand"),
    FieldRule("card_token", type="guid"),
    FieldRule("save_card", type="boolean"),
    FieldRule(
        "card_on_file",
        type="mapping",
        fields=(FieldRule("usage"), FieldRule("reason")),
    ),
)

_AMOUNT = FieldRule("amount", type="integer", required=True, minimum=0)
# Ausente equivale a 1 parcela
_INSTALLMENTS = FieldRule("installments", type="integer", minimum=1)

_CARD_PAYMENT_OPTIONALS = (
    FieldRule("capture", type="boolean"),
    FieldRule("authenticate", type="boolean"),
    FieldRule("is_crypto_currency_negotiation", type="boolean"),
    FieldRule("service_tax_amount", type="integer", minimum=0),
    FieldRule("soft_descriptor"),
    FieldRule("currency"),
    FieldRule("country"),
    FieldRule("return_url"),
)

_CREDIT_PAYMENT = (
    FieldRule("type", required=True, choices=(PaymentType.CREDIT_CARD,)),
    _AMOUNT,
    _INSTALLMENTS,
    FieldRule("credit_card", type="mapping", required=True, fields=_CARD_FIELDS),
    *_CARD_PAYMENT_OPTIONALS,
)

_DEBIT_PAYMENT = (
    FieldRule("type", required=True, choices=(PaymentType.DEBIT_CARD,)),
    _AMOUNT,
    FieldRule("debit_card", type="mapping", required=True, fields=_CARD_FIELDS),
    *_CARD_PAYMENT_OPTIONALS,
)

_BANK_SLIP_PAYMENT = (
    FieldRule("type", required=True, choices=(PaymentType.BOLETO,)),
    _AMOUNT,
    FieldRule("identification", required=True),
    FieldRule("expiration_date", type="date", required=True),
    FieldRule("address", required=True),
    FieldRule("assignor"),
    FieldRule("demonstrative"),
    FieldRule("instructions"),
    FieldRule("boleto_number"),
    FieldRule("provider"),
)

_RECURRENT_SCHEDULE = (
    FieldRule(
        "interval",
        required=True,
        choices=tuple(interval.value for interval in RecurrencyInterval),
    ),
    FieldRule("end_date", type="date"),
    FieldRule("authorize_now", type="boolean"),
)

_RECURRENT_PAYMENT = (
    FieldRule(
        "type",
        required=True,
        choices=(PaymentType.CREDIT_CARD, PaymentType.DEBIT_CARD),
    ),
    _AMOUNT,
    _INSTALLMENTS,
    FieldRule(
        "credit_card",
        type="mapping",
        required_when=("type", PaymentType.CREDIT_CARD),
        fields=_CARD_FIELDS,
    ),
    FieldRule(
        "debit_card",
        type="mapping",
        required_when=("type", PaymentType.DEBIT_CARD),
        fields=_CARD_FIELDS,
    ),
    FieldRule(
        "recurrent_payment",
        type="mapping",
        required=True,
        fields=_RECURRENT_SCHEDULE,
    ),
    *_CARD_PAYMENT_OPTIONALS,
)


def _transaction(
    payment_fields: tuple[FieldRule, ...],
    *,
    customer_required: bool = False,
) -> tuple[FieldRule, ...]:
    return (
        FieldRule("merchant_order_id", required=True),
        FieldRule(
            "customer",
            type="mapping",
            required=customer_required,
            fields=_customer_fields(identity_required=customer_required),
        ),
        FieldRule("payment", type="mapping", required=True, fields=payment_fields),
    )


TRANSACTION_RULES: dict[TransactionKind, tuple[FieldRule, ...]] = {
    TransactionKind.CREDIT: _transaction(_CREDIT_PAYMENT),
    TransactionKind.DEBIT: _transaction(_DEBIT_PAYMENT),
    TransactionKind.BANK_SLIP: _transaction(_BANK_SLIP_PAYMENT, customer_required=True),
    TransactionKind.RECURRENT: _transaction(_RECURRENT_PAYMENT),
}


def get_rules(kind: TransactionKind | str) -> tuple[FieldRule, ...]:
    """Retorna a tabela de regras do tipo de transação.

    Raises:
        ValueError: Se o tipo de transação não é suportado.
    """
    return TRANSACTION_RULES[TransactionKind(kind)]
