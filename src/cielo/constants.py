"""Enums e literais do domínio de transações Cielo."""

from __future__ import annotations

from enum import StrEnum


class TransactionKind(StrEnum):
    """Tipos de transação suportados pelo endpoint de vendas."""

    CREDIT = "credit"
    DEBIT = "debit"
    BANK_SLIP = "bankslip"
    RECURRENT = "recurrent"


class PaymentType(StrEnum):
    """Valores aceitos em `payment.type` pela API."""

    CREDIT_CARD = "CreditCard"
    DEBIT_CARD = "DebitCard"
    BOLETO = "Boleto"


class RecurrencyInterval(StrEnum):
    """Intervalos de recorrência aceitos em `recurrent_payment.interval`."""

    MONTHLY = "Monthly"
    BIMONTHLY = "Bimonthly"
    QUARTERLY = "Quarterly"
    SEMI_ANNUAL = "SemiAnnual"
    ANNUAL = "Annual"
