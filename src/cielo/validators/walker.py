"""Avaliação genérica das tabelas de regras sobre payloads aninhados."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cielo.validators.errors import (
    CANT_BE_BLANK,
    HAS_INVALID_FORMAT,
    IS_INVALID,
    ValidationErrors,
)
from cielo.validators.formats import is_iso_date
from cielo.validators.guid import is_valid_guid
from cielo.validators.rules import get_rules

if TYPE_CHECKING:
    from cielo.constants import TransactionKind
    from cielo.validators.rules import FieldRule

logger = logging.getLogger(__name__)


def validate(kind: TransactionKind | str, payload: Any) -> ValidationErrors:
    """Valida o payload de uma transação contra as regras do seu tipo.

    Todos os ramos do payload são avaliados; os erros de cada objeto são
    reunidos e agregados numa única árvore. O payload nunca é alterado.

    Args:
        kind: Tipo da transação (credit, debit, bankslip, recurrent)
        payload: Payload aninhado com chaves snake_case

    Returns:
        Árvore de erros por campo. Vazia quando o payload é válido.

    Raises:
        ValueError: Se `kind` não é um tipo de transação suportado.
    """
    rules = get_rules(kind)
    if not isinstance(payload, Mapping):
        return {"base": IS_INVALID}

    errors = check_object(rules, payload)
    if errors:
        logger.debug(
            "cielo_validation_failed",
            extra={"kind": str(kind), "fields": sorted(errors)},
        )
    return errors


def check_object(
    rules: tuple[FieldRule, ...],
    data: Mapping[str, Any],
) -> ValidationErrors:
    """Aplica `rules` a um objeto e desce nos objetos filhos válidos.

    Os erros dos campos do objeto são coletados antes de descer nos
    filhos. Objeto filho ausente ou de tipo errado gera um único erro e
    não é percorrido.
    """
    errors: ValidationErrors = {}
    children: list[tuple[FieldRule, Mapping[str, Any]]] = []

    for rule in rules:
        value = data.get(rule.name)
        if _is_blank(value):
            if _is_required(rule, data):
                errors[rule.name] = CANT_BE_BLANK
            continue

        message = _check_value(rule, value)
        if message:
            errors[rule.name] = message
        elif rule.type == "mapping":
            children.append((rule, value))

    for rule, child in children:
        subtree = check_object(rule.fields, child)
        if subtree:
            errors[rule.name] = subtree

    return errors


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _is_required(rule: FieldRule, data: Mapping[str, Any]) -> bool:
    if rule.required:
        return True
    if rule.required_when is None:
        return False
    sibling, expected = rule.required_when
    return data.get(sibling) == expected


def _check_value(rule: FieldRule, value: Any) -> str | None:
    """Retorna a mensagem de erro do valor, ou None se válido."""
    if rule.type == "string":
        if not isinstance(value, str):
            return IS_INVALID
        if rule.choices and value not in rule.choices:
            return IS_INVALID
        return None

    if rule.type == "integer":
        # bool é subclasse de int e não representa valor monetário
        if not isinstance(value, int) or isinstance(value, bool):
            return IS_INVALID
        if rule.minimum is not None and value < rule.minimum:
            return IS_INVALID
        return None

    if rule.type == "boolean":
        return None if isinstance(value, bool) else IS_INVALID

    if rule.type == "mapping":
        return None if isinstance(value, Mapping) else IS_INVALID

    if not isinstance(value, str):
        return IS_INVALID
    if rule.type == "date":
        return None if is_iso_date(value) else HAS_INVALID_FORMAT
    if rule.type == "guid":
        return None if is_valid_guid(value) else HAS_INVALID_FORMAT

    raise ValueError(f"Tipo de regra desconhecido: {rule.type}")
