"""Mensagens e tipo da árvore de erros de validação."""

from __future__ import annotations

from typing import TypeAlias, Union

CANT_BE_BLANK = "can't be blank"
IS_INVALID = "is invalid"
HAS_INVALID_FORMAT = "has invalid format"

# Espelha o aninhamento do payload: campo -> mensagem ou subárvore
ValidationErrors: TypeAlias = dict[str, Union[str, "ValidationErrors"]]
