"""Templates de endpoint e substituição de parâmetros de path."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

PAYMENT_ID_TOKEN = ":payment_id"
AMOUNT_TOKEN = ":amount"


@dataclass(frozen=True)
class EndpointTemplates:
    """Templates dos endpoints de vendas, relativos à URL base da API."""

    create: str = "sales/"
    capture: str = "sales/:payment_id/capture"
    cancel: str = "sales/:payment_id/void"
    cancel_partial: str = "sales/:payment_id/void?amount=:amount"
    deactivate_recurrent: str = "RecurrentPayment/:payment_id/Deactivate"


DEFAULT_TEMPLATES = EndpointTemplates()


def build_path(template: str, token: str, value: object) -> str:
    """Substitui a primeira ocorrência literal de `token` por `str(value)`."""
    return template.replace(token, str(value), 1)


def substitute(template: str, params: Sequence[tuple[str, object]]) -> str:
    """Aplica as substituições na ordem dada.

    O valor de um parâmetro não deve conter um token ainda não
    substituído (ex: um id contendo ":amount").

    Exemplo:
        >>> substitute("sales/:payment_id/void?amount=:amount",
        ...            [(":payment_id", "abc"), (":amount", 1000)])
        'sales/abc/void?amount=1000'
    """
    path = template
    for token, value in params:
        path = build_path(path, token, value)
    return path


def encode_url_args(path: str, args: Mapping[str, Any] | None) -> str:
    """Anexa `args` ao path como query string (sem alterar path se vazio)."""
    if not args:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{urlencode(dict(args))}"
