"""Validação de GUIDs usados como PaymentId pela Cielo."""

from __future__ import annotations

import re

_GUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_valid_guid(value: object) -> bool:
    """Retorna True se `value` é um GUID canônico 8-4-4-4-12.

    A comparação cobre a string inteira: espaços ou caracteres extras
    ao redor invalidam o GUID.

    Exemplo:
        >>> is_valid_guid("26e5da86-d975-4e2f-aa25-862b5a43e9f4")
        True
        >>> is_valid_guid("not-a-guid")
        False
    """
    if not isinstance(value, str):
        return False
    return _GUID_PATTERN.fullmatch(value) is not None
