"""Checagens de formato para campos de data."""

from __future__ import annotations

import re
from datetime import date

_ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def is_iso_date(value: str) -> bool:
    """Retorna True para datas `YYYY-MM-DD` que existem no calendário."""
    if _ISO_DATE_PATTERN.fullmatch(value) is None:
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True
