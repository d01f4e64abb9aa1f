"""Conversão de chaves entre snake_case (SDK) e PascalCase (API Cielo)."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def to_pascal_case(key: str) -> str:
    """Converte "merchant_order_id" em "MerchantOrderId"."""
    return "".join(part[:1].upper() + part[1:] for part in key.split("_"))


def to_snake_case(key: str) -> str:
    """Converte "MerchantOrderId" em "merchant_order_id"."""
    key = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    key = _WORD_BOUNDARY.sub(r"\1_\2", key)
    return key.lower()


def convert_keys(data: Any, converter: Callable[[str], str]) -> Any:
    """Aplica `converter` às chaves string de mappings, recursivamente."""
    if isinstance(data, Mapping):
        return {
            converter(key) if isinstance(key, str) else key: convert_keys(value, converter)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [convert_keys(item, converter) for item in data]
    return data


def pascalize_keys(data: Any) -> Any:
    return convert_keys(data, to_pascal_case)


def underscore_keys(data: Any) -> Any:
    return convert_keys(data, to_snake_case)
