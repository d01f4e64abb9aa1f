"""Validadores de payload para a API Cielo E-commerce.

Uso:
    from cielo.validators import validate, is_valid_guid

    errors = validate("credit", payload)
    if errors:
        ...  # {"payment": {"credit_card": {"security_code": "can't be blank"}}}
"""

from cielo.validators.errors import (
    CANT_BE_BLANK,
    HAS_INVALID_FORMAT,
    IS_INVALID,
    ValidationErrors,
)
from cielo.validators.formats import is_iso_date
from cielo.validators.guid import is_valid_guid
from cielo.validators.rules import TRANSACTION_RULES, FieldRule, get_rules
from cielo.validators.walker import check_object, validate

__all__ = [
    "CANT_BE_BLANK",
    "HAS_INVALID_FORMAT",
    "IS_INVALID",
    "TRANSACTION_RULES",
    "FieldRule",
    "ValidationErrors",
    "check_object",
    "get_rules",
    "is_iso_date",
    "is_valid_guid",
    "validate",
]
