"""Configuração do pytest para o cliente Cielo."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ (imports absolutos) e tests/ (fakes) ao PYTHONPATH
tests_path = Path(__file__).parent
src_path = tests_path.parent / "src"
for path in (src_path, tests_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from fakes.fake_transport import FakeTransport  # noqa: E402
from fakes.payloads import (  # noqa: E402
    bankslip_payload,
    credit_payload,
    debit_payload,
    recurrent_payload,
)

PAYMENT_ID = "26e5da86-d975-4e2f-aa25-862b5a43e9f4"


@pytest.fixture
def payment_id() -> str:
    return PAYMENT_ID


@pytest.fixture
def transport() -> FakeTransport:
    """Transporte que ecoa o corpo com status 200 e registra chamadas."""
    return FakeTransport()


@pytest.fixture
def credit_attrs() -> dict:
    return credit_payload()


@pytest.fixture
def debit_attrs() -> dict:
    return debit_payload()


@pytest.fixture
def bankslip_attrs() -> dict:
    return bankslip_payload()


@pytest.fixture
def recurrent_attrs() -> dict:
    return recurrent_payload()
