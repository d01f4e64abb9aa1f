"""Settings do cliente Cielo E-commerce.

Credenciais e URLs da API carregadas de variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

CieloEnvironment = Literal["sandbox", "production"]

SANDBOX_API_BASE_URL: str = "https://apisandbox.cieloecommerce.cielo.com.br/1/"
SANDBOX_QUERY_BASE_URL: str = "https://apiquerysandbox.cieloecommerce.cielo.com.br/1/"
PRODUCTION_API_BASE_URL: str = "https://api.cieloecommerce.cielo.com.br/1/"
PRODUCTION_QUERY_BASE_URL: str = "https://apiquery.cieloecommerce.cielo.com.br/1/"


@dataclass(frozen=True)
class CieloSettings:
    """Configurações da integração com a Cielo.

    Attributes:
        merchant_id: Identificador da loja (header MerchantId)
        merchant_key: Chave da loja (header MerchantKey)
        environment: Ambiente da API (sandbox|production)
        api_base_url: Override da URL de transações (POST/PUT)
        query_base_url: Override da URL de consultas (GET)
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Tentativas extras em falha de conexão ou 429
        log_level: Nível de log sugerido para a aplicação
    """

    merchant_id: str = ""
    merchant_key: str = ""
    environment: CieloEnvironment = "sandbox"
    api_base_url: str = ""
    query_base_url: str = ""
    request_timeout_seconds: float = 30.0
    max_retries: int = 2
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def transaction_url(self) -> str:
        """URL base para criação, captura e cancelamento."""
        if self.api_base_url:
            return _with_trailing_slash(self.api_base_url)
        return PRODUCTION_API_BASE_URL if self.is_production else SANDBOX_API_BASE_URL

    @property
    def query_url(self) -> str:
        """URL base para consultas (GET)."""
        if self.query_base_url:
            return _with_trailing_slash(self.query_base_url)
        return PRODUCTION_QUERY_BASE_URL if self.is_production else SANDBOX_QUERY_BASE_URL

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.merchant_id:
            errors.append("CIELO_MERCHANT_ID não configurado")

        if not self.merchant_key:
            errors.append("CIELO_MERCHANT_KEY não configurado")

        if self.environment not in ("sandbox", "production"):
            errors.append("CIELO_ENVIRONMENT deve ser 'sandbox' ou 'production'")

        if self.request_timeout_seconds <= 0:
            errors.append("CIELO_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("CIELO_MAX_RETRIES deve ser >= 0")

        return errors


def _with_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"


def _parse_environment(env_str: str) -> CieloEnvironment:
    """Converte string de ambiente para CieloEnvironment."""
    if env_str.lower() in ("production", "prod"):
        return "production"
    return "sandbox"


def _load_from_env() -> CieloSettings:
    """Carrega CieloSettings a partir de variáveis de ambiente."""
    return CieloSettings(
        merchant_id=os.getenv("CIELO_MERCHANT_ID", ""),
        merchant_key=os.getenv("CIELO_MERCHANT_KEY", ""),
        environment=_parse_environment(os.getenv("CIELO_ENVIRONMENT", "sandbox")),
        api_base_url=os.getenv("CIELO_API_BASE_URL", ""),
        query_base_url=os.getenv("CIELO_QUERY_BASE_URL", ""),
        request_timeout_seconds=float(os.getenv("CIELO_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("CIELO_MAX_RETRIES", "2")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_cielo_settings() -> CieloSettings:
    """Retorna instância cacheada de CieloSettings."""
    return _load_from_env()
