"""Conector Cielo - único ponto de IO do SDK.

Responsabilidades:
- HTTP client para a API Cielo E-commerce
- Headers de autenticação da loja
- Conversão de chaves entre snake_case e PascalCase
"""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import CieloHttpClient, create_cielo_http_client
from .keys import pascalize_keys, underscore_keys

__all__ = [
    "CieloHttpClient",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "create_cielo_http_client",
    "pascalize_keys",
    "underscore_keys",
]
