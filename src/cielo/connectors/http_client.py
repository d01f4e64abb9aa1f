"""Cliente HTTP especializado para a API Cielo E-commerce.

Estende HttpClient com os comportamentos da Cielo:
- Headers MerchantId/MerchantKey e RequestId por requisição
- URL de transações (POST/PUT) separada da URL de consultas (GET)
- Corpos enviados em PascalCase e devolvidos em snake_case
- Logging estruturado sem dados de cartão ou MerchantKey
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from cielo.connectors.cielo_logging import log_gateway_error, log_success
from cielo.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from cielo.connectors.keys import pascalize_keys, underscore_keys
from cielo.protocols import TransportResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from cielo.config.settings import CieloSettings
    from cielo.protocols import HttpMethod

logger: logging.Logger = logging.getLogger(__name__)


class CieloHttpClient(HttpClient):
    """Transporte HTTP da Cielo; implementa TransportProtocol.

    Args:
        settings: Credenciais e URLs da API
        config: Configuração HTTP base
        transport: Transporte httpx opcional (ex: httpx.MockTransport)
    """

    def __init__(
        self,
        settings: CieloSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport)
        self._settings = settings

    def send(
        self,
        method: HttpMethod,
        path: str,
        body: Mapping[str, Any] | None,
    ) -> TransportResponse:
        """Envia a requisição e devolve status e corpo decodificado.

        Raises:
            HttpError: Falha de conexão, timeout, corpo não serializável
                em JSON ou corpo 2xx ilegível
        """
        url = self._build_url(method, path)
        payload = pascalize_keys(body) if body is not None else None
        try:
            response = self.request(method, url, json=payload, headers=self._build_headers())
        except (TypeError, ValueError) as exc:
            # Valores fora das regras de validação que o JSON não representa
            logger.error("cielo_invalid_body", extra={"path": path, "error_type": type(exc).__name__})
            raise HttpError("http_invalid_body") from exc

        data = underscore_keys(_decode_body(response, path))
        if response.is_success:
            log_success(method, path, response.status_code)
        else:
            log_gateway_error(method, path, response.status_code, data)
        return TransportResponse(status=response.status_code, body=data)

    def _build_url(self, method: str, path: str) -> str:
        base = self._settings.query_url if method == "GET" else self._settings.transaction_url
        return f"{base}{path.lstrip('/')}"

    def _build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "MerchantId": self._settings.merchant_id,
            "MerchantKey": self._settings.merchant_key,
            "RequestId": str(uuid.uuid4()),
        }


def _decode_body(response: httpx.Response, path: str) -> Any:
    """Decodifica JSON; corpo vazio vira "" e erros não-JSON viram texto."""
    if not response.content.strip():
        return ""
    try:
        return response.json()
    except ValueError as exc:
        if response.is_success:
            logger.error("cielo_malformed_response", extra={"path": path})
            raise HttpError("http_malformed_response", status_code=response.status_code) from exc
        return response.text


def create_cielo_http_client(
    settings: CieloSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> CieloHttpClient:
    """Factory para criar o cliente Cielo a partir das settings.

    Args:
        settings: CieloSettings opcional. Se None, carrega do ambiente.
        transport: Transporte httpx opcional (testes)

    Raises:
        ValueError: Se as settings não passam em `validate()`.
    """
    from cielo.config.settings import get_cielo_settings

    cielo = settings or get_cielo_settings()
    errors = cielo.validate()
    if errors:
        raise ValueError(f"Configuração Cielo inválida: {'; '.join(errors)}")

    config = HttpClientConfig(
        timeout_seconds=cielo.request_timeout_seconds,
        max_retries=cielo.max_retries,
    )
    return CieloHttpClient(cielo, config=config, transport=transport)
