"""Cliente HTTP base para o conector Cielo."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from cielo.protocols import TransportError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 2
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(TransportError):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP síncrono para chamadas externas.

    Só repete a requisição quando ela comprovadamente não foi processada:
    falha de conexão ou 429. Timeouts não são repetidos, pois a venda
    pode ter sido criada no gateway.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    def request(
        self,
        method: str,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        attempt = 0
        while True:
            try:
                with httpx.Client(
                    verify=self._config.verify_ssl,
                    transport=self._transport,
                ) as client:
                    response = client.request(
                        method,
                        url,
                        json=json,
                        headers=merged_headers,
                        timeout=self._config.timeout_seconds,
                    )
            except httpx.ConnectError as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                self._backoff(attempt)
                attempt += 1
                continue
            except httpx.TimeoutException as exc:
                raise HttpError("http_timeout") from exc
            except httpx.HTTPError as exc:
                raise HttpError("http_request_failed") from exc

            if response.status_code == 429 and attempt < self._config.max_retries:
                self._backoff(attempt)
                attempt += 1
                continue
            return response

    def _backoff(self, attempt: int) -> None:
        backoff = min((2**attempt) * self._config.backoff_base_seconds, self._config.backoff_max_seconds)
        logger.info("http_backoff", extra={"backoff_seconds": backoff, "attempt": attempt})
        time.sleep(backoff)
