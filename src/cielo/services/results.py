"""Resultados uniformes das operações e mapeamento de respostas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

if TYPE_CHECKING:
    from cielo.protocols import TransportResponse
    from cielo.validators import ValidationErrors


class GatewayError(BaseModel):
    """Erro retornado pela Cielo na lista de erros do corpo."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    code: int | str
    message: str


_GATEWAY_ERRORS = TypeAdapter(list[GatewayError])

_STATUS_KINDS: dict[int, str] = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    422: "unprocessable_entity",
    429: "too_many_requests",
    500: "internal_server_error",
    502: "bad_gateway",
    503: "service_unavailable",
    504: "gateway_timeout",
}


@dataclass(frozen=True)
class Ok:
    """Operação aceita pelo gateway (2xx)."""

    payload: Any

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ErrorValidation:
    """Payload rejeitado localmente; nenhuma chamada de rede foi feita."""

    errors: ValidationErrors

    @property
    def is_ok(self) -> bool:
        return False


@dataclass(frozen=True)
class ErrorInvalidArgument:
    """Argumento inválido (ex: GUID malformado); nenhuma chamada de rede."""

    reason: str

    @property
    def is_ok(self) -> bool:
        return False


@dataclass(frozen=True)
class ErrorHttp:
    """Gateway respondeu com status de erro (4xx/5xx)."""

    status_kind: str
    status_code: int
    errors: list[GatewayError] = field(default_factory=list)

    @property
    def is_ok(self) -> bool:
        return False


@dataclass(frozen=True)
class ErrorTransport:
    """Falha de conexão, timeout ou resposta ilegível."""

    reason: str

    @property
    def is_ok(self) -> bool:
        return False


OperationResult = Union[Ok, ErrorValidation, ErrorInvalidArgument, ErrorHttp, ErrorTransport]


def status_kind(status_code: int) -> str:
    """Nome snake_case do status HTTP (ex: 400 -> "bad_request")."""
    if status_code in _STATUS_KINDS:
        return _STATUS_KINDS[status_code]
    return "server_error" if status_code >= 500 else "client_error"


def parse_gateway_errors(body: Any) -> list[GatewayError]:
    """Extrai a lista `{code, message}` do corpo de erro.

    Corpos que não seguem esse formato resultam em lista vazia.
    """
    try:
        return _GATEWAY_ERRORS.validate_python(body)
    except PydanticValidationError:
        return []


def map_response(response: TransportResponse) -> OperationResult:
    """Converte a resposta crua do transporte em OperationResult."""
    if 200 <= response.status < 300:
        return Ok(response.body)
    if 400 <= response.status < 600:
        return ErrorHttp(
            status_kind=status_kind(response.status),
            status_code=response.status,
            errors=parse_gateway_errors(response.body),
        )
    return ErrorTransport(f"unexpected_status_{response.status}")
