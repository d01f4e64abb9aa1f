"""Protocolos e contratos do cliente Cielo."""

from .transport import HttpMethod, TransportError, TransportProtocol, TransportResponse

__all__ = [
    "HttpMethod",
    "TransportError",
    "TransportProtocol",
    "TransportResponse",
]
