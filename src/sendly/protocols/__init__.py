"""Protocolos e contratos do SDK."""

from .http_client import ApiResponseProtocol, ApiTransportProtocol

__all__ = [
    "ApiResponseProtocol",
    "ApiTransportProtocol",
]
