"""Transporte HTTP da API Sendly."""

from sendly.connectors.api_errors import (
    SendlyApiError,
    is_permanent_error,
    parse_api_error,
)
from sendly.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from sendly.connectors.http_client import (
    SendlyHttpClient,
    create_sendly_http_client,
)

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "SendlyApiError",
    "SendlyHttpClient",
    "create_sendly_http_client",
    "is_permanent_error",
    "parse_api_error",
]
