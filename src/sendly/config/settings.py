"""Settings do cliente Sendly.

Carregadas de variáveis de ambiente e cacheadas (singleton por processo).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SENDLY_API_BASE_URL: str = "https://sendly.live/api/v1"


@dataclass(frozen=True)
class SendlySettings:
    """Configurações do cliente Sendly.

    Attributes:
        api_key: Chave de API enviada como Bearer token
        base_url: URL base da API (sem barra final)
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de novas tentativas em erro transitório
        backoff_base_seconds: Base do backoff exponencial
        backoff_max_seconds: Teto do backoff exponencial
        log_level: Nível usado por configure_logging quando level não é informado
    """

    api_key: str = ""
    base_url: str = SENDLY_API_BASE_URL

    request_timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 30.0

    log_level: str = "INFO"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("SENDLY_API_KEY não configurado")

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("SENDLY_BASE_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("SENDLY_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("SENDLY_MAX_RETRIES deve ser >= 0")

        if self.backoff_base_seconds < 0 or self.backoff_max_seconds < 0:
            errors.append("SENDLY_BACKOFF_*_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> SendlySettings:
    """Carrega SendlySettings a partir de variáveis de ambiente."""
    return SendlySettings(
        api_key=os.getenv("SENDLY_API_KEY", ""),
        base_url=os.getenv("SENDLY_BASE_URL", SENDLY_API_BASE_URL).rstrip("/"),
        request_timeout_seconds=float(
            os.getenv("SENDLY_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("SENDLY_MAX_RETRIES", "3")),
        backoff_base_seconds=float(os.getenv("SENDLY_BACKOFF_BASE_SECONDS", "0.5")),
        backoff_max_seconds=float(os.getenv("SENDLY_BACKOFF_MAX_SECONDS", "30")),
        log_level=os.getenv("SENDLY_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_sendly_settings() -> SendlySettings:
    """Retorna instância cacheada de SendlySettings."""
    return _load_from_env()
