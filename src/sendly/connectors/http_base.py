"""Cliente HTTP base (httpx) com retry e backoff exponencial."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
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


def is_retryable_status(status_code: int) -> bool:
    """429 (rate limit) e 5xx são transitórios."""
    return status_code == 429 or status_code >= 500


class HttpClient:
    """Cliente HTTP assíncrono com retry para erros transitórios.

    O httpx.AsyncClient é criado sob demanda e reaproveitado entre chamadas
    (pool de conexões). Pode ser injetado para testes ou para compartilhar
    um pool já existente. aclose() fecha o cliente em uso, injetado ou não.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
            )
        return self._http_client

    async def aclose(self) -> None:
        """Fecha o pool de conexões, se houver."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: list[tuple[str, str]] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição com retry.

        Status 429/5xx e falhas de conexão/timeout são retentados até
        max_retries. Quando as tentativas se esgotam num status transitório,
        a última resposta é devolvida para que o chamador trate o corpo de
        erro; falhas de conexão esgotadas viram HttpError.

        Raises:
            HttpError: Timeout ou falha de conexão após todas as tentativas.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        client = await self._get_http_client()

        for attempt in range(self._config.max_retries + 1):
            try:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
                continue

            if is_retryable_status(response.status_code) and attempt < self._config.max_retries:
                logger.info(
                    "http_retryable_status",
                    extra={"method": method, "status_code": response.status_code},
                )
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
                continue

            return response

        # Só alcançado com max_retries negativo (nenhuma tentativa feita)
        raise HttpError("http_retry_exhausted", is_retryable=True)


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)
