"""Cliente HTTP especializado para a API Sendly.

Estende HttpClient genérico com:
- Resolução de URL (base_url + path relativo)
- Autenticação Bearer e headers fixos do SDK
- Propagação de correlation_id via X-Correlation-Id
- Conversão de status >= 400 em SendlyApiError
- Logging estruturado sem API key nem payloads
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sendly.config.settings import SENDLY_API_BASE_URL
from sendly.connectors.api_errors import parse_api_error
from sendly.connectors.api_logging import log_api_error, log_success
from sendly.connectors.http_base import HttpClient, HttpClientConfig
from sendly.observability import get_correlation_id
from sendly.version import __version__

if TYPE_CHECKING:
    import httpx

    from sendly.config.settings import SendlySettings

logger: logging.Logger = logging.getLogger(__name__)

SDK_USER_AGENT = f"sendly-python/{__version__}"


class SendlyHttpClient(HttpClient):
    """Transporte da API Sendly.

    Cada verbo recebe apenas o path relativo (ex: /verify/templates) e
    devolve o httpx.Response de sucesso; a decodificação do corpo fica com
    quem chama.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = SENDLY_API_BASE_URL,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa o transporte.

        Args:
            api_key: Chave de API (Bearer)
            base_url: URL base da API, com ou sem barra final
            config: Configuração HTTP base
            http_client: httpx.AsyncClient opcional (pool compartilhado/testes)

        Raises:
            ValueError: Se api_key está vazia
        """
        if not api_key or not api_key.strip():
            logger.error("sendly_api_key_missing")
            raise ValueError(
                "api_key é obrigatória. Verifique se SENDLY_API_KEY está configurada."
            )
        super().__init__(config, http_client)
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get(
        self,
        path: str,
        params: list[tuple[str, str]] | None = None,
    ) -> httpx.Response:
        return await self.send("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> httpx.Response:
        return await self.send("POST", path, json=json)

    async def patch(self, path: str, json: Any = None) -> httpx.Response:
        return await self.send("PATCH", path, json=json)

    async def delete(self, path: str) -> httpx.Response:
        return await self.send("DELETE", path)

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: list[tuple[str, str]] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """Executa a chamada e valida o status.

        Raises:
            SendlyApiError: Se a API responder com status >= 400
            HttpError: Se a conexão falhar após todas as tentativas
        """
        url, headers = self._build_request(path)
        response = await self.request(
            method,
            url,
            params=params or None,
            json=json,
            headers=headers,
        )
        return self._process_response(response, method, path)

    def _build_request(self, path: str) -> tuple[str, dict[str, str]]:
        """Monta URL absoluta e headers da chamada."""
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": SDK_USER_AGENT,
        }
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-Id"] = correlation_id

        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self._base_url}{path}", headers

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        path: str,
    ) -> httpx.Response:
        if response.status_code < 400:
            log_success(method, path, response.status_code)
            return response

        try:
            response_data = response.json()
        except ValueError:
            response_data = None

        api_error = parse_api_error(response.status_code, response_data)
        log_api_error(api_error, method, path)
        raise api_error


def create_sendly_http_client(
    settings: SendlySettings | None = None,
    api_key: str | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> SendlyHttpClient:
    """Factory do transporte com config derivada de SendlySettings.

    Args:
        settings: SendlySettings opcional. Se None, carrega do ambiente.
        api_key: Sobrescreve settings.api_key quando informado.
        http_client: httpx.AsyncClient opcional.
    """
    from sendly.config.settings import get_sendly_settings

    sendly = settings or get_sendly_settings()
    config = HttpClientConfig(
        timeout_seconds=sendly.request_timeout_seconds,
        max_retries=sendly.max_retries,
        backoff_base_seconds=sendly.backoff_base_seconds,
        backoff_max_seconds=sendly.backoff_max_seconds,
    )
    return SendlyHttpClient(
        api_key=api_key or sendly.api_key,
        base_url=sendly.base_url,
        config=config,
        http_client=http_client,
    )
