"""Ponto de entrada do SDK.

Uso:
    from sendly import CreateTemplateRequest, Sendly

    async with Sendly(api_key="sk_live_...") as client:
        template = await client.templates.create(
            CreateTemplateRequest(name="OTP", body="Seu código: {{code}}")
        )
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sendly.connectors.http_client import create_sendly_http_client
from sendly.resources.templates import TemplatesResource

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from sendly.config.settings import SendlySettings
    from sendly.connectors.http_client import SendlyHttpClient


class Sendly:
    """Cliente raiz: dono do transporte e dos recursos ligados a ele."""

    __slots__ = ("_templates", "_transport")

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: SendlySettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            api_key: Chave de API. Se None, usa settings.api_key (SENDLY_API_KEY).
            settings: SendlySettings opcional. Se None, carrega do ambiente.
            http_client: httpx.AsyncClient opcional (pool compartilhado/testes).

        Raises:
            ValueError: Se nenhuma api_key estiver disponível.
        """
        self._transport = create_sendly_http_client(
            settings,
            api_key=api_key,
            http_client=http_client,
        )
        self._templates = TemplatesResource(self._transport)

    @property
    def templates(self) -> TemplatesResource:
        return self._templates

    @property
    def transport(self) -> SendlyHttpClient:
        return self._transport

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> Sendly:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
