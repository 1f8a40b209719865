"""Contrato mínimo de transporte usado pelos recursos.

Evita dependência direta dos recursos em sendly.connectors.
"""

from __future__ import annotations

from typing import Any, Protocol


class ApiResponseProtocol(Protocol):
    """Resposta HTTP com corpo JSON."""

    def json(self) -> Any: ...


class ApiTransportProtocol(Protocol):
    """Verbos HTTP sobre paths relativos da API."""

    async def get(
        self,
        path: str,
        params: list[tuple[str, str]] | None = None,
    ) -> ApiResponseProtocol: ...

    async def post(self, path: str, json: Any = None) -> ApiResponseProtocol: ...

    async def patch(self, path: str, json: Any = None) -> ApiResponseProtocol: ...

    async def delete(self, path: str) -> ApiResponseProtocol: ...
