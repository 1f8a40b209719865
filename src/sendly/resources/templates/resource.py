"""Recurso de templates da API Sendly.

Cada operação apenas compõe: serializa o builder (ou monta o path), chama o
transporte e decodifica o corpo. Erros de transporte (HttpError,
SendlyApiError) e de decodificação (pydantic.ValidationError,
json.JSONDecodeError) sobem sem tratamento.

Clonagem usa /templates/{id}/clone, sem o prefixo /verify das demais
operações; é o path que a API atende.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sendly.resources.templates.models import (
    DeleteTemplateResponse,
    Template,
    TemplateList,
)
from sendly.resources.templates.requests import (
    CloneTemplateRequest,
    ListTemplatesOptions,
)

if TYPE_CHECKING:
    from sendly.protocols import ApiTransportProtocol
    from sendly.resources.templates.requests import (
        CreateTemplateRequest,
        UpdateTemplateRequest,
    )

logger = logging.getLogger(__name__)

TEMPLATES_PATH = "/verify/templates"
CLONE_PATH = "/templates/{template_id}/clone"


def _template_path(template_id: str) -> str:
    return f"{TEMPLATES_PATH}/{template_id}"


def _log_call(operation: str, method: str, path: str) -> None:
    logger.debug(
        "templates_request",
        extra={"operation": operation, "method": method, "path": path},
    )


class TemplatesResource:
    """Operações remotas sobre templates.

    Guarda apenas a referência ao transporte; não deve viver mais que ele.
    Chamadas são independentes e podem rodar concorrentemente.
    """

    __slots__ = ("_client",)

    def __init__(self, client: ApiTransportProtocol) -> None:
        self._client = client

    async def list(self, options: ListTemplatesOptions | None = None) -> TemplateList:
        """Lista templates (uma página; o chamador conduz a paginação)."""
        params = (options or ListTemplatesOptions()).to_query_params()
        _log_call("list", "GET", TEMPLATES_PATH)
        response = await self._client.get(TEMPLATES_PATH, params=params)
        return TemplateList.model_validate(response.json())

    async def get(self, template_id: str) -> Template:
        path = _template_path(template_id)
        _log_call("get", "GET", path)
        response = await self._client.get(path)
        return Template.model_validate(response.json())

    async def create(self, request: CreateTemplateRequest) -> Template:
        _log_call("create", "POST", TEMPLATES_PATH)
        response = await self._client.post(TEMPLATES_PATH, json=request.to_payload())
        return Template.model_validate(response.json())

    async def update(self, template_id: str, request: UpdateTemplateRequest) -> Template:
        """Atualização parcial; só os campos definidos no builder são enviados."""
        path = _template_path(template_id)
        _log_call("update", "PATCH", path)
        response = await self._client.patch(path, json=request.to_payload())
        return Template.model_validate(response.json())

    async def delete(self, template_id: str) -> DeleteTemplateResponse:
        path = _template_path(template_id)
        _log_call("delete", "DELETE", path)
        response = await self._client.delete(path)
        return DeleteTemplateResponse.model_validate(response.json())

    async def publish(self, template_id: str) -> Template:
        return await self._post_action("publish", f"{_template_path(template_id)}/publish")

    async def unpublish(self, template_id: str) -> Template:
        return await self._post_action("unpublish", f"{_template_path(template_id)}/unpublish")

    async def clone(self, template_id: str) -> Template:
        return await self._post_action("clone", CLONE_PATH.format(template_id=template_id))

    async def clone_with_name(self, template_id: str, name: str) -> Template:
        """Clona o template dando um novo nome à cópia."""
        path = CLONE_PATH.format(template_id=template_id)
        _log_call("clone_with_name", "POST", path)
        response = await self._client.post(
            path,
            json=CloneTemplateRequest(name=name).to_payload(),
        )
        return Template.model_validate(response.json())

    async def _post_action(self, operation: str, path: str) -> Template:
        """POST sem corpo para ações de ciclo de vida."""
        _log_call(operation, "POST", path)
        response = await self._client.post(path)
        return Template.model_validate(response.json())
