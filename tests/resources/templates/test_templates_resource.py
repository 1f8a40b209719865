"""Testes para TemplatesResource.

O transporte é um AsyncMock; cada teste verifica verbo, path e corpo
enviados e o tipo decodificado.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from sendly.connectors.api_errors import SendlyApiError
from sendly.connectors.http_base import HttpError
from sendly.resources.templates import (
    CreateTemplateRequest,
    DeleteTemplateResponse,
    ListTemplatesOptions,
    Template,
    TemplateList,
    TemplatesResource,
    TemplateType,
    UpdateTemplateRequest,
)

TEMPLATE_JSON: dict[str, Any] = {
    "id": "tmpl_123",
    "name": "OTP",
    "body": "Seu código é {{code}}",
    "type": "custom",
    "locale": "pt-BR",
    "variables": ["code"],
    "isDefault": False,
    "isPublished": True,
    "createdAt": "2026-10-01T12:00:00Z",
}


def _response(data: Any) -> MagicMock:
    response = MagicMock()
    response.json.return_value = data
    return response


def _resource(data: Any) -> tuple[TemplatesResource, AsyncMock]:
    transport = AsyncMock()
    for verb in ("get", "post", "patch", "delete"):
        getattr(transport, verb).return_value = _response(data)
    return TemplatesResource(transport), transport


class TestTemplatesResourceList:
    @pytest.mark.asyncio
    async def test_list_with_options(self) -> None:
        resource, transport = _resource(
            {"templates": [TEMPLATE_JSON], "pagination": {"limit": 100, "hasMore": True}}
        )
        options = ListTemplatesOptions().with_limit(250).with_template_type(TemplateType.PRESET)

        result = await resource.list(options)

        transport.get.assert_awaited_once_with(
            "/verify/templates",
            params=[("limit", "100"), ("type", "preset")],
        )
        assert isinstance(result, TemplateList)
        assert result.templates[0].id == "tmpl_123"
        assert result.pagination is not None
        assert result.pagination.has_more is True

    @pytest.mark.asyncio
    async def test_list_without_options(self) -> None:
        resource, transport = _resource({"templates": []})

        result = await resource.list()

        transport.get.assert_awaited_once_with("/verify/templates", params=[])
        assert result.templates == []
        assert result.pagination is None


class TestTemplatesResourceCrud:
    @pytest.mark.asyncio
    async def test_get(self) -> None:
        resource, transport = _resource(TEMPLATE_JSON)

        template = await resource.get("tmpl_123")

        transport.get.assert_awaited_once_with("/verify/templates/tmpl_123")
        assert isinstance(template, Template)
        assert template.is_published is True
        assert template.created_at == "2026-10-01T12:00:00Z"

    @pytest.mark.asyncio
    async def test_create(self) -> None:
        resource, transport = _resource(TEMPLATE_JSON)
        request = CreateTemplateRequest(name="OTP", body="Seu código é {{code}}")

        template = await resource.create(request)

        transport.post.assert_awaited_once_with(
            "/verify/templates",
            json={"name": "OTP", "body": "Seu código é {{code}}"},
        )
        assert template.name == "OTP"

    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(self) -> None:
        resource, transport = _resource({**TEMPLATE_JSON, "name": "OTP v2"})

        template = await resource.update("tmpl_123", UpdateTemplateRequest().with_name("OTP v2"))

        transport.patch.assert_awaited_once_with(
            "/verify/templates/tmpl_123",
            json={"name": "OTP v2"},
        )
        assert template.name == "OTP v2"

    @pytest.mark.asyncio
    async def test_update_empty_builder_sends_empty_object(self) -> None:
        resource, transport = _resource(TEMPLATE_JSON)

        await resource.update("tmpl_123", UpdateTemplateRequest())

        transport.patch.assert_awaited_once_with("/verify/templates/tmpl_123", json={})

    @pytest.mark.asyncio
    async def test_delete(self) -> None:
        resource, transport = _resource({"success": True})

        result = await resource.delete("tmpl_123")

        transport.delete.assert_awaited_once_with("/verify/templates/tmpl_123")
        assert result == DeleteTemplateResponse(success=True, message=None)


class TestTemplatesResourceLifecycle:
    """publish, unpublish e clone."""

    @pytest.mark.asyncio
    async def test_publish(self) -> None:
        resource, transport = _resource(TEMPLATE_JSON)

        template = await resource.publish("tmpl_123")

        transport.post.assert_awaited_once_with("/verify/templates/tmpl_123/publish")
        assert isinstance(template, Template)

    @pytest.mark.asyncio
    async def test_unpublish(self) -> None:
        resource, transport = _resource({**TEMPLATE_JSON, "isPublished": False})

        template = await resource.unpublish("tmpl_123")

        transport.post.assert_awaited_once_with("/verify/templates/tmpl_123/unpublish")
        assert template.is_published is False

    @pytest.mark.asyncio
    async def test_clone_uses_templates_prefix(self) -> None:
        """Clone não usa o prefixo /verify."""
        resource, transport = _resource({**TEMPLATE_JSON, "id": "tmpl_999"})

        template = await resource.clone("tmpl_123")

        transport.post.assert_awaited_once_with("/templates/tmpl_123/clone")
        assert template.id == "tmpl_999"

    @pytest.mark.asyncio
    async def test_clone_with_name(self) -> None:
        resource, transport = _resource({**TEMPLATE_JSON, "id": "tmpl_999", "name": "Copy"})

        template = await resource.clone_with_name("tmpl_123", "Copy")

        transport.post.assert_awaited_once_with(
            "/templates/tmpl_123/clone",
            json={"name": "Copy"},
        )
        assert template.name == "Copy"


class TestTemplatesResourceErrors:
    """Falhas de transporte e de decodificação sobem inalteradas."""

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self) -> None:
        transport = AsyncMock()
        error = SendlyApiError(404, "not_found", "Template not found", is_permanent=True)
        transport.get.side_effect = error

        with pytest.raises(SendlyApiError) as exc_info:
            await TemplatesResource(transport).get("missing")

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_connection_error_propagates(self) -> None:
        transport = AsyncMock()
        transport.post.side_effect = HttpError("http_connection_error", is_retryable=True)

        with pytest.raises(HttpError, match="http_connection_error"):
            await TemplatesResource(transport).publish("tmpl_123")

    @pytest.mark.asyncio
    async def test_unknown_enum_is_decoding_error(self) -> None:
        resource, _ = _resource({**TEMPLATE_JSON, "type": "system"})

        with pytest.raises(ValidationError):
            await resource.get("tmpl_123")

    @pytest.mark.asyncio
    async def test_mistyped_scalar_is_decoding_error(self) -> None:
        resource, _ = _resource(
            {"templates": [TEMPLATE_JSON], "pagination": {"limit": "25"}}
        )

        with pytest.raises(ValidationError):
            await resource.list()

    @pytest.mark.asyncio
    async def test_wrong_envelope_shape_is_decoding_error(self) -> None:
        resource, _ = _resource({"data": []})

        with pytest.raises(ValidationError):
            await resource.list()

    @pytest.mark.asyncio
    async def test_malformed_json_propagates(self) -> None:
        transport = AsyncMock()
        response = MagicMock()
        response.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
        transport.delete.return_value = response

        with pytest.raises(json.JSONDecodeError):
            await TemplatesResource(transport).delete("tmpl_123")


class TestTemplatesResourceConcurrency:
    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self) -> None:
        transport = AsyncMock()

        async def fake_get(path: str, params: Any = None) -> MagicMock:
            await asyncio.sleep(0)
            template_id = path.rsplit("/", 1)[-1]
            return _response({**TEMPLATE_JSON, "id": template_id})

        transport.get.side_effect = fake_get
        resource = TemplatesResource(transport)

        results = await asyncio.gather(*(resource.get(f"tmpl_{i}") for i in range(5)))

        assert [t.id for t in results] == [f"tmpl_{i}" for i in range(5)]
