"""Builders de requisição para templates.

Builders são imutáveis: cada with_* devolve uma nova instância, permitindo
encadear chamadas:

    request = (
        CreateTemplateRequest(name="Boas-vindas", body="Olá {{name}}")
        .with_locale("pt-BR")
        .with_published(True)
    )

Campos não definidos nunca aparecem no payload. O servidor trata campo
ausente diferente de campo presente e vazio (ex: update parcial).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sendly.resources.templates.models import TemplateType, template_type_to_wire

MAX_LIST_LIMIT = 100


def _clamp_limit(limit: int) -> int:
    return min(limit, MAX_LIST_LIMIT)


class CreateTemplateRequest(BaseModel):
    """Payload de criação de template."""

    model_config = ConfigDict(frozen=True)

    name: str
    body: str
    locale: str | None = None
    is_published: bool | None = Field(default=None, serialization_alias="isPublished")

    def with_locale(self, locale: str) -> CreateTemplateRequest:
        return self.model_copy(update={"locale": locale})

    def with_published(self, published: bool) -> CreateTemplateRequest:
        return self.model_copy(update={"is_published": published})

    def to_payload(self) -> dict[str, Any]:
        """Serializa para o JSON da API, omitindo campos não definidos."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UpdateTemplateRequest(BaseModel):
    """Patch parcial de template (apenas campos definidos são enviados).

    Um builder vazio serializa para {} (update sem efeito).
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    body: str | None = None
    locale: str | None = None
    is_published: bool | None = Field(default=None, serialization_alias="isPublished")

    def with_name(self, name: str) -> UpdateTemplateRequest:
        return self.model_copy(update={"name": name})

    def with_body(self, body: str) -> UpdateTemplateRequest:
        return self.model_copy(update={"body": body})

    def with_locale(self, locale: str) -> UpdateTemplateRequest:
        return self.model_copy(update={"locale": locale})

    def with_published(self, published: bool) -> UpdateTemplateRequest:
        return self.model_copy(update={"is_published": published})

    def has_updates(self) -> bool:
        return any(value is not None for value in self.model_dump().values())

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CloneTemplateRequest(BaseModel):
    """Payload de clonagem com novo nome."""

    model_config = ConfigDict(frozen=True)

    name: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()


class ListTemplatesOptions(BaseModel):
    """Filtros e paginação da listagem.

    limit acima de MAX_LIST_LIMIT é reduzido silenciosamente para o máximo,
    tanto no construtor quanto em with_limit.
    """

    model_config = ConfigDict(frozen=True)

    limit: int | None = None
    template_type: TemplateType | None = None
    locale: str | None = None

    @field_validator("limit")
    @classmethod
    def clamp_limit(cls, value: int | None) -> int | None:
        return None if value is None else _clamp_limit(value)

    def with_limit(self, limit: int) -> ListTemplatesOptions:
        return self.model_copy(update={"limit": _clamp_limit(limit)})

    def with_template_type(self, template_type: TemplateType | str) -> ListTemplatesOptions:
        return self.model_copy(update={"template_type": TemplateType(template_type)})

    def with_locale(self, locale: str) -> ListTemplatesOptions:
        return self.model_copy(update={"locale": locale})

    def to_query_params(self) -> list[tuple[str, str]]:
        """Converte para pares da query string, na ordem limit, type, locale.

        Opções não definidas não geram par.
        """
        params: list[tuple[str, str]] = []
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        if self.template_type is not None:
            params.append(("type", template_type_to_wire(self.template_type)))
        if self.locale is not None:
            params.append(("locale", self.locale))
        return params
