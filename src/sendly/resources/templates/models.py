"""Modelos de template e envelopes de resposta da API.

Decodificação a partir do JSON da API:
- Campos com alias legado aceitam as duas grafias; quando ambas vêm no
  mesmo objeto, a chave canônica (snake_case) prevalece.
- Campos opcionais ausentes assumem o default declarado.
- template_type desconhecido é erro de validação, nunca vira "custom".
- Booleanos e inteiros são estritos: "yes", "on", "25" ou 1 não são
  convertidos e geram erro de validação.
"""

from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TemplateType(str, Enum):
    """Origem do template."""

    PRESET = "preset"
    CUSTOM = "custom"


# Tabela total variante -> token de wire (query string e payloads)
TEMPLATE_TYPE_WIRE_TOKENS: dict[TemplateType, str] = {
    TemplateType.PRESET: "preset",
    TemplateType.CUSTOM: "custom",
}


def template_type_to_wire(template_type: TemplateType) -> str:
    """Retorna o token de wire da variante (ex: PRESET -> "preset")."""
    return TEMPLATE_TYPE_WIRE_TOKENS[template_type]


class Template(BaseModel):
    """Template como retornado pelo servidor."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    name: str
    body: str
    template_type: TemplateType = Field(
        default=TemplateType.CUSTOM,
        validation_alias=AliasChoices("template_type", "type"),
    )
    locale: str | None = None
    variables: list[str] = Field(default_factory=list)
    is_default: bool = Field(
        default=False,
        strict=True,
        validation_alias=AliasChoices("is_default", "isDefault"),
    )
    is_published: bool = Field(
        default=False,
        strict=True,
        validation_alias=AliasChoices("is_published", "isPublished"),
    )
    # Formato do timestamp é do servidor; não é parseado aqui
    created_at: str | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
    )
    updated_at: str | None = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
    )

    def is_preset(self) -> bool:
        return self.template_type is TemplateType.PRESET

    def is_custom(self) -> bool:
        return self.template_type is TemplateType.CUSTOM


class TemplatePagination(BaseModel):
    """Metadados de paginação da listagem."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    limit: int = Field(default=0, strict=True)
    has_more: bool = Field(
        default=False,
        strict=True,
        validation_alias=AliasChoices("has_more", "hasMore"),
    )


class TemplateList(BaseModel):
    """Envelope de listagem.

    pagination é None quando o servidor não envia metadados; um objeto
    vazio decodifica para limit=0, has_more=False.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    templates: list[Template]
    pagination: TemplatePagination | None = None


class DeleteTemplateResponse(BaseModel):
    """Resultado de remoção de template."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    success: bool = Field(strict=True)
    message: str | None = None
