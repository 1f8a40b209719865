"""Recurso de templates: modelos, builders e fachada."""

from .models import (
    TEMPLATE_TYPE_WIRE_TOKENS,
    DeleteTemplateResponse,
    Template,
    TemplateList,
    TemplatePagination,
    TemplateType,
    template_type_to_wire,
)
from .requests import (
    MAX_LIST_LIMIT,
    CloneTemplateRequest,
    CreateTemplateRequest,
    ListTemplatesOptions,
    UpdateTemplateRequest,
)
from .resource import TemplatesResource

__all__ = [
    "MAX_LIST_LIMIT",
    "TEMPLATE_TYPE_WIRE_TOKENS",
    "CloneTemplateRequest",
    "CreateTemplateRequest",
    "DeleteTemplateResponse",
    "ListTemplatesOptions",
    "Template",
    "TemplateList",
    "TemplatePagination",
    "TemplateType",
    "TemplatesResource",
    "UpdateTemplateRequest",
    "template_type_to_wire",
]
