"""SDK assíncrono da API Sendly."""

from sendly.client import Sendly
from sendly.connectors import HttpError, SendlyApiError
from sendly.resources.templates import (
    CreateTemplateRequest,
    DeleteTemplateResponse,
    ListTemplatesOptions,
    Template,
    TemplateList,
    TemplatePagination,
    TemplatesResource,
    TemplateType,
    UpdateTemplateRequest,
)
from sendly.version import __version__

__all__ = [
    "CreateTemplateRequest",
    "DeleteTemplateResponse",
    "HttpError",
    "ListTemplatesOptions",
    "Sendly",
    "SendlyApiError",
    "Template",
    "TemplateList",
    "TemplatePagination",
    "TemplateType",
    "TemplatesResource",
    "UpdateTemplateRequest",
    "__version__",
]
