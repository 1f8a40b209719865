"""Formatters de logging estruturado do SDK.

Campos presentes em todo log JSON:
- asctime
- level (levelname)
- logger (name)
- message
- correlation_id
- service

Nunca incluir API key ou corpo de requisição nos logs.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "DEBUG",
            "logger": "sendly.resources.templates.resource",
            "message": "templates_request",
            "correlation_id": "abc-123",
            "service": "sendly"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
