"""Configuração de logging estruturado do SDK.

Uso:
    from sendly.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="minha_app")
    logger = get_logger(__name__)
"""

from sendly.config.logging.config import configure_logging, get_logger
from sendly.config.logging.filters import CorrelationIdFilter
from sendly.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
