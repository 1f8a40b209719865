"""Configuração centralizada de logging do SDK.

Uso:
    from sendly.config.logging import configure_logging, get_logger

    # Uma vez, na inicialização da aplicação que usa o SDK.
    # Sem level, usa SendlySettings.log_level (SENDLY_LOG_LEVEL).
    configure_logging(service_name="minha_app")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.debug("templates_request", extra={"path": "/verify/templates"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sendly.config.logging.filters import CorrelationIdFilter
from sendly.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "sendly"


def configure_logging(
    level: str | None = None,
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Se None, usa get_sendly_settings().log_level.
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual. Padrão: sendly.observability.get_correlation_id.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    if level is None:
        from sendly.config.settings import get_sendly_settings

        level = get_sendly_settings().log_level

    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)
