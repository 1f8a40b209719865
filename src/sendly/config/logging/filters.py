"""Filter de logging que injeta o contexto do SDK em cada record.

Campos injetados:
- correlation_id: o da chamada atual (ContextVar de sendly.observability)
- service: nome do serviço que usa o SDK
- sdk_version: versão do sendly, para cruzar logs com o User-Agent enviado
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sendly.observability import get_correlation_id
from sendly.version import __version__

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Enriquece records com correlation_id, service e sdk_version.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Fonte do correlation_id. Padrão: o
            correlation_id definido via sendly.observability.set_correlation_id,
            o mesmo enviado no header X-Correlation-Id.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or get_correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado via `extra` tem precedência
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        record.sdk_version = __version__
        return True
