"""Erros e parsing de corpo de erro da API Sendly."""

from __future__ import annotations

from typing import Any

from sendly.connectors.http_base import HttpError

# 4xx que não mudam com nova tentativa
PERMANENT_STATUS_CODES = frozenset({400, 401, 403, 404, 409, 413, 422})


class SendlyApiError(HttpError):
    """Erro reportado pela API (status >= 400)."""

    def __init__(
        self,
        status_code: int,
        error_code: str,
        error_message: str,
        is_permanent: bool,
    ) -> None:
        super().__init__(
            f"Sendly API error: {error_code} ({status_code})",
            status_code=status_code,
            is_retryable=not is_permanent,
        )
        self.error_code = error_code
        self.error_message = error_message
        self.is_permanent = is_permanent


def is_permanent_error(status_code: int) -> bool:
    """Classifica status como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404, 409, 413, 422
    Erros transitórios: 429 (rate limit), 5xx e qualquer outro
    """
    return status_code in PERMANENT_STATUS_CODES


def parse_api_error(status_code: int, response_data: Any) -> SendlyApiError:
    """Converte corpo de erro em SendlyApiError.

    Formatos aceitos:
        {"error": {"code": "...", "message": "..."}}
        {"error": "not_found", "message": "..."}
        {"message": "..."}
    Qualquer outro corpo (inclusive não-JSON) gera código "unknown".
    """
    error_code = "unknown"
    error_message = "Erro desconhecido"

    if isinstance(response_data, dict):
        error_obj = response_data.get("error")
        if isinstance(error_obj, dict):
            error_code = str(error_obj.get("code") or error_code)
            error_message = str(error_obj.get("message") or error_message)
        else:
            if isinstance(error_obj, str) and error_obj:
                error_code = error_obj
            error_message = str(response_data.get("message") or error_message)

    return SendlyApiError(
        status_code=status_code,
        error_code=error_code,
        error_message=error_message,
        is_permanent=is_permanent_error(status_code),
    )
