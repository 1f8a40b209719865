"""Configuração do SDK: settings e logging."""

from sendly.config.settings import (
    SENDLY_API_BASE_URL,
    SendlySettings,
    get_sendly_settings,
)

__all__ = [
    "SENDLY_API_BASE_URL",
    "SendlySettings",
    "get_sendly_settings",
]
