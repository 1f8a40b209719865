"""Recursos da API Sendly."""

from sendly.resources.templates import TemplatesResource

__all__ = ["TemplatesResource"]
