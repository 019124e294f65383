"""Context processors exposing the active theme to templates."""
from __future__ import annotations

from .loading import get_theme_manager
from .templatetags.themes import css_variables

__all__ = ["theme"]


def theme(request):
    """Expose the current theme record and its CSS custom properties.

    Once :class:`~django_themes.middleware.ThemeMiddleware` has run,
    ``request.theme`` is authoritative, including ``None`` for an
    unregistered choice.
    """
    if hasattr(request, "theme"):
        current = request.theme
    else:
        current = get_theme_manager().current()
    if current is None:
        return {"theme": None, "theme_css_variables": ""}
    return {
        "theme": current.to_dict(),
        "theme_css_variables": css_variables(current.colors()),
    }
