from django import template
from django.utils.text import camel_case_to_spaces

from django_themes.loading import get_block_registry, get_theme_manager

register = template.Library()


def _palette(theme):
    if theme is None:
        return {}
    if isinstance(theme, dict):
        return theme.get("colors") or {}
    return theme.colors()


def css_variables(colors):
    """``{"primaryDark": "#111"}`` -> ``"--theme-primary-dark: #111;"``."""
    declarations = []
    for role, value in (colors or {}).items():
        name = "-".join(camel_case_to_spaces(role).replace("_", " ").split())
        declarations.append(f"--theme-{name}: {value};")
    return " ".join(declarations)


def _active_theme(context):
    request = context.get("request")
    if request is not None and hasattr(request, "theme"):
        return request.theme
    return get_theme_manager().current()


@register.filter
def theme_color(theme, role):
    """``{{ theme|theme_color:"primary" }}``; empty string when the role is missing."""
    return _palette(theme).get(role, "")


@register.simple_tag(takes_context=True)
def theme_css_variables(context):
    if "theme" in context:
        theme = context["theme"]
    else:
        theme = _active_theme(context)
    return css_variables(_palette(theme))


@register.simple_tag(takes_context=True)
def block_component(context, block_type):
    """Component for ``block_type``: the active theme's override, else the block's own."""
    theme = _active_theme(context)
    if theme is not None:
        override = theme.block_override(block_type)
        if override:
            return override
    return get_block_registry().component(block_type) or ""
