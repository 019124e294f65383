from django.core.checks import Warning, register


@register()
def check_default_theme(app_configs=None, **kwargs):
    """Warn when the configured default theme is not registered."""
    from .loading import get_theme_manager

    manager = get_theme_manager()
    if manager is None:
        return []
    default = manager.config("default")
    if not default or manager.has(default):
        return []
    registered = ", ".join(manager.registered()) or "none"
    return [
        Warning(
            f"Default theme {default!r} is not registered.",
            hint=f"Set DJANGO_THEMES['default'] to one of: {registered}.",
            id="django_themes.W001",
        )
    ]
