import logging

from django.apps import AppConfig

log = logging.getLogger(__name__)


class DjangoThemesConfig(AppConfig):
    name = "django_themes"
    verbose_name = "Django Themes"

    theme_manager = None
    block_registry = None

    def ready(self):
        from .conf import get_config
        from .loading import build_block_registry, build_theme_manager, run_registrars

        # System checks register on import.
        from . import checks  # noqa: F401

        config = get_config()
        self.theme_manager = build_theme_manager(config)
        self.block_registry = build_block_registry(config)
        run_registrars(config.get("registrars"), self.theme_manager, self.block_registry)

        log.info(
            "Loaded %d theme(s) and %d block type(s)",
            len(self.theme_manager),
            len(self.block_registry),
        )
