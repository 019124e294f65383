"""Build the process-wide theme manager and block registry at startup."""
from __future__ import annotations

import logging
from importlib import import_module
from typing import Any, Mapping, Optional

from django.apps import apps as django_apps

from .conf import get_config
from .discovery import discover_blocks, discover_themes
from .manager import ThemeManager
from .registry import BlockRegistry
from .utils import data_get

log = logging.getLogger(__name__)

__all__ = [
    "build_theme_manager",
    "build_block_registry",
    "run_registrars",
    "get_theme_manager",
    "get_block_registry",
]

APP_LABEL = "django_themes"


def build_theme_manager(config: Optional[Mapping[str, Any]] = None) -> ThemeManager:
    config = get_config() if config is None else config
    manager = ThemeManager(config)
    if data_get(config, "auto_discover", True):
        path = data_get(config, "paths.themes")
        namespace = data_get(config, "namespaces.themes", "themes")
        if path:
            for theme_class in discover_themes(path, namespace):
                manager.register_class(theme_class)
    return manager


def build_block_registry(config: Optional[Mapping[str, Any]] = None) -> BlockRegistry:
    config = get_config() if config is None else config
    registry = BlockRegistry()
    if data_get(config, "auto_discover", True):
        path = data_get(config, "paths.blocks")
        namespace = data_get(config, "namespaces.blocks", "blocks")
        if path:
            registry.register_many(discover_blocks(path, namespace))
    return registry


def run_registrars(entries, manager: ThemeManager, registry: BlockRegistry) -> None:
    """Run ``"module"`` or ``"module:callable"`` registration entry points.

    A bare module is imported for its side effects; a callable is invoked
    with the theme manager and block registry.
    """
    for entry in entries or []:
        try:
            module_path, callable_name = entry.split(":", 1)
        except ValueError:
            import_module(entry)
        else:
            module = import_module(module_path)
            registrar = getattr(module, callable_name)
            registrar(manager, registry)


def get_theme_manager() -> ThemeManager:
    return django_apps.get_app_config(APP_LABEL).theme_manager


def get_block_registry() -> BlockRegistry:
    return django_apps.get_app_config(APP_LABEL).block_registry
