"""Runtime access to Django Themes configuration defaults."""
from __future__ import annotations

import copy
import os
from typing import Any

import environ
from django.conf import settings as django_settings

__all__ = ["get_config"]

env = environ.Env()


def _merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _default_config() -> dict[str, Any]:
    base_dir = getattr(django_settings, "BASE_DIR", None) or os.getcwd()
    return {
        "default": env.str("DJANGO_THEME", default="default"),
        "auto_discover": True,
        "paths": {
            "themes": os.path.join(str(base_dir), "themes"),
            "blocks": os.path.join(str(base_dir), "blocks"),
        },
        "namespaces": {
            "themes": "themes",
            "blocks": "blocks",
        },
        "registrars": [],
        "stubs_dir": None,
    }


def get_config() -> dict[str, Any]:
    """Return the project's ``DJANGO_THEMES`` merged over the package defaults.

    The setting is optional; a project without it gets the defaults.
    """
    overrides = getattr(django_settings, "DJANGO_THEMES", None) or {}
    return _merge(_default_config(), copy.deepcopy(dict(overrides)))
