from __future__ import annotations

import copy
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict, List, Mapping, Optional

from .contracts import Theme
from .registry import LazyRegistry
from .utils import data_get

log = logging.getLogger(__name__)

__all__ = ["ThemeManager"]


class ThemeManager(LazyRegistry[Theme]):
    """Registry of themes with a single active selection.

    Registering a theme stores its class only; :meth:`use` and
    :meth:`current` construct just the selected theme. :meth:`load_all` is
    the one path that builds every theme and belongs in admin or
    theme-picker views, not in per-request code.

    The selection lives in a context variable owned by the manager, so
    concurrent requests sharing one manager each see their own theme.
    """

    contract = Theme

    def __init__(self, config: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__()
        self._config: Dict[str, Any] = dict(config or {})
        self._current: ContextVar[Optional[str]] = ContextVar(
            f"current_theme_{id(self)}", default=None
        )

    # ---------------
    # Registration
    # ---------------

    def register(self, theme_id: str, theme_class) -> "ThemeManager":
        """Register ``theme_class`` under ``theme_id`` without constructing it."""
        cls = self._validate(theme_class)
        self._store(theme_id, cls)
        return self

    def register_class(self, theme_class) -> "ThemeManager":
        """Register ``theme_class`` under the id its instance declares."""
        cls = self._validate(theme_class)
        instance = cls()
        self._store(instance.id(), cls, instance)
        return self

    # ---------------
    # Selection
    # ---------------

    def use(self, theme_id: str) -> "ThemeManager":
        """Select the active theme, falling back when ``theme_id`` is unknown.

        Unknown ids fall back to the configured default when that is
        registered, otherwise to the first registered theme.
        """
        if not self.has(theme_id):
            fallback = self._config.get("default")
            if not fallback or not self.has(fallback):
                fallback = next(iter(self._registered), None)
            log.debug("Theme %r is not registered; using %r", theme_id, fallback)
            theme_id = fallback
        self._current.set(theme_id)
        if theme_id is not None:
            self._resolve(theme_id)
        return self

    def reset(self) -> None:
        """Clear the selection; :meth:`current` falls back to the default again."""
        self._current.set(None)

    def current(self) -> Optional[Theme]:
        theme_id = self._current.get() or self._config.get("default")
        if not theme_id:
            return None
        return self._resolve(theme_id)

    def get(self, theme_id: str) -> Optional[Theme]:
        return self._resolve(theme_id)

    def registered(self) -> List[str]:
        return list(self._registered)

    def load_all(self) -> Dict[str, Theme]:
        """Construct every registered theme. Expensive; keep off the request path."""
        return self._resolve_all()

    def list(self) -> List[Dict[str, Any]]:
        return [theme.to_dict() for theme in self.load_all().values()]

    def list_minimal(self) -> List[Dict[str, str]]:
        return [
            {"id": theme.id(), "name": theme.name()}
            for theme in self.load_all().values()
        ]

    # ---------------
    # Content
    # ---------------

    def resolve_block_content(
        self, block_type: str, content: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """Merge ``content`` over the current theme's defaults for ``block_type``."""
        content = dict(content or {})
        theme = self.current()
        if theme is None:
            return content
        merged = copy.deepcopy(dict(theme.default_content(block_type)))
        merged.update(content)
        return merged

    def create_page_blocks(self) -> List[Dict[str, Any]]:
        """Build page block records from the current theme's default blocks."""
        theme = self.current()
        if theme is None:
            return []
        stamp = int(time.time())
        return [
            {
                "id": f"block-{stamp}-{index}-{uuid.uuid4().hex[:9]}",
                "type": block_type,
                "content": copy.deepcopy(theme.default_content(block_type)),
                "settings": {},
            }
            for index, block_type in enumerate(theme.default_blocks())
        ]

    def config(self, key: str, default: Any = None) -> Any:
        return data_get(self._config, key, default)
