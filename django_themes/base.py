from __future__ import annotations

from abc import abstractmethod
from typing import Any

from .contracts import Block, Theme

__all__ = ["BaseTheme", "BaseBlock"]


class BaseTheme(Theme):
    """Default implementation of the theme contract.

    Subclasses set :attr:`theme_id` and provide :meth:`name` and
    :meth:`colors`; every other method has an empty default and is
    overridden only where the theme customises it::

        class ClassicOrangeTheme(BaseTheme):
            theme_id = "classic-orange"

            def name(self):
                return "Classic Orange"

            def colors(self):
                return {"primary": "#FF6B00", "secondary": "#1A1A2E"}

            def default_blocks(self):
                return ["hero", "features", "cta"]
    """

    theme_id = "default"

    def id(self) -> str:
        return self.theme_id

    @abstractmethod
    def name(self) -> str:
        """Return the human-readable theme name."""

    def description(self) -> str:
        return ""

    @abstractmethod
    def colors(self) -> dict[str, str]:
        """Return the colour palette keyed by role."""

    def preview(self) -> str | None:
        return None

    def default_blocks(self) -> list[str]:
        return []

    def default_content(self, block_type: str) -> dict[str, Any]:
        return {}

    def block_override(self, block_type: str) -> str | None:
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id(),
            "name": self.name(),
            "description": self.description(),
            "colors": self.colors(),
            "preview": self.preview(),
            "defaultBlocks": self.default_blocks(),
        }


class BaseBlock(Block):
    """Default implementation of the block contract.

    Metadata is declared with class attributes; the schema and default
    methods return empty mappings until overridden.
    """

    block_type: str = ""
    block_name: str = ""
    block_category: str = "Content"
    block_icon: str = "M4 6h16M4 12h16M4 18h16"
    block_component: str = ""

    def type(self) -> str:
        return self.block_type

    def name(self) -> str:
        return self.block_name

    def category(self) -> str:
        return self.block_category

    def icon(self) -> str:
        return self.block_icon

    def component(self) -> str:
        return self.block_component

    def content_schema(self) -> dict[str, dict[str, Any]]:
        return {}

    def settings_schema(self) -> dict[str, dict[str, Any]]:
        return {}

    def default_content(self) -> dict[str, Any]:
        return {}

    def default_settings(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type(),
            "name": self.name(),
            "category": self.category(),
            "icon": self.icon(),
            "component": self.component(),
            "contentSchema": self.content_schema(),
            "settingsSchema": self.settings_schema(),
            "defaultContent": self.default_content(),
            "defaultSettings": self.default_settings(),
        }
