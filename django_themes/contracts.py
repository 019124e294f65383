"""Capability contracts every theme and block implementation must satisfy.

Optional values are returned as ``None`` rather than raised.
"""
from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any

__all__ = ["Theme", "Block", "is_implementation"]


class Theme(ABC):
    """A named visual theme: palette, default page blocks and block defaults."""

    @abstractmethod
    def id(self) -> str:
        """Unique theme identifier, e.g. ``"classic-orange"``."""

    @abstractmethod
    def name(self) -> str:
        """Human-readable theme name."""

    @abstractmethod
    def description(self) -> str:
        """Short description of the theme's style and purpose."""

    @abstractmethod
    def colors(self) -> dict[str, str]:
        """Colour palette keyed by role, e.g. ``{"primary": "#FF6B00"}``."""

    @abstractmethod
    def preview(self) -> str | None:
        """URL or path of a preview image, or ``None``."""

    @abstractmethod
    def default_blocks(self) -> list[str]:
        """Block types placed on a new page, in order."""

    @abstractmethod
    def default_content(self, block_type: str) -> dict[str, Any]:
        """Theme-specific default content for ``block_type``."""

    @abstractmethod
    def block_override(self, block_type: str) -> str | None:
        """Component path replacing the block's own component, or ``None``."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Plain record shared with the frontend."""


class Block(ABC):
    """A reusable content block with editable content and settings schemas."""

    @abstractmethod
    def type(self) -> str:
        """Unique block type, e.g. ``"hero"``."""

    @abstractmethod
    def name(self) -> str:
        """Human-readable block name."""

    @abstractmethod
    def category(self) -> str:
        """Category used to group blocks in the block picker."""

    @abstractmethod
    def icon(self) -> str:
        """SVG path data or icon identifier."""

    @abstractmethod
    def component(self) -> str:
        """Frontend component path that renders this block."""

    @abstractmethod
    def content_schema(self) -> dict[str, dict[str, Any]]:
        """Editable content fields: name -> ``{"type", "label", ...}``."""

    @abstractmethod
    def settings_schema(self) -> dict[str, dict[str, Any]]:
        """Configurable settings: name -> ``{"type", "label", ...}``."""

    @abstractmethod
    def default_content(self) -> dict[str, Any]:
        """Initial content when the block is added to a page."""

    @abstractmethod
    def default_settings(self) -> dict[str, Any]:
        """Initial settings when the block is added to a page."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Plain record consumed by the block picker."""


def is_implementation(candidate: Any, contract: type) -> bool:
    """Return True if ``candidate`` is a concrete class implementing ``contract``."""
    return (
        inspect.isclass(candidate)
        and issubclass(candidate, contract)
        and not inspect.isabstract(candidate)
    )
