"""Django Themes reusable application.

Discovers theme and block classes at startup and resolves the active theme
per request without constructing the others.
"""

from .base import BaseBlock, BaseTheme
from .contracts import Block, Theme
from .exceptions import InvalidImplementation

__all__ = [
    "Theme",
    "Block",
    "BaseTheme",
    "BaseBlock",
    "InvalidImplementation",
]
