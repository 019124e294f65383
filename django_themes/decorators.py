from django.utils.decorators import decorator_from_middleware_with_args

from .middleware import ThemeMiddleware

__all__ = ["use_theme"]

# @use_theme("classic-orange") forces that theme for a single view.
use_theme = decorator_from_middleware_with_args(ThemeMiddleware)
