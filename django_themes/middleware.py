from django.utils.deprecation import MiddlewareMixin

from .loading import get_theme_manager


class ThemeMiddleware(MiddlewareMixin):
    """Select the active theme for each request.

    The theme id is taken from, in order: the ``theme_id`` argument, the
    :meth:`resolve_from_request` hook, the session and the configured
    default. Registered ids are passed to ``ThemeManager.use`` and the
    resulting theme is exposed as ``request.theme``. The selection is
    cleared again once the response (or exception) has been produced.
    """

    session_key = "theme"

    def __init__(self, get_response, theme_id=None):
        super().__init__(get_response)
        self.theme_id = theme_id

    def process_request(self, request):
        manager = get_theme_manager()
        manager.reset()
        theme_id = (
            self.theme_id
            or self.resolve_from_request(request)
            or self.session_theme(request)
            or manager.config("default")
        )
        request.theme = None
        if theme_id and manager.has(theme_id):
            manager.use(theme_id)
            request.theme = manager.current()

    def process_response(self, request, response):
        get_theme_manager().reset()
        return response

    def process_exception(self, request, exception):
        get_theme_manager().reset()
        return None

    def resolve_from_request(self, request):
        """Override to pick a theme from the subdomain, user profile, etc."""
        return None

    def session_theme(self, request):
        session = getattr(request, "session", None)
        if session is None:
            return None
        return session.get(self.session_key)
