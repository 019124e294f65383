from django_themes.tests.fixtures.discovery.concrete import ConcreteTheme  # noqa: F401

PALETTE_ROLES = ("primary", "secondary")


class ColorHelper:
    def roles(self):
        return list(PALETTE_ROLES)
