from django_themes.management.scaffold import ScaffoldCommand
from django_themes.utils import headline, kebab


class Command(ScaffoldCommand):
    help = "Create a new theme class in the configured themes directory."

    kind = "theme"
    suffix = "Theme"

    def get_context(self, class_name):
        base = self.base_name(class_name)
        return {
            "class_name": class_name,
            "theme_id": kebab(base),
            "name": headline(base),
        }
