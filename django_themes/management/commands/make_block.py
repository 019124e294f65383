from django_themes.management.scaffold import ScaffoldCommand
from django_themes.utils import headline, kebab


class Command(ScaffoldCommand):
    help = "Create a new block class in the configured blocks directory."

    kind = "block"
    suffix = "Block"

    def get_context(self, class_name):
        base = self.base_name(class_name)
        return {
            "class_name": class_name,
            "block_type": kebab(base),
            "name": headline(base),
            "component": base,
        }
