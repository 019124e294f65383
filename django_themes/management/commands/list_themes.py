import json

from django.core.management.base import BaseCommand

from django_themes.loading import get_block_registry, get_theme_manager


class Command(BaseCommand):
    help = (
        "List registered theme ids and block types.\n\n"
        "Without --json nothing is constructed; with --json every theme and "
        "block is loaded and its full record printed."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--json",
            action="store_true",
            default=False,
            help="Print the serialized theme and block records as JSON.",
        )

    def handle(self, *args, **options):
        manager = get_theme_manager()
        registry = get_block_registry()

        if options.get("json"):
            payload = {"themes": manager.list(), "blocks": registry.list()}
            self.stdout.write(json.dumps(payload, indent=2, sort_keys=True))
            return

        default = manager.config("default")
        self.stdout.write(self.style.MIGRATE_HEADING("Themes:"))
        for theme_id in manager.registered():
            marker = " (default)" if theme_id == default else ""
            self.stdout.write(f"  {theme_id}{marker}")
        if not manager.registered():
            self.stdout.write("  (none)")

        self.stdout.write(self.style.MIGRATE_HEADING("Blocks:"))
        for block_type in registry.types():
            self.stdout.write(f"  {block_type}")
        if not registry.types():
            self.stdout.write("  (none)")
