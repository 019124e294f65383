from __future__ import annotations

import os
from abc import ABCMeta, abstractmethod
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.template import Context, Engine

from django_themes.conf import get_config
from django_themes.utils import data_get, snake, studly

STUBS_DIR = Path(__file__).resolve().parent.parent / "stubs"


class ScaffoldCommand(BaseCommand, metaclass=ABCMeta):
    """Render a packaged ``.py-tpl`` stub into a discovery directory."""

    kind = ""
    suffix = ""

    def add_arguments(self, parser):
        parser.add_argument("name", help=f"The name of the {self.kind} class")

    def class_name(self, name: str) -> str:
        class_name = studly(name)
        if not class_name or not class_name.isidentifier():
            raise CommandError(f"Invalid {self.kind} name: {name!r}")
        if not class_name.endswith(self.suffix):
            class_name += self.suffix
        return class_name

    def base_name(self, class_name: str) -> str:
        return class_name[: -len(self.suffix)] or class_name

    @abstractmethod
    def get_context(self, class_name: str) -> dict:
        """Template variables for the stub."""

    def get_stub(self, config) -> str:
        filename = f"{self.kind}.py-tpl"
        custom_dir = data_get(config, "stubs_dir")
        if custom_dir:
            custom = Path(custom_dir) / filename
            if custom.exists():
                return custom.read_text(encoding="utf-8")
        return (STUBS_DIR / filename).read_text(encoding="utf-8")

    def handle(self, *args, **options):
        config = get_config()
        class_name = self.class_name(options["name"])
        directory = data_get(config, f"paths.{self.kind}s")
        if not directory:
            raise CommandError(f"DJANGO_THEMES['paths']['{self.kind}s'] is not configured.")

        path = Path(directory) / f"{snake(self.base_name(class_name))}.py"
        if path.exists():
            raise CommandError(f"{self.kind.title()} [{class_name}] already exists at {path}.")

        os.makedirs(path.parent, exist_ok=True)
        template = Engine().from_string(self.get_stub(config))
        content = template.render(Context(self.get_context(class_name), autoescape=False))
        path.write_text(content, encoding="utf-8")

        self.stdout.write(
            self.style.SUCCESS(f"{self.kind.title()} [{class_name}] created successfully at {path}.")
        )
