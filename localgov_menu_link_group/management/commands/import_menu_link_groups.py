import logging

from django.core.management.base import BaseCommand, CommandError

from localgov_menu_link_group.importers import import_groups_from_json

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Create or update menu link groups from a JSON file."

    def add_arguments(self, parser):
        parser.add_argument("path", type=str, help="Path to the JSON file to import")

    def handle(self, *args, **options):
        path = options["path"]
        try:
            groups = import_groups_from_json(path)
        except FileNotFoundError:
            raise CommandError(f"File not found: {path}")
        except Exception as exc:
            logger.exception("Import failed")
            raise CommandError(f"Import failed: {exc}") from exc

        for group in groups:
            self.stdout.write(f"{group.menu_link_id}: {group.label}")
        self.stdout.write(self.style.SUCCESS(f"Imported {len(groups)} menu link groups from {path}"))
