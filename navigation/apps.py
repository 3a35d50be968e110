# backend/navigation/apps.py
from django.apps import AppConfig


class NavigationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "navigation"
    verbose_name = "Navigation"

    def ready(self):
        # Import signals so they get registered
        from . import signals  # noqa: F401
