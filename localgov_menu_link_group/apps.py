# backend/localgov_menu_link_group/apps.py
from django.apps import AppConfig


class LocalGovMenuLinkGroupConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "localgov_menu_link_group"
    verbose_name = "Menu Link Groups"

    def ready(self):
        from navigation.menu_links import menu_link_manager

        from . import signals  # noqa: F401
        from .deriver import BASE_MENU_LINK_DEFINITION, MenuGroupsDeriver
        from .models import GROUP_MENU_LINK_BASE_ID

        menu_link_manager.register_deriver(
            GROUP_MENU_LINK_BASE_ID,
            MenuGroupsDeriver(),
            BASE_MENU_LINK_DEFINITION,
        )
