# backend/navigation/models.py
from django.db import models


class MenuLink(models.Model):
    MENU_MAIN = "main"
    MENU_ADMIN = "admin"
    MENU_ACCOUNT = "account"
    MENU_FOOTER = "footer"

    menu_name = models.CharField(
        max_length=32,
        default=MENU_MAIN,
        db_index=True,
        help_text="Menu this link belongs to, e.g. 'main', 'admin' or 'account'.",
    )
    link_id = models.CharField(
        max_length=255,
        unique=True,
        help_text="Machine id shared across all menus, e.g. 'system.admin_content'.",
    )
    title = models.CharField(max_length=255)
    path = models.CharField(
        max_length=512,
        blank=True,
        help_text="Route or external URL, e.g. '/about' or 'https://example.org'.",
    )

    # May point at a derived link, e.g. "localgov_menu_link_group:<group id>".
    parent = models.CharField(
        max_length=255,
        blank=True,
        help_text="Link id of the parent menu link. Empty for top level links.",
    )

    weight = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    open_in_new_tab = models.BooleanField(default=False)

    class Meta:
        ordering = ["menu_name", "weight", "title"]
        verbose_name = "Menu Link"
        verbose_name_plural = "Menu Links"

    def __str__(self) -> str:
        return f"{self.title} ({self.menu_name})"

    def to_definition(self) -> dict:
        return {
            "id": self.link_id,
            "title": self.title,
            "menu_name": self.menu_name,
            "parent": self.parent,
            "weight": self.weight,
            "path": self.path,
            "open_in_new_tab": self.open_in_new_tab,
            "provider": "navigation",
        }
