# backend/localgov_menu_link_group/models.py
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.db import models

GROUP_MENU_LINK_BASE_ID = "localgov_menu_link_group"


menu_link_reference_validator = RegexValidator(
    regex=r"^[^:]+:",
    message="Menu links must look like 'menu-name:menu-link-id'.",
)


def validate_menu_link_references(value):
    if not isinstance(value, list):
        raise ValidationError("Child menu links must be a list.")

    for item in value:
        if not isinstance(item, str):
            raise ValidationError("Child menu links must be strings.")
        menu_link_reference_validator(item)


class MenuLinkGroup(models.Model):
    """
    A named group of menu links.

    Each enabled group gets a menu link of its own (see deriver.py) which
    becomes the parent of every link listed in ``child_menu_links``.
    """

    id = models.CharField(
        primary_key=True,
        max_length=255,
        validators=[
            RegexValidator(
                regex=r"^[a-z0-9_]+$",
                message="Machine names can only contain lowercase letters, numbers and underscores.",
            )
        ],
    )
    label = models.CharField(
        max_length=255,
        help_text="Label of the menu link for this group.",
    )
    status = models.BooleanField(default=True)
    weight = models.IntegerField(default=0)

    # Both use the "menu-name:menu-link-id" format.
    parent_menu_link = models.CharField(
        max_length=512,
        validators=[menu_link_reference_validator],
    )
    child_menu_links = models.JSONField(
        default=list,
        blank=True,
        validators=[validate_menu_link_references],
    )

    class Meta:
        ordering = ["weight", "label"]
        verbose_name = "Menu Link Group"
        verbose_name_plural = "Menu Link Groups"

    def __str__(self) -> str:
        return self.label

    @property
    def menu_link_id(self) -> str:
        return f"{GROUP_MENU_LINK_BASE_ID}:{self.id}"

    @classmethod
    def exists(cls, group_id) -> bool:
        return cls.objects.filter(pk=group_id).exists()
