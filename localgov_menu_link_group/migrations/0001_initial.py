import django.core.validators
from django.db import migrations, models

import localgov_menu_link_group.models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MenuLinkGroup",
            fields=[
                (
                    "id",
                    models.CharField(
                        max_length=255,
                        primary_key=True,
                        serialize=False,
                        validators=[
                            django.core.validators.RegexValidator(
                                message="Machine names can only contain lowercase letters, numbers and underscores.",
                                regex="^[a-z0-9_]+$",
                            )
                        ],
                    ),
                ),
                (
                    "label",
                    models.CharField(
                        help_text="Label of the menu link for this group.",
                        max_length=255,
                    ),
                ),
                ("status", models.BooleanField(default=True)),
                ("weight", models.IntegerField(default=0)),
                (
                    "parent_menu_link",
                    models.CharField(
                        max_length=512,
                        validators=[
                            django.core.validators.RegexValidator(
                                message="Menu links must look like 'menu-name:menu-link-id'.",
                                regex="^[^:]+:",
                            )
                        ],
                    ),
                ),
                (
                    "child_menu_links",
                    models.JSONField(
                        blank=True,
                        default=list,
                        validators=[
                            localgov_menu_link_group.models.validate_menu_link_references
                        ],
                    ),
                ),
            ],
            options={
                "verbose_name": "Menu Link Group",
                "verbose_name_plural": "Menu Link Groups",
                "ordering": ["weight", "label"],
            },
        ),
    ]
