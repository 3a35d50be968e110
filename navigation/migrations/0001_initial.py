from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MenuLink",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "menu_name",
                    models.CharField(
                        db_index=True,
                        default="main",
                        help_text="Menu this link belongs to, e.g. 'main', 'admin' or 'account'.",
                        max_length=32,
                    ),
                ),
                (
                    "link_id",
                    models.CharField(
                        help_text="Machine id shared across all menus, e.g. 'system.admin_content'.",
                        max_length=255,
                        unique=True,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                (
                    "path",
                    models.CharField(
                        blank=True,
                        help_text="Route or external URL, e.g. '/about' or 'https://example.org'.",
                        max_length=512,
                    ),
                ),
                (
                    "parent",
                    models.CharField(
                        blank=True,
                        help_text="Link id of the parent menu link. Empty for top level links.",
                        max_length=255,
                    ),
                ),
                ("weight", models.IntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
                ("open_in_new_tab", models.BooleanField(default=False)),
            ],
            options={
                "verbose_name": "Menu Link",
                "verbose_name_plural": "Menu Links",
                "ordering": ["menu_name", "weight", "title"],
            },
        ),
    ]
