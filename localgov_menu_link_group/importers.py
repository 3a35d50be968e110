# backend/localgov_menu_link_group/importers.py
import json
import logging
from pathlib import Path

from django.core.exceptions import ValidationError
from django.db import transaction

from navigation.menu_links import menu_link_manager

from .models import MenuLinkGroup

logger = logging.getLogger(__name__)

GROUP_FIELDS = ("label", "status", "weight", "parent_menu_link", "child_menu_links")


@transaction.atomic
def import_groups_from_json(path: str) -> list:
    """
    Create or update groups from a JSON file holding a list of objects:
      id, label, status(optional), weight(optional),
      parent_menu_link, child_menu_links(optional)

    Values are stored as given; child menu names are not rewritten.
    Returns the imported groups.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValidationError("Expected a list of menu link groups.")

    imported = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValidationError(f"Menu link group #{i} is not an object.")

        group = MenuLinkGroup.objects.filter(pk=item.get("id")).first() or MenuLinkGroup(id=item.get("id"))
        for field in GROUP_FIELDS:
            if field in item:
                setattr(group, field, item[field])

        group.full_clean()
        group.save()
        imported.append(group)
        logger.info("Imported menu link group %s", group.id)

    menu_link_manager.rebuild_on_commit()
    return imported
