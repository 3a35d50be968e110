# backend/localgov_menu_link_group/signals.py
import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from navigation.menu_links import menu_link_manager, menu_links_discovered

from .grouper import MenuLinkGrouper
from .models import MenuLinkGroup

logger = logging.getLogger(__name__)


@receiver(menu_links_discovered)
def group_menu_links(sender, menu_links, **kwargs):
    """
    Move the child menu links of every enabled group under the group's own
    menu link. A link claimed by two groups ends up in the last one.
    """
    grouper = MenuLinkGrouper(menu_links)

    for group in MenuLinkGroup.objects.filter(status=True):
        grouper.group_child_menu_links(group, group.id)
        logger.debug("Grouped %s child menu links under %s", len(group.child_menu_links), group.menu_link_id)


@receiver(post_save, sender=MenuLinkGroup)
@receiver(post_delete, sender=MenuLinkGroup)
def rebuild_menu_links(sender, instance, **kwargs):
    menu_link_manager.rebuild_on_commit()
