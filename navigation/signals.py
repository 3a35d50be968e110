# backend/navigation/signals.py
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .menu_links import menu_link_manager
from .models import MenuLink


@receiver(post_save, sender=MenuLink)
@receiver(post_delete, sender=MenuLink)
def rebuild_menu_links(sender, instance, **kwargs):
    menu_link_manager.rebuild_on_commit()
