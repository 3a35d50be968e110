# backend/localgov_menu_link_group/deriver.py
"""
Menu link generator: one menu link for each enabled MenuLinkGroup.
"""
from .grouper import extract_menu_link_parts
from .models import GROUP_MENU_LINK_BASE_ID, MenuLinkGroup

# Fields shared by every group menu link. Group specific fields win.
BASE_MENU_LINK_DEFINITION = {
    "provider": GROUP_MENU_LINK_BASE_ID,
    "path": "",
    "open_in_new_tab": False,
    "expanded": False,
}


class MenuGroupsDeriver:
    def __init__(self, storage=None):
        # Anything with a filter(status=True) returning groups; defaults to the model manager.
        self.storage = storage if storage is not None else MenuLinkGroup.objects

    def get_derivative_definitions(self, base_menu_link_definition: dict) -> dict:
        return {
            group.id: self.prepare_menu_link_for_group(group, base_menu_link_definition)
            for group in self.fetch_active_menu_link_groups()
        }

    @staticmethod
    def prepare_menu_link_for_group(group, base_menu_link_definition: dict) -> dict:
        """The menu link for **one** group, titled after the group's label."""
        menu_name, parent_menu_link = extract_menu_link_parts(group.parent_menu_link)

        return {
            **base_menu_link_definition,
            "id": group.id,
            "title": group.label,
            "menu_name": menu_name,
            "parent": parent_menu_link,
            "weight": group.weight,
        }

    def fetch_active_menu_link_groups(self):
        return self.storage.filter(status=True)
