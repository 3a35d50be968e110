# backend/localgov_menu_link_group/grouper.py
"""
Reassign the parent menu link of a group's child menu links.

Every enabled group gets a menu link of its own. All child menu links of the
group then appear as children of that link: their original parent is
replaced with the group's menu link.

Example: child menu link A belongs to group G and its original parent is B.
After reassignment G is A's parent.
"""
import logging

from .models import GROUP_MENU_LINK_BASE_ID

logger = logging.getLogger(__name__)


def extract_menu_link_parts(raw_menu_link: str) -> tuple[str, str]:
    """
    Split "menu-name:menu-link-id" on the first colon.

    Example: "admin:admin_toolbar_tools.extra_links:node.add.article" gives
    ("admin", "admin_toolbar_tools.extra_links:node.add.article").
    Without a colon the menu name is empty and the whole value is the link id.
    """
    menu_name, sep, menu_link_id = raw_menu_link.partition(":")
    if not sep:
        return "", raw_menu_link
    return menu_name, menu_link_id


def fix_menu_for_child_link(child_menu_link: str, parent_menu: str) -> str:
    """
    Replace the menu name of a child menu link.

    child "foo:bar" with parent menu "qux" becomes "qux:bar".
    """
    _, child_menu_link_id = extract_menu_link_parts(child_menu_link)
    return f"{parent_menu}:{child_menu_link_id}"


def fix_menu_for_all_child_links(child_menu_links: list, parent_menu_link: str) -> list:
    """Make the menu name of every child menu link match the parent menu link."""
    if not child_menu_links or not parent_menu_link:
        return child_menu_links

    parent_menu, _ = extract_menu_link_parts(parent_menu_link)

    return [fix_menu_for_child_link(child, parent_menu) for child in child_menu_links]


class MenuLinkGrouper:
    """
    Holds the menu link tree for the duration of one discovery pass.

    ``menu_links`` is the dict sent with ``menu_links_discovered``; it is
    changed in place.
    """

    def __init__(self, menu_links: dict):
        self.menu_links = menu_links

    def group_child_menu_links(self, group, group_id: str) -> None:
        for child_menu_link in group.child_menu_links:
            self.set_new_parent_for_child_menu_link(child_menu_link, group_id)

    def set_new_parent_for_child_menu_link(self, child_menu_link: str, group_id: str) -> None:
        _, child_menu_link_id = extract_menu_link_parts(child_menu_link)

        if child_menu_link_id not in self.menu_links:
            logger.debug("Group %s: unknown child menu link %s, skipped", group_id, child_menu_link)
            return

        self.menu_links[child_menu_link_id]["parent"] = f"{GROUP_MENU_LINK_BASE_ID}:{group_id}"
