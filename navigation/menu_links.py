# backend/navigation/menu_links.py
"""
Menu link discovery.

The full menu link tree is a plain dict keyed by link id. Each value is a
definition dict with at least "id", "title", "menu_name", "parent" and
"weight". It is built from three sources, in this order:

  1. active MenuLink rows,
  2. links produced by registered derivers (keyed "<base_id>:<derivative_id>"),
  3. receivers of the ``menu_links_discovered`` signal, which may alter the
     dict in place (e.g. to reparent links).

The result is cached with Django's cache framework until ``rebuild()``.
"""
import logging

from django.conf import settings
from django.core.cache import cache
from django.db import transaction
from django.dispatch import Signal

logger = logging.getLogger(__name__)

# Sent with menu_links=<dict>. Receivers mutate the dict in place.
menu_links_discovered = Signal()

DEFAULT_MENU_LINK_DEFINITION = {
    "title": "",
    "menu_name": "main",
    "parent": "",
    "weight": 0,
    "path": "",
    "open_in_new_tab": False,
}


class MenuLinkManager:
    def __init__(self):
        self._derivers = {}

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------
    def register_deriver(self, base_id: str, deriver, base_definition: dict | None = None):
        """
        ``deriver`` must provide get_derivative_definitions(base_definition)
        returning {derivative_id: definition}.
        """
        self._derivers[base_id] = (deriver, dict(base_definition or {}))

    def discover(self) -> dict:
        from .models import MenuLink

        menu_links = {
            link.link_id: link.to_definition()
            for link in MenuLink.objects.filter(is_active=True)
        }

        for base_id, (deriver, base_definition) in self._derivers.items():
            derivatives = deriver.get_derivative_definitions(base_definition)
            for derivative_id, definition in derivatives.items():
                plugin_id = f"{base_id}:{derivative_id}"
                menu_links[plugin_id] = self.process_definition(definition, plugin_id, base_id)

        menu_links_discovered.send(sender=self.__class__, menu_links=menu_links)

        logger.debug("Discovered %s menu links", len(menu_links))
        return menu_links

    @staticmethod
    def process_definition(definition: dict, plugin_id: str, provider: str) -> dict:
        processed = {**DEFAULT_MENU_LINK_DEFINITION, **definition, "id": plugin_id}
        processed.setdefault("provider", provider)
        return processed

    # ------------------------------------------------------------------
    # Cached access
    # ------------------------------------------------------------------
    @property
    def cache_key(self) -> str:
        return getattr(settings, "NAVIGATION_MENU_LINKS_CACHE_KEY", "navigation.menu_links")

    def get_definitions(self) -> dict:
        definitions = cache.get(self.cache_key)
        if definitions is None:
            definitions = self.discover()
            # Rows read inside a transaction may still be rolled back.
            if not transaction.get_connection().in_atomic_block:
                timeout = getattr(settings, "NAVIGATION_MENU_LINKS_CACHE_TIMEOUT", None)
                cache.set(self.cache_key, definitions, timeout)
        return definitions

    def invalidate(self):
        cache.delete(self.cache_key)

    def rebuild_on_commit(self):
        """Drop the cached tree now and rebuild it once the current transaction commits."""
        self.invalidate()
        transaction.on_commit(self.rebuild)

    def rebuild(self) -> dict:
        self.invalidate()
        definitions = self.get_definitions()
        logger.info("Rebuilt menu link tree (%s links)", len(definitions))
        return definitions

    def has_definition(self, link_id: str) -> bool:
        return link_id in self.get_definitions()

    def get_definition(self, link_id: str) -> dict | None:
        return self.get_definitions().get(link_id)

    # ------------------------------------------------------------------
    # Tree helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _children_index(definitions: dict) -> dict:
        index = {}
        for link_id, definition in definitions.items():
            parent = definition.get("parent") or ""
            if parent and parent in definitions:
                index.setdefault(parent, []).append(link_id)

        for child_ids in index.values():
            child_ids.sort(key=lambda i: (definitions[i].get("weight", 0), definitions[i].get("title", "")))
        return index

    def get_child_ids(self, link_id: str) -> dict:
        """All descendants of ``link_id``, as {id: id}."""
        index = self._children_index(self.get_definitions())
        found = {}
        stack = list(index.get(link_id, []))
        while stack:
            child_id = stack.pop(0)
            if child_id in found or child_id == link_id:
                continue
            found[child_id] = child_id
            stack.extend(index.get(child_id, []))
        return found

    def get_parent_ids(self, link_id: str) -> dict:
        """``link_id`` followed by its ancestors, as {id: id}."""
        definitions = self.get_definitions()
        found = {}
        current = link_id
        while current and current in definitions and current not in found:
            found[current] = current
            current = definitions[current].get("parent") or ""
        return found

    def _roots(self, definitions: dict, menu_name: str) -> list:
        roots = [
            link_id
            for link_id, definition in definitions.items()
            if definition.get("menu_name") == menu_name
            and (definition.get("parent") or "") not in definitions
        ]
        roots.sort(key=lambda i: (definitions[i].get("weight", 0), definitions[i].get("title", "")))
        return roots

    def load_tree(self, menu_name: str) -> list:
        """
        Nested links of one menu. Children follow parent pointers across
        menus, so a link reparented under a link of this menu shows up here.
        """
        definitions = self.get_definitions()
        index = self._children_index(definitions)

        def build(link_id, seen):
            seen = seen | {link_id}
            return {
                **definitions[link_id],
                "children": [
                    build(child_id, seen)
                    for child_id in index.get(link_id, [])
                    if child_id not in seen
                ],
            }

        return [build(root, frozenset()) for root in self._roots(definitions, menu_name)]

    def menu_names(self) -> list:
        return sorted({d.get("menu_name") for d in self.get_definitions().values() if d.get("menu_name")})

    def parent_select_options(self, menu_names=None) -> list:
        """
        Choices for a menu link picker: "<menu>:" for each menu root, then
        "<menu>:<link id>" for every link below it, indented by depth.
        """
        options = []
        for menu_name in menu_names or self.menu_names():
            options.append((f"{menu_name}:", f"<{menu_name}>"))

            def walk(nodes, depth):
                for node in nodes:
                    options.append((f"{menu_name}:{node['id']}", f"{'--' * depth} {node['title']}"))
                    walk(node["children"], depth + 1)

            walk(self.load_tree(menu_name), 1)
        return options


menu_link_manager = MenuLinkManager()
