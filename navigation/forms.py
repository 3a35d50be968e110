# backend/navigation/forms.py
from django import forms

from .menu_links import menu_link_manager


class MenuLinkChoiceMixin:
    """
    Accept "<menu>:<link id>" values whose link id is a known menu link.

    With ``match_menu_name`` the link must also be in the submitted menu, or
    be listed under it in the picker. Otherwise the menu part is not checked,
    since it is rewritten before the value is stored.
    """

    allow_menu_root = True
    match_menu_name = True

    def load_choices(self, menu_names=None):
        self.choices = menu_link_manager.parent_select_options(menu_names)

    def valid_value(self, value):
        value = str(value)
        menu_name, sep, link_id = value.partition(":")
        if not sep or not menu_name:
            return False
        if not link_id:
            return self.allow_menu_root

        definition = menu_link_manager.get_definition(link_id)
        if definition is None:
            return False
        if not self.match_menu_name:
            return True
        return definition.get("menu_name") == menu_name or super().valid_value(value)


class MenuLinkChoiceField(MenuLinkChoiceMixin, forms.ChoiceField):
    pass


class MenuLinkMultipleChoiceField(MenuLinkChoiceMixin, forms.MultipleChoiceField):
    allow_menu_root = False
    match_menu_name = False
