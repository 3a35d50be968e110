# backend/localgov_menu_link_group/serializers.py
from rest_framework import serializers

from .models import MenuLinkGroup


class MenuLinkGroupSerializer(serializers.ModelSerializer):
    menu_link_id = serializers.CharField(read_only=True)

    class Meta:
        model = MenuLinkGroup
        fields = [
            "id",
            "label",
            "status",
            "weight",
            "parent_menu_link",
            "child_menu_links",
            "menu_link_id",
        ]
