# backend/navigation/serializers.py
from rest_framework import serializers


class MenuLinkSerializer(serializers.Serializer):
    """Read-only view of a discovered menu link definition."""

    id = serializers.CharField()
    title = serializers.CharField()
    menu_name = serializers.CharField(allow_blank=True)
    parent = serializers.CharField(allow_blank=True)
    weight = serializers.IntegerField()
    path = serializers.CharField(allow_blank=True, required=False)
    open_in_new_tab = serializers.BooleanField(required=False)
    children = serializers.SerializerMethodField()

    def get_children(self, obj):
        return MenuLinkSerializer(
            obj.get("children", []),
            many=True,
            context=self.context,
        ).data
