# backend/localgov_menu_link_group/views.py
from rest_framework import generics, permissions

from .models import MenuLinkGroup
from .serializers import MenuLinkGroupSerializer


class MenuLinkGroupListView(generics.ListAPIView):
    """
    GET /api/menu-link-groups/            -> all groups
    GET /api/menu-link-groups/?status=1   -> enabled groups only
    """

    serializer_class = MenuLinkGroupSerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):
        qs = MenuLinkGroup.objects.all()

        status = self.request.query_params.get("status")
        if status in ("0", "1"):
            qs = qs.filter(status=status == "1")

        return qs
