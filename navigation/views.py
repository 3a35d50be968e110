# backend/navigation/views.py
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .menu_links import menu_link_manager
from .models import MenuLink
from .serializers import MenuLinkSerializer


class MenuListView(APIView):
    """
    Returns the link tree of one menu, including links derived from
    menu link groups and links reparented under them.

    Frontend usage:
      GET /api/navigation/menus/?menu=main
      GET /api/navigation/menus/?menu=admin
    """

    permission_classes = [AllowAny]

    def get(self, request):
        menu_name = request.query_params.get("menu") or MenuLink.MENU_MAIN

        tree = menu_link_manager.load_tree(menu_name)

        serializer = MenuLinkSerializer(tree, many=True, context={"request": request})
        return Response(serializer.data)
