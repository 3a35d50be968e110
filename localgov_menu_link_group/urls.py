# backend/localgov_menu_link_group/urls.py
from django.urls import path

from .views import MenuLinkGroupListView

app_name = "localgov_menu_link_group"

urlpatterns = [
    path("", MenuLinkGroupListView.as_view(), name="group_list"),
]
