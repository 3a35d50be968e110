# backend/config/urls.py
from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path

urlpatterns = [
    path("", lambda r: HttpResponse("API is running")),
    path("admin/", admin.site.urls),
    path("api/navigation/", include("navigation.urls", namespace="navigation")),
    path(
        "api/menu-link-groups/",
        include("localgov_menu_link_group.urls", namespace="localgov_menu_link_group"),
    ),
]
