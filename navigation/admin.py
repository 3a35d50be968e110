from django.contrib import admin

from .models import MenuLink


@admin.register(MenuLink)
class MenuLinkAdmin(admin.ModelAdmin):
    list_display = ("link_id", "title", "menu_name", "parent", "weight", "is_active")
    list_filter = ("menu_name", "is_active")
    search_fields = ("link_id", "title", "path")
    ordering = ("menu_name", "weight")
