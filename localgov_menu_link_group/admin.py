from django.contrib import admin, messages
from django.http import HttpResponseRedirect
from django.urls import reverse

from .forms import MenuLinkGroupForm
from .models import MenuLinkGroup


@admin.register(MenuLinkGroup)
class MenuLinkGroupAdmin(admin.ModelAdmin):
    """
    Add/edit groups through MenuLinkGroupForm.
    Saving always returns to the group list.
    """

    form = MenuLinkGroupForm
    fields = ("label", "id", "status", "weight", "parent_menu_link", "child_menu_links")
    list_display = ("label", "id", "status", "weight", "parent_menu_link")
    list_filter = ("status",)
    search_fields = ("label", "id")
    ordering = ("weight", "label")

    def response_add(self, request, obj, post_url_continue=None):
        self.message_user(
            request,
            f"The {obj.label} menu link group created.",
            messages.SUCCESS,
        )
        return self._redirect_to_changelist()

    def response_change(self, request, obj):
        self.message_user(
            request,
            f"The {obj.label} menu link group has been updated.",
            messages.SUCCESS,
        )
        return self._redirect_to_changelist()

    def _redirect_to_changelist(self):
        opts = self.model._meta
        return HttpResponseRedirect(
            reverse(f"admin:{opts.app_label}_{opts.model_name}_changelist", current_app=self.admin_site.name)
        )
