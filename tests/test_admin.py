from django.contrib.messages import get_messages
from django.urls import reverse

from localgov_menu_link_group.models import MenuLinkGroup

CHANGELIST_URL = "admin:localgov_menu_link_group_menulinkgroup_changelist"


def _messages(response):
    return [str(message) for message in get_messages(response.wsgi_request)]


def test_add_group_through_admin(admin_client, system_menu_links):
    response = admin_client.post(
        reverse("admin:localgov_menu_link_group_menulinkgroup_add"),
        {
            "label": "Foo",
            "id": "foo",
            "status": "on",
            "weight": "0",
            "parent_menu_link": "account:user.page",
            "child_menu_links": ["admin:system.admin_content"],
            "_save": "Save",
        },
    )

    assert response.status_code == 302
    assert response.url == reverse(CHANGELIST_URL)
    assert _messages(response) == ["The Foo menu link group created."]

    group = MenuLinkGroup.objects.get(pk="localgov_menu_link_group_foo")
    assert group.child_menu_links == ["account:system.admin_content"]


def test_change_group_through_admin(admin_client, differing_menu_group):
    response = admin_client.post(
        reverse("admin:localgov_menu_link_group_menulinkgroup_change", args=[differing_menu_group.pk]),
        {
            "label": "Differing menu",
            "status": "on",
            "weight": "3",
            "parent_menu_link": "account:user.page",
            "child_menu_links": ["admin:system.performance_settings", "admin:system.logging_settings"],
            "_continue": "Save and continue editing",
        },
    )

    assert response.status_code == 302
    assert response.url == reverse(CHANGELIST_URL)
    assert _messages(response) == ["The Differing menu menu link group has been updated."]

    differing_menu_group.refresh_from_db()
    assert differing_menu_group.weight == 3
    assert differing_menu_group.child_menu_links == [
        "account:system.performance_settings",
        "account:system.logging_settings",
    ]


def test_change_page_shows_children_in_parent_menu(admin_client, differing_menu_group):
    response = admin_client.get(
        reverse("admin:localgov_menu_link_group_menulinkgroup_change", args=[differing_menu_group.pk])
    )

    assert response.status_code == 200
    form = response.context["adminform"].form
    assert form.initial["child_menu_links"] == [
        "account:system.performance_settings",
        "account:system.logging_settings",
    ]
