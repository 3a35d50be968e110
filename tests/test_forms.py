import pytest

from localgov_menu_link_group.forms import MenuLinkGroupForm
from localgov_menu_link_group.models import MenuLinkGroup

pytestmark = pytest.mark.usefixtures("system_menu_links")


def _form_data(**overrides):
    data = {
        "label": "Foo",
        "id": "foo",
        "status": "on",
        "weight": 0,
        "parent_menu_link": "account:user.page",
        "child_menu_links": ["admin:system.admin_content"],
    }
    data.update(overrides)
    return data


def test_new_group_children_are_moved_to_parent_menu():
    form = MenuLinkGroupForm(data=_form_data())

    assert form.is_valid(), form.errors
    form.save()

    group = MenuLinkGroup.objects.get(pk=MenuLinkGroupForm.ENTITY_ID_PREFIX + "foo")
    assert group.label == "Foo"
    assert group.child_menu_links == ["account:system.admin_content"]


def test_existing_group_shows_children_in_parent_menu(differing_menu_group):
    form = MenuLinkGroupForm(instance=differing_menu_group)

    assert form.initial["child_menu_links"] == [
        "account:system.performance_settings",
        "account:system.logging_settings",
    ]
    assert form.fields["id"].disabled


def test_editing_keeps_the_id_and_fixes_children(differing_menu_group):
    data = _form_data(
        label="Renamed",
        child_menu_links=["admin:system.performance_settings"],
    )
    data.pop("id")
    form = MenuLinkGroupForm(data=data, instance=differing_menu_group)

    assert form.is_valid(), form.errors
    form.save()

    differing_menu_group.refresh_from_db()
    assert differing_menu_group.pk == "localgov_menu_link_group_differing_menu"
    assert differing_menu_group.label == "Renamed"
    assert differing_menu_group.child_menu_links == ["account:system.performance_settings"]


def test_duplicate_id_is_rejected():
    MenuLinkGroup.objects.create(id="localgov_menu_link_group_foo", label="Foo", parent_menu_link="account:")

    form = MenuLinkGroupForm(data=_form_data())

    assert not form.is_valid()
    assert "id" in form.errors


def test_menu_root_is_a_valid_parent():
    form = MenuLinkGroupForm(data=_form_data(parent_menu_link="account:"))

    assert form.is_valid(), form.errors
    assert form.cleaned_data["child_menu_links"] == ["account:system.admin_content"]


@pytest.mark.parametrize(
    "parent_menu_link",
    ["user.page", ":user.page", "account:unknown.link", "account:system.admin_content"],
)
def test_bad_parent_menu_link_is_rejected(parent_menu_link):
    form = MenuLinkGroupForm(data=_form_data(parent_menu_link=parent_menu_link))

    assert not form.is_valid()
    assert "parent_menu_link" in form.errors


def test_bad_child_menu_link_is_rejected():
    form = MenuLinkGroupForm(data=_form_data(child_menu_links=["admin:", "system.admin_content"]))

    assert not form.is_valid()
    assert "child_menu_links" in form.errors


def test_bad_machine_name_is_rejected():
    form = MenuLinkGroupForm(data=_form_data(id="Not valid"))

    assert not form.is_valid()
    assert "id" in form.errors


def test_group_without_children():
    form = MenuLinkGroupForm(data=_form_data(child_menu_links=[]))

    assert form.is_valid(), form.errors
    assert form.save().child_menu_links == []


def test_parent_menu_link_in_its_own_menu_is_accepted():
    form = MenuLinkGroupForm(data=_form_data(parent_menu_link="admin:system.admin_content"))

    assert form.is_valid(), form.errors
    assert form.cleaned_data["child_menu_links"] == ["admin:system.admin_content"]
