import pytest
from django.core.cache import cache

from localgov_menu_link_group.models import MenuLinkGroup
from navigation.models import MenuLink

SYSTEM_MENU_LINKS = [
    # (menu_name, link_id, title, parent, weight)
    ("account", "user.page", "My account", "", 0),
    ("account", "user.logout", "Log out", "", 10),
    ("admin", "system.admin", "Administration", "", 0),
    ("admin", "system.admin_content", "Content", "system.admin", -10),
    ("admin", "system.admin_config", "Configuration", "system.admin", 0),
    ("admin", "system.admin_config_development", "Development", "system.admin_config", 0),
    ("admin", "system.performance_settings", "Performance", "system.admin_config_development", 0),
    ("admin", "system.logging_settings", "Logging and errors", "system.admin_config_development", 5),
]


@pytest.fixture(autouse=True)
def clear_menu_link_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def system_menu_links(db):
    return [
        MenuLink.objects.create(menu_name=menu_name, link_id=link_id, title=title, parent=parent, weight=weight)
        for menu_name, link_id, title, parent, weight in SYSTEM_MENU_LINKS
    ]


@pytest.fixture
def test_group(system_menu_links):
    return MenuLinkGroup.objects.create(
        id="localgov_menu_link_group_test",
        label="Test group",
        weight=0,
        parent_menu_link="admin:system.admin_config_development",
        child_menu_links=[
            "admin:system.performance_settings",
            "admin:system.logging_settings",
        ],
    )


@pytest.fixture
def differing_menu_group(system_menu_links):
    return MenuLinkGroup.objects.create(
        id="localgov_menu_link_group_differing_menu",
        label="Differing menu",
        parent_menu_link="account:user.page",
        child_menu_links=[
            "admin:system.performance_settings",
            "admin:system.logging_settings",
        ],
    )
