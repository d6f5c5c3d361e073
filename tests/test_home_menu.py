from tgcp.styles import strip_ansi
from tgcp.ui.components.home_menu import Category, HomeMenu
from tgcp.ui.components.sidebar import ServiceItem
from tgcp.ui.messages import KeyMsg


def _press(menu, key, times=1):
    for _ in range(times):
        menu.update(KeyMsg(key))


def test_initial_selection_is_overview():
    menu = HomeMenu()
    assert menu.selected_item().short_name == "overview"
    assert not menu.is_on_category()


def test_category_header_selects_nothing():
    menu = HomeMenu()
    _press(menu, "down")
    assert menu.is_on_category()
    assert menu.selected_item() == ServiceItem()


def test_navigate_to_service():
    menu = HomeMenu()
    _press(menu, "j", 2)
    assert menu.selected_item().short_name == "gce"
    _press(menu, "k")
    assert menu.is_on_category()


def test_cursor_clamped():
    menu = HomeMenu()
    _press(menu, "up")
    assert menu.cursor == 0
    _press(menu, "down", 100)
    assert menu.selected_item().short_name == "net"
    last = menu.cursor
    _press(menu, "down")
    assert menu.cursor == last


def test_toggle_collapses_and_hides_services():
    menu = HomeMenu()
    _press(menu, "down")
    menu.toggle_current_category()
    assert menu.categories[0].expanded is False
    out = strip_ansi(menu.view())
    assert "Compute (3)" in out
    assert "Cloud Run" not in out
    _press(menu, "down")
    assert menu.is_on_category()
    assert menu.categories[1].name == "Storage"


def test_space_toggles_category():
    menu = HomeMenu()
    _press(menu, "down")
    _press(menu, " ")
    assert not menu.categories[0].expanded
    _press(menu, " ")
    assert menu.categories[0].expanded


def test_toggle_on_service_does_nothing():
    menu = HomeMenu()
    _press(menu, "down", 2)
    menu.toggle_current_category()
    assert all(cat.expanded for cat in menu.categories)


def test_view_lists_everything():
    out = strip_ansi(HomeMenu().view())
    assert "Services" in out
    assert "▸ Overview (Command Center)" in out
    assert "▼ Compute" in out
    assert "VPC Network" in out


def test_coming_soon_and_no_top_item():
    menu = HomeMenu(
        top_item=None,
        categories=[Category("Later", True, [ServiceItem("Thing", "thing", is_coming=True)])],
    )
    assert menu.is_on_category()
    out = strip_ansi(menu.view())
    assert "Thing [Coming Soon]" in out
    _press(menu, "down")
    assert menu.selected_item().is_coming is True


def test_out_of_range_cursor():
    menu = HomeMenu(cursor=500)
    assert menu.selected_item() == ServiceItem()
    assert not menu.is_on_category()
    menu.toggle_current_category()
    assert all(cat.expanded for cat in menu.categories)