from tgcp.styles import strip_ansi, text_height
from tgcp.ui.components.sidebar import ServiceItem, Sidebar
from tgcp.ui.messages import KeyMsg


def test_default_selection_is_overview():
    sidebar = Sidebar()
    assert sidebar.selected_service().short_name == "overview"
    assert len(sidebar.items) == 17


def test_down_and_up_move_cursor():
    sidebar = Sidebar()
    sidebar.update(KeyMsg("down"))
    sidebar.update(KeyMsg("j"))
    assert sidebar.selected_service().short_name == "gke"
    sidebar.update(KeyMsg("k"))
    assert sidebar.selected_service().short_name == "gce"


def test_cursor_clamped_at_edges():
    sidebar = Sidebar()
    sidebar.update(KeyMsg("up"))
    assert sidebar.cursor == 0
    for _ in range(40):
        sidebar.update(KeyMsg("down"))
    assert sidebar.cursor == len(sidebar.items) - 1
    assert sidebar.selected_service().short_name == "net"


def test_inactive_sidebar_ignores_keys():
    sidebar = Sidebar(active=False)
    sidebar.update(KeyMsg("down"))
    assert sidebar.cursor == 0


def test_empty_items_give_empty_selection():
    assert Sidebar(items=[]).selected_service() == ServiceItem()


def test_hidden_view_is_empty():
    assert Sidebar(visible=False).view() == ""


def test_view_lists_services():
    out = strip_ansi(Sidebar().view())
    assert "SERVICES" in out
    assert "⚙ Compute Engine" in out
    assert "⇄ Networking" in out
    assert out.index("Overview") < out.index("Networking")


def test_view_fills_height():
    sidebar = Sidebar(height=50)
    assert text_height(sidebar.view()) >= 50


def test_coming_soon_marker():
    sidebar = Sidebar(items=[ServiceItem("Later", "later", "x", is_coming=True)])
    assert "x Later *" in strip_ansi(sidebar.view())