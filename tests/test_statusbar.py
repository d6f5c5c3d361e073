from tgcp.styles import strip_ansi, text_width
from tgcp.ui.components.statusbar import StatusBar, StatusMsg


def test_defaults():
    bar = StatusBar()
    assert bar.message == "Ready"
    assert bar.mode == "NORMAL"
    assert bar.width == 80


def test_update_replaces_message():
    bar = StatusBar()
    bar.update(StatusMsg("Fetching projects..."))
    assert bar.message == "Fetching projects..."


def test_update_ignores_other_messages():
    bar = StatusBar()
    bar.update("something")
    assert bar.message == "Ready"


def test_view_fills_width():
    bar = StatusBar(help_text="q:Quit  Enter:Select")
    out = bar.view()
    assert text_width(out) == bar.width
    text = strip_ansi(out)
    assert "Ready" in text
    assert "q:Quit  Enter:Select" in text


def test_normal_label_without_focus():
    text = strip_ansi(StatusBar().view())
    assert text.startswith(" NORMAL ")


def test_error_overrides_mode():
    text = strip_ansi(StatusBar(is_error=True, mode="COMMAND").view())
    assert "ERROR" in text
    assert "COMMAND" not in text


def test_command_mode_label():
    text = strip_ansi(StatusBar(mode="COMMAND", focus_pane="MAIN").view())
    assert "COMMAND" in text
    assert "MAIN" not in text


def test_focus_pane_label():
    for pane in ("MAIN", "SIDEBAR", "HOME"):
        text = strip_ansi(StatusBar(focus_pane=pane).view())
        assert pane in text
        assert "NORMAL" not in text


def test_no_separator_without_help_text():
    assert "│" not in strip_ansi(StatusBar().view())