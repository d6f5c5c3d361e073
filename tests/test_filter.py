from tgcp.styles import strip_ansi
from tgcp.ui.components.filter import (
    Filter,
    FilterSession,
    FilterUpdateResult,
    TextInput,
    contains_match,
    filter_items,
    handle_filter_update,
    is_navigation_key,
)
from tgcp.ui.messages import KeyMsg

ITEMS = ["alpha", "beta", "Gamma"]


def _match(item, query):
    return contains_match(item)(query)


def _getter(items, query):
    return filter_items(items, query, _match)


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, items):
        self.calls.append(list(items))


def _type(target, text):
    for ch in text:
        target.update(KeyMsg(ch))


def test_text_input_typing_and_editing():
    ti = TextInput()
    ti.focus()
    _type(ti, "abc")
    assert ti.value == "abc"
    ti.update(KeyMsg("backspace"))
    assert ti.value == "ab"
    ti.update(KeyMsg("home"))
    _type(ti, "x")
    assert ti.value == "xab"


def test_text_input_ignores_keys_when_blurred():
    ti = TextInput()
    _type(ti, "abc")
    assert ti.value == ""


def test_text_input_char_limit():
    ti = TextInput(char_limit=3)
    ti.focus()
    _type(ti, "abcdef")
    assert ti.value == "abc"


def test_text_input_reset_and_view():
    ti = TextInput(placeholder="Search here", prompt="/ ")
    assert strip_ansi(ti.view()) == "/ Search here"
    ti.focus()
    _type(ti, "q")
    assert strip_ansi(ti.view()).startswith("/ q")
    ti.reset()
    assert ti.value == ""
    assert ti.position == 0


def test_focus_returns_command():
    ti = TextInput()
    cmd = ti.focus()
    assert callable(cmd)
    assert ti.focused is True


def test_is_navigation_key():
    for key in ("up", "down", "j", "k", "g", "G", "home", "end", "pageup", "pagedown"):
        assert is_navigation_key(key)
    assert not is_navigation_key("a")
    assert not is_navigation_key("enter")


def test_filter_items_empty_query_returns_all():
    assert filter_items(ITEMS, "", _match) is ITEMS


def test_filter_items_case_insensitive():
    assert filter_items(ITEMS, "GAM", _match) == ["Gamma"]
    assert filter_items(ITEMS, "a", _match) == ITEMS
    assert filter_items(ITEMS, "zzz", _match) == []


def test_contains_match_any_field():
    matcher = contains_match("Topic-One", "kms-key")
    assert matcher("kms")
    assert matcher("topic")
    assert not matcher("nothing")


def test_filter_initial_state():
    f = Filter("Filter topics...")
    assert f.active is False
    assert f.value == ""
    assert f.text_input.placeholder == "Filter topics..."
    assert f.text_input.prompt == "/ "


def test_filter_update_only_when_active():
    f = Filter()
    f.update(KeyMsg("a"))
    assert f.value == ""
    f.enter_filter_mode()
    f.update(KeyMsg("a"))
    assert f.value == "a"


def test_filter_handle_key_lifecycle():
    f = Filter()
    exit_, keep, cmd = f.handle_key(KeyMsg("/"))
    assert (exit_, keep) == (False, False)
    assert cmd is not None and f.active
    f.handle_key(KeyMsg("b"))
    assert f.value == "b"
    exit_, keep, cmd = f.handle_key(KeyMsg("enter"))
    assert (exit_, keep, cmd) == (True, True, None)
    assert not f.active and f.value == "b"
    exit_, keep, cmd = f.handle_key(KeyMsg("esc"))
    assert (exit_, keep) == (True, False)
    assert f.value == ""


def test_filter_handle_key_esc_while_active_clears():
    f = Filter()
    f.enter_filter_mode()
    _type(f, "ab")
    assert f.handle_key(KeyMsg("esc")) == (True, False, None)
    assert f.value == "" and not f.active


def test_filter_view_states():
    f = Filter()
    f.set_match_counts(3, 3)
    plain = strip_ansi(f.view())
    assert "Press / to filter" in plain
    assert f"Items: {3}" in plain

    f.enter_filter_mode()
    _type(f, "al")
    f.set_match_counts(3, 1)
    plain = strip_ansi(f.view())
    assert "Filter:" in plain
    assert "/ al" in plain
    assert f"Matches: {1}/{3}" in plain

    f.exit_filter_mode_keep_value()
    plain = strip_ansi(f.view())
    assert "al" in plain
    assert "Esc to clear" in plain


def test_handle_filter_update_enter_mode():
    f = Filter()
    table = Recorder()
    result = handle_filter_update(f, KeyMsg("/"), ITEMS, _getter, table)
    assert result.handled and not result.should_continue
    assert result.cmd is not None
    assert f.active
    assert table.calls == []


def test_handle_filter_update_typing_filters_table():
    f = Filter()
    table = Recorder()
    handle_filter_update(f, KeyMsg("/"), ITEMS, _getter, table)
    result = handle_filter_update(f, KeyMsg("b"), ITEMS, _getter, table)
    assert result.handled and not result.should_continue
    assert table.calls[-1] == ["alpha", "beta"]
    assert (f.total, f.matches) == (len(ITEMS), 2)


def test_handle_filter_update_navigation_passes_through():
    f = Filter()
    table = Recorder()
    f.enter_filter_mode()
    _type(f, "gam")
    result = handle_filter_update(f, KeyMsg("down"), ITEMS, _getter, table)
    assert result == FilterUpdateResult(handled=False, should_continue=True)
    assert table.calls[-1] == ["Gamma"]
    assert f.value == "gam"


def test_handle_filter_update_enter_keeps_filter():
    f = Filter()
    table = Recorder()
    f.enter_filter_mode()
    _type(f, "gam")
    result = handle_filter_update(f, KeyMsg("enter"), ITEMS, _getter, table)
    assert result.handled and not result.should_continue
    assert table.calls[-1] == ["Gamma"]
    assert not f.active and f.value == "gam"


def test_handle_filter_update_esc_restores_all():
    f = Filter()
    table = Recorder()
    f.enter_filter_mode()
    _type(f, "gam")
    result = handle_filter_update(f, KeyMsg("esc"), ITEMS, _getter, table)
    assert result.handled
    assert table.calls[-1] == ITEMS
    assert (f.total, f.matches) == (len(ITEMS), len(ITEMS))


def test_handle_filter_update_inactive_esc_clears_kept_value():
    f = Filter()
    table = Recorder()
    f.enter_filter_mode()
    _type(f, "gam")
    f.exit_filter_mode_keep_value()
    result = handle_filter_update(f, KeyMsg("esc"), ITEMS, _getter, table)
    assert result.handled and not result.should_continue
    assert f.value == ""
    assert table.calls[-1] == ITEMS


def test_handle_filter_update_unrelated_key_not_handled():
    f = Filter()
    table = Recorder()
    result = handle_filter_update(f, KeyMsg("r"), ITEMS, _getter, table)
    assert result == FilterUpdateResult(handled=False, should_continue=True)
    assert table.calls == []


def test_filter_session_apply_uses_query():
    f = Filter()
    table = Recorder()
    session = FilterSession(f, _getter, table)
    session.apply(ITEMS)
    assert table.calls[-1] == ITEMS
    f.text_input.value = "bet"
    session.apply(ITEMS)
    assert table.calls[-1] == ["beta"]
    assert (f.total, f.matches) == (len(ITEMS), 1)


def test_filter_session_without_filter():
    table = Recorder()
    session = FilterSession(None, _getter, table)
    session.apply(ITEMS)
    assert table.calls == [ITEMS]
    result = session.handle_key(KeyMsg("/"))
    assert result == FilterUpdateResult(handled=False, should_continue=True)


def test_filter_session_handle_key_uses_stored_items():
    f = Filter()
    table = Recorder()
    session = FilterSession(f, _getter, table)
    session.apply(ITEMS)
    session.handle_key(KeyMsg("/"))
    session.handle_key(KeyMsg("p"))
    assert table.calls[-1] == ["alpha"]