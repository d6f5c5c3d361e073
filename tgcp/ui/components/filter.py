"""Filter input shared by list views, and helpers to apply it to a table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from tgcp.styles import (
    COLOR_BORDER_SUBTLE,
    COLOR_BRAND_ACCENT,
    COLOR_TEXT_PRIMARY,
    LEFT,
    SUBTLE_STYLE,
    Style,
    join_horizontal,
)
from tgcp.ui.messages import Command, KeyMsg

T = TypeVar("T")

_NAVIGATION_KEYS = frozenset(
    {"up", "down", "j", "k", "g", "G", "home", "end", "pageup", "pagedown"}
)

_PLACEHOLDER_STYLE = Style(foreground="240")
_BADGE_STYLE = Style(foreground="232", background=COLOR_BRAND_ACCENT, padding=(0, 1))
_ACTIVE_INPUT_STYLE = Style(foreground=COLOR_TEXT_PRIMARY)
_SEP_STYLE = Style(foreground=COLOR_BORDER_SUBTLE)


@dataclass(frozen=True)
class _BlinkMsg:
    """Asks the input to show its cursor."""


def _reverse(text: str) -> str:
    return f"\x1b[7m{text}\x1b[0m"


class TextInput:
    """A single-line text input with a cursor."""

    def __init__(
        self, placeholder: str = "", prompt: str = "> ", char_limit: int = 0, width: int = 0
    ) -> None:
        self.placeholder = placeholder
        self.prompt = prompt
        self.char_limit = char_limit
        self.width = width
        self.focused = False
        self.position = 0
        self._value = ""

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, text: str) -> None:
        if self.char_limit > 0:
            text = text[: self.char_limit]
        self._value = text
        self.position = len(text)

    def focus(self) -> Command:
        """Give the input focus; return a command that shows the cursor."""
        self.focused = True
        return _BlinkMsg

    def blur(self) -> None:
        self.focused = False

    def reset(self) -> None:
        self._value = ""
        self.position = 0

    def _insert(self, text: str) -> None:
        if self.char_limit > 0:
            room = self.char_limit - len(self._value)
            if room <= 0:
                return
            text = text[:room]
        self._value = self._value[: self.position] + text + self._value[self.position :]
        self.position += len(text)

    def update(self, msg) -> Command | None:
        """Edit the value in response to a key while focused."""
        if not self.focused or not isinstance(msg, KeyMsg):
            return None
        key = msg.key
        value, pos = self._value, self.position
        if key == "backspace":
            if pos > 0:
                self._value = value[: pos - 1] + value[pos:]
                self.position = pos - 1
        elif key == "delete":
            self._value = value[:pos] + value[pos + 1 :]
        elif key in ("left", "ctrl+b"):
            self.position = max(pos - 1, 0)
        elif key in ("right", "ctrl+f"):
            self.position = min(pos + 1, len(value))
        elif key in ("home", "ctrl+a"):
            self.position = 0
        elif key in ("end", "ctrl+e"):
            self.position = len(value)
        elif key == "ctrl+u":
            self._value = value[pos:]
            self.position = 0
        elif key == "ctrl+k":
            self._value = value[:pos]
        elif len(key) == 1 and key.isprintable():
            self._insert(key)
        return None

    def view(self) -> str:
        if not self._value and self.placeholder:
            if self.focused:
                body = _reverse(self.placeholder[0]) + _PLACEHOLDER_STYLE.render(
                    self.placeholder[1:]
                )
            else:
                body = _PLACEHOLDER_STYLE.render(self.placeholder)
            return self.prompt + body
        start = max(self.position - self.width, 0) if self.width > 0 else 0
        shown = self._value[start:]
        if self.width > 0:
            shown = shown[: self.width + 1]
        if not self.focused:
            return self.prompt + shown
        cursor = self.position - start
        under = shown[cursor : cursor + 1] or " "
        return self.prompt + shown[:cursor] + _reverse(under) + shown[cursor + 1 :]


class Filter:
    """Filter bar with its own input and match counts."""

    def __init__(self, placeholder: str = "Filter...") -> None:
        self.text_input = TextInput(placeholder=placeholder, prompt="/ ", char_limit=100, width=50)
        self.active = False
        self.matches = 0
        self.total = 0

    @property
    def value(self) -> str:
        return self.text_input.value

    def update(self, msg) -> Command | None:
        if not self.active:
            return None
        return self.text_input.update(msg)

    def view(self) -> str:
        query = self.value
        count_text = (
            f"Items: {self.total}" if not query else f"Matches: {self.matches}/{self.total}"
        )
        count_view = SUBTLE_STYLE.render(count_text)
        label = SUBTLE_STYLE.render("Filter:")
        if self.active:
            input_view = _ACTIVE_INPUT_STYLE.render(self.text_input.view())
            return join_horizontal(LEFT, label, " ", input_view, "  ", count_view)
        if query:
            badge = _BADGE_STYLE.render(query)
            sep = _SEP_STYLE.render(" │ ")
            clear_hint = SUBTLE_STYLE.render("Esc to clear")
            return join_horizontal(
                LEFT, label, " ", badge, "  ", count_view, sep, clear_hint
            )
        hint = SUBTLE_STYLE.render("Press / to filter")
        return join_horizontal(LEFT, label, " ", hint, "  ", count_view)

    def enter_filter_mode(self) -> Command:
        self.active = True
        return self.text_input.focus()

    def exit_filter_mode(self) -> None:
        """Leave filter mode and clear the query."""
        self.active = False
        self.text_input.blur()
        self.text_input.reset()

    def exit_filter_mode_keep_value(self) -> None:
        self.active = False
        self.text_input.blur()

    def handle_key(self, msg: KeyMsg) -> tuple[bool, bool, Command | None]:
        """Process a key; return (should_exit, keep_value, command)."""
        key = str(msg)
        if not self.active:
            if key == "/":
                return False, False, self.enter_filter_mode()
            if key == "esc" and self.value:
                self.text_input.reset()
                return True, False, None
            return False, False, None
        if key == "esc":
            self.exit_filter_mode()
            return True, False, None
        if key == "enter":
            self.exit_filter_mode_keep_value()
            return True, True, None
        return False, False, self.text_input.update(msg)

    def set_match_counts(self, total: int, matches: int) -> None:
        self.total = total
        self.matches = matches


def is_navigation_key(key: str) -> bool:
    """True for keys that move through a table rather than edit a filter."""
    return key in _NAVIGATION_KEYS


def filter_items(
    items: Sequence[T], query: str, matcher: Callable[[T, str], bool]
) -> Sequence[T]:
    """Items for which matcher(item, lowercased query) holds; all items for an empty query."""
    if not query:
        return items
    lowered = query.lower()
    return [item for item in items if matcher(item, lowered)]


def contains_match(*args: str) -> Callable[[str], bool]:
    """Matcher: does any field contain the (lowercased) query, ignoring case."""

    def match(query: str) -> bool:
        return any(query in field.lower() for field in args)

    return match


@dataclass(frozen=True)
class FilterUpdateResult:
    handled: bool
    should_continue: bool
    cmd: Command | None = None


def _apply(filter_model: Filter, all_items, get_filtered, update_table) -> None:
    filtered = get_filtered(all_items, filter_model.value)
    update_table(filtered)
    filter_model.set_match_counts(len(all_items), len(filtered))


def handle_filter_update(
    filter_model: Filter,
    msg: KeyMsg,
    all_items: Sequence[T],
    get_filtered: Callable[[Sequence[T], str], Sequence[T]],
    update_table: Callable[[Sequence[T]], None],
) -> FilterUpdateResult:
    """Run a key through the filter and refresh the table to match."""
    key = str(msg)
    if filter_model.active and is_navigation_key(key):
        _apply(filter_model, all_items, get_filtered, update_table)
        return FilterUpdateResult(handled=False, should_continue=True)

    was_active = filter_model.active
    should_exit, keep_value, cmd = filter_model.handle_key(msg)

    if cmd is not None and not was_active:
        return FilterUpdateResult(handled=True, should_continue=False, cmd=cmd)

    if should_exit:
        if keep_value:
            _apply(filter_model, all_items, get_filtered, update_table)
        else:
            update_table(all_items)
            filter_model.set_match_counts(len(all_items), len(all_items))
        return FilterUpdateResult(handled=True, should_continue=False)

    if filter_model.active:
        _apply(filter_model, all_items, get_filtered, update_table)
        return FilterUpdateResult(handled=True, should_continue=False, cmd=cmd)

    return FilterUpdateResult(handled=False, should_continue=True)


class FilterSession(Generic[T]):
    """Ties a filter to a list of items and the table that shows them."""

    def __init__(
        self,
        filter_model: Filter | None,
        get_filtered: Callable[[Sequence[T], str], Sequence[T]],
        update_table: Callable[[Sequence[T]], None],
    ) -> None:
        self.filter = filter_model
        self.get_filtered = get_filtered
        self.update_table = update_table
        self.all_items: Sequence[T] = []

    def apply(self, items: Sequence[T]) -> None:
        """Store the full list, show what matches the query and update counts."""
        self.all_items = items
        if self.filter is None:
            self.update_table(items)
            return
        _apply(self.filter, items, self.get_filtered, self.update_table)

    def handle_key(self, msg: KeyMsg) -> FilterUpdateResult:
        if self.filter is None:
            return FilterUpdateResult(handled=False, should_continue=True)
        return handle_filter_update(
            self.filter, msg, self.all_items, self.get_filtered, self.update_table
        )