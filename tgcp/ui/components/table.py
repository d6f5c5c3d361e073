"""A scrollable, focusable table with consistent styling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from tgcp.styles import COLOR_TEXT_PRIMARY, Style, text_width
from tgcp.ui.messages import KeyMsg, WindowSizeMsg

TABLE_SELECTED_FOCUSED = "236"
TABLE_SELECTED_BLURRED = "240"
TABLE_TEXT_FOCUSED = "39"
TABLE_TEXT_BLURRED = "245"
TABLE_HEADER_BG = "237"

MIN_HEIGHT = 5

_HEADER_STYLE = Style(
    foreground=COLOR_TEXT_PRIMARY, background=TABLE_HEADER_BG, bold=True, padding=(0, 1)
)
_CELL_STYLE = Style(padding=(0, 1))
_SELECTED_FOCUSED = Style(foreground=TABLE_TEXT_FOCUSED, background=TABLE_SELECTED_FOCUSED, bold=True)
_SELECTED_BLURRED = Style(foreground=TABLE_TEXT_BLURRED, background=TABLE_SELECTED_BLURRED)


@dataclass(frozen=True)
class Column:
    title: str
    width: int


def _truncate(text: str, width: int) -> str:
    if text_width(text) <= width:
        return text
    out = ""
    used = 0
    for ch in text:
        w = text_width(ch)
        if used + w > width - 1:
            break
        out += ch
        used += w
    return out + "…"


def _cell(text: str, width: int) -> str:
    value = _truncate(text, width)
    return value + " " * max(width - text_width(value), 0)


class Table:
    """Rows under column headers with a keyboard-driven cursor."""

    def __init__(
        self,
        columns: Iterable[Column],
        *,
        height: int = 10,
        height_offset: int = 6,
        focused: bool = True,
    ) -> None:
        self.columns: list[Column] = list(columns)
        self.rows: list[tuple[str, ...]] = []
        self.height = height
        self.height_offset = height_offset
        self.focused = focused
        self._cursor = 0
        self._offset = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, index: int) -> None:
        self._cursor = min(max(index, 0), max(len(self.rows) - 1, 0))
        self._scroll()

    @property
    def visible_rows(self) -> int:
        return max(self.height - 1, 1)

    def _scroll(self) -> None:
        visible = self.visible_rows
        if self._cursor < self._offset:
            self._offset = self._cursor
        elif self._cursor >= self._offset + visible:
            self._offset = self._cursor - visible + 1
        self._offset = max(min(self._offset, max(len(self.rows) - visible, 0)), 0)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def set_columns(self, columns: Iterable[Column]) -> None:
        self.columns = list(columns)

    def set_rows(self, rows: Iterable[Sequence[str]]) -> None:
        """Replace the rows, moving the cursor to the top if it falls outside them."""
        self.rows = [tuple(row) for row in rows]
        if self.rows and not 0 <= self._cursor < len(self.rows):
            self._cursor = 0
        self._scroll()

    def handle_window_size(self, msg: WindowSizeMsg, height_offset: int) -> None:
        self.height = max(msg.height - height_offset, MIN_HEIGHT)
        self._scroll()

    def handle_window_size_default(self, msg: WindowSizeMsg) -> None:
        self.handle_window_size(msg, self.height_offset)

    def update(self, msg) -> None:
        """Move the cursor in response to navigation keys while focused."""
        if not self.focused or not isinstance(msg, KeyMsg):
            return None
        key = msg.key
        page = self.visible_rows
        half = max(page // 2, 1)
        if key in ("up", "k"):
            self.cursor = self._cursor - 1
        elif key in ("down", "j"):
            self.cursor = self._cursor + 1
        elif key in ("pgup", "pageup", "b"):
            self.cursor = self._cursor - page
        elif key in ("pgdown", "pagedown", "f", " "):
            self.cursor = self._cursor + page
        elif key in ("ctrl+u", "u"):
            self.cursor = self._cursor - half
        elif key in ("ctrl+d", "d"):
            self.cursor = self._cursor + half
        elif key in ("home", "g"):
            self.cursor = 0
        elif key in ("end", "G"):
            self.cursor = len(self.rows) - 1
        return None

    def view(self) -> str:
        columns = [c for c in self.columns if c.width > 0]
        header = "".join(_HEADER_STYLE.render(_cell(c.title, c.width)) for c in columns)
        selected_style = _SELECTED_FOCUSED if self.focused else _SELECTED_BLURRED
        lines = [header]
        window = self.rows[self._offset : self._offset + self.visible_rows]
        for index, row in enumerate(window, start=self._offset):
            values = list(row) + [""] * (len(self.columns) - len(row))
            cells = "".join(
                _CELL_STYLE.render(_cell(value, col.width))
                for value, col in zip(values, self.columns)
                if col.width > 0
            )
            lines.append(selected_style.render(cells) if index == self._cursor else cells)
        return "\n".join(lines)