"""Terminal styling: colours, borders, padding and block layout."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field

from wcwidth import wcswidth, wcwidth

TOP = 0.0
LEFT = 0.0
CENTER = 0.5
BOTTOM = 1.0
RIGHT = 1.0

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_RE.sub("", text)


def _line_width(line: str) -> int:
    plain = strip_ansi(line)
    width = wcswidth(plain)
    if width < 0:
        width = sum(max(wcwidth(ch), 0) for ch in plain)
    return width


def text_width(text: str) -> int:
    """Visible width of the widest line."""
    return max((_line_width(line) for line in text.split("\n")), default=0)


def text_height(text: str) -> int:
    """Number of lines in text."""
    return text.count("\n") + 1


@dataclass(frozen=True)
class Border:
    """Characters that make up a box border."""

    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


ROUNDED_BORDER = Border("─", "─", "│", "│", "╭", "╮", "╰", "╯")
NORMAL_BORDER = Border("─", "─", "│", "│", "┌", "┐", "└", "┘")
DOUBLE_BORDER = Border("═", "═", "║", "║", "╔", "╗", "╚", "╝")


def _color_code(color: str, base: int) -> str:
    if color.startswith("#") and len(color) == 7:
        r, g, b = (int(color[i : i + 2], 16) for i in (1, 3, 5))
        return f"{base};2;{r};{g};{b}"
    return f"{base};5;{color}"


def _normalise_box(value) -> tuple[int, int, int, int]:
    if isinstance(value, int):
        return (value, value, value, value)
    values = tuple(value)
    if len(values) == 1:
        return values * 4
    if len(values) == 2:
        return (values[0], values[1], values[0], values[1])
    if len(values) == 4:
        return values
    raise ValueError("padding takes 1, 2 or 4 values")


@dataclass(frozen=True)
class Style:
    """An immutable text style; use evolve() to derive a variant."""

    foreground: str = ""
    background: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    padding: tuple = (0, 0, 0, 0)
    border: Border | None = None
    border_sides: tuple = (True, True, True, True)
    border_foreground: str = ""
    width: int = 0
    height: int = 0
    _codes: str = field(default="", init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "padding", _normalise_box(self.padding))
        object.__setattr__(self, "border_sides", tuple(bool(s) for s in self.border_sides))
        codes = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.underline:
            codes.append("4")
        if self.foreground:
            codes.append(_color_code(self.foreground, 38))
        if self.background:
            codes.append(_color_code(self.background, 48))
        object.__setattr__(self, "_codes", ";".join(codes))

    def evolve(self, **kwargs) -> "Style":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **kwargs)

    def _paint(self, text: str, codes: str) -> str:
        if not codes or not text:
            return text
        return f"\x1b[{codes}m{text}\x1b[0m"

    def _blank(self, count: int) -> str:
        if count <= 0:
            return ""
        codes = _color_code(self.background, 48) if self.background else ""
        return self._paint(" " * count, codes)

    def render(self, *args) -> str:
        """Render the arguments, joined by spaces, in this style."""
        text = " ".join(str(a) for a in args)
        lines = text.split("\n")
        pt, pr, pb, pl = self.padding
        content_w = max(_line_width(line) for line in lines)
        if self.width:
            content_w = max(content_w, self.width - pl - pr)
        body = [
            self._blank(pl)
            + self._paint(line, self._codes)
            + self._blank(content_w - _line_width(line) + pr)
            for line in lines
        ]
        full_w = content_w + pl + pr
        blank_line = self._blank(full_w)
        body = [blank_line] * pt + body + [blank_line] * pb
        while self.height and len(body) < self.height:
            body.append(blank_line)
        if self.border is None:
            return "\n".join(body)
        return "\n".join(self._frame(body, full_w))

    def _frame(self, body: list[str], inner_w: int) -> list[str]:
        b = self.border
        top, right, bottom, left = self.border_sides
        codes = _color_code(self.border_foreground, 38) if self.border_foreground else ""
        paint = lambda s: self._paint(s, codes)  # noqa: E731
        out = []
        if top:
            out.append(
                paint((b.top_left if left else "") + b.top * inner_w + (b.top_right if right else ""))
            )
        for line in body:
            out.append((paint(b.left) if left else "") + line + (paint(b.right) if right else ""))
        if bottom:
            out.append(
                paint(
                    (b.bottom_left if left else "")
                    + b.bottom * inner_w
                    + (b.bottom_right if right else "")
                )
            )
        return out


def join_vertical(position: float, *args: str) -> str:
    """Stack blocks vertically, aligning lines horizontally by position."""
    lines = [line for block in args for line in block.split("\n")]
    width = max((_line_width(line) for line in lines), default=0)
    out = []
    for line in lines:
        extra = width - _line_width(line)
        left = int(extra * position)
        out.append(" " * left + line + " " * (extra - left))
    return "\n".join(out)


def join_horizontal(position: float, *args: str) -> str:
    """Place blocks side by side, aligning them vertically by position."""
    if not args:
        return ""
    blocks = [block.split("\n") for block in args]
    height = max(len(b) for b in blocks)
    columns = []
    for block in blocks:
        width = max(_line_width(line) for line in block)
        padded = [line + " " * (width - _line_width(line)) for line in block]
        extra = height - len(padded)
        above = int(extra * position)
        blank = " " * width
        columns.append([blank] * above + padded + [blank] * (extra - above))
    return "\n".join("".join(parts) for parts in zip(*columns))


def place_horizontal(width: int, position: float, content: str) -> str:
    """Place content in a field of the given width."""
    block_w = text_width(content)
    out = []
    for line in content.split("\n"):
        line_w = _line_width(line)
        extra = max(width, block_w) - line_w
        block_extra = max(width - block_w, 0)
        left = int(block_extra * position)
        out.append(" " * left + line + " " * (extra - left))
    return "\n".join(out)


def place(width: int, height: int, hpos: float, vpos: float, content: str) -> str:
    """Place content inside a width by height area."""
    placed = place_horizontal(width, hpos, content).split("\n")
    extra = height - len(placed)
    if extra <= 0:
        return "\n".join(placed)
    line_w = max(width, text_width(content))
    above = int(extra * vpos)
    blank = " " * line_w
    return "\n".join([blank] * above + placed + [blank] * (extra - above))


COLOR_BRAND_PRIMARY = "39"
COLOR_BRAND_ACCENT = "75"
COLOR_TEXT_PRIMARY = "252"
COLOR_TEXT_MUTED = "243"
COLOR_BORDER_SUBTLE = "240"
COLOR_SUCCESS = "42"
COLOR_WARNING = "214"
COLOR_ERROR = "196"
COLOR_INFO = "45"

BASE_STYLE = Style(foreground=COLOR_TEXT_PRIMARY)
BOX_STYLE = Style(border=ROUNDED_BORDER, border_foreground=COLOR_BORDER_SUBTLE, padding=(0, 1))
PRIMARY_BOX_STYLE = Style(border=ROUNDED_BORDER, border_foreground=COLOR_BRAND_ACCENT, padding=(1, 2))
SECONDARY_BOX_STYLE = Style(border=NORMAL_BORDER, border_foreground=COLOR_BORDER_SUBTLE, padding=(0, 1))
FOCUSED_BOX_STYLE = BOX_STYLE.evolve(border_foreground=COLOR_BRAND_PRIMARY)
HEADER_STYLE = Style(foreground=COLOR_TEXT_PRIMARY, background="237", bold=True, padding=(0, 1))
TITLE_STYLE = Style(foreground=COLOR_BRAND_PRIMARY, bold=True)
SIDEBAR_STYLE = Style(
    border=ROUNDED_BORDER,
    border_sides=(False, True, False, False),
    border_foreground=COLOR_BORDER_SUBTLE,
    padding=(0, 1),
    width=25,
)
SELECTED_ITEM_STYLE = Style(
    foreground=COLOR_BRAND_ACCENT,
    bold=True,
    border=NORMAL_BORDER,
    border_sides=(False, False, False, True),
    border_foreground=COLOR_BRAND_ACCENT,
    padding=(0, 0, 0, 1),
)
UNSELECTED_ITEM_STYLE = Style(foreground=COLOR_TEXT_PRIMARY, padding=(0, 0, 0, 2))
STATUS_BAR_STYLE = Style(foreground="241", background="235", padding=(0, 1))
LABEL_STYLE = Style(foreground=COLOR_TEXT_MUTED, bold=True, width=10)
VALUE_STYLE = Style(foreground=COLOR_TEXT_PRIMARY)
ERROR_STYLE = Style(foreground=COLOR_ERROR, bold=True)
SUBTLE_STYLE = Style(foreground=COLOR_TEXT_MUTED)
SUBTEXT_STYLE = SUBTLE_STYLE
SUCCESS_STYLE = Style(foreground=COLOR_SUCCESS)
WARNING_STYLE = Style(foreground=COLOR_WARNING)
HELP_STYLE = Style(foreground=COLOR_TEXT_MUTED, italic=True)
ACTIVE_TAB_STYLE = Style(
    border=ROUNDED_BORDER,
    border_sides=(True, True, False, True),
    border_foreground=COLOR_BRAND_ACCENT,
    padding=(0, 1),
    bold=True,
    foreground=COLOR_BRAND_ACCENT,
)
INACTIVE_TAB_STYLE = Style(
    border=ROUNDED_BORDER,
    border_sides=(True, True, False, True),
    border_foreground=COLOR_BORDER_SUBTLE,
    padding=(0, 1),
    foreground=COLOR_TEXT_MUTED,
)