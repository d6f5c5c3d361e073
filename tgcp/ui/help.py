"""Help overlay listing keybindings."""

from __future__ import annotations

from tgcp.styles import (
    CENTER,
    COLOR_BRAND_ACCENT,
    COLOR_BRAND_PRIMARY,
    COLOR_TEXT_PRIMARY,
    PRIMARY_BOX_STYLE,
    SUBTLE_STYLE,
    TITLE_STYLE,
    TOP,
    Style,
    join_horizontal,
    join_vertical,
    place,
    text_width,
)
from tgcp.ui.banner import get_banner

_SECTIONS = (
    (
        "Global",
        (
            (":", "Command Palette"),
            ("?", "Toggle Help"),
            ("Tab", "Toggle Sidebar"),
            ("Ctrl+c", "Force Quit"),
        ),
    ),
    (
        "Navigation",
        (
            ("↑/↓  j/k", "Navigate List"),
            ("Enter", "Select / Details"),
            ("/", "Filter Items"),
            ("Esc", "Go Back"),
        ),
    ),
    (
        "Actions",
        (
            ("r", "Refresh Data"),
            ("s", "Start Resource"),
            ("x", "Stop Resource"),
            ("h", "SSH Connect"),
            ("l", "Log Tailing"),
        ),
    ),
)

_SECTION_HEADER = TITLE_STYLE.evolve(foreground=COLOR_BRAND_ACCENT, bold=True, underline=True)
_DESC_STYLE = Style(foreground=COLOR_TEXT_PRIMARY)


def _column(title: str, items) -> str:
    key_width = max([text_width(title)] + [text_width(k) for k, _ in items]) + 3
    key_style = Style(foreground=COLOR_BRAND_PRIMARY, bold=True, width=key_width)
    lines = [_SECTION_HEADER.render(title) + "\n\n"]
    lines += [key_style.render(key) + _DESC_STYLE.render(desc) + "\n" for key, desc in items]
    return "".join(lines)


def help_view(width: int, height: int) -> str:
    """Centred dialog with the banner and keybindings in columns."""
    columns = [_column(title, items) for title, items in _SECTIONS]
    content = join_horizontal(TOP, columns[0], "   ", columns[1], "   ", columns[2])
    dialog_width = min(text_width(content) + 8, width - 4)

    title = TITLE_STYLE.evolve(foreground=COLOR_BRAND_PRIMARY).render("TGCP Help & Keybindings")
    footer = SUBTLE_STYLE.render("Press ? or Esc to close")
    dialog = PRIMARY_BOX_STYLE.evolve(
        width=dialog_width, border_foreground=COLOR_BRAND_PRIMARY
    ).render(join_vertical(CENTER, get_banner(), "\n", title, "", content, "", footer))
    return place(width, height, CENTER, CENTER, dialog)