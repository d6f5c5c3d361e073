"""Detail cards, sections and keyboard hint footers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from tgcp.styles import (
    COLOR_BORDER_SUBTLE,
    COLOR_TEXT_MUTED,
    HEADER_STYLE,
    LABEL_STYLE,
    LEFT,
    PRIMARY_BOX_STYLE,
    SECONDARY_BOX_STYLE,
    VALUE_STYLE,
    Style,
    join_vertical,
)
from tgcp.ui.components.status import render_status


@dataclass(frozen=True)
class KeyValue:
    key: str
    value: str
    use_value_style: bool = False


_STATUS_KEYS = frozenset({"Status", "State"})


def _render_key_values(rows: list[KeyValue], key_style: Style, value_style: Style) -> str:
    if not rows:
        return ""
    key_len = max(len(row.key) for row in rows)
    lines = []
    for row in rows:
        key = (row.key + ":").ljust(key_len + 1)
        styled = "\x1b" in row.value
        if row.key in _STATUS_KEYS and not styled:
            value = render_status(row.value)
        elif row.use_value_style or not styled:
            value = value_style.render(row.value)
        else:
            value = row.value
        lines.append(f"{key_style.render(key)} {value}")
    return "\n".join(lines)


def detail_card(
    title: str,
    rows: Iterable[KeyValue],
    width: int = 0,
    border_color: str = "",
    footer_hint: str = "",
) -> str:
    """Header bar over a bordered box of key/value rows."""
    width = width if width > 0 else 80
    border_color = border_color or COLOR_BORDER_SUBTLE
    header = HEADER_STYLE.evolve(width=width).render(title)
    body = _render_key_values(list(rows), LABEL_STYLE, VALUE_STYLE)
    box = PRIMARY_BOX_STYLE.evolve(border_foreground=border_color, width=width).render(body)
    parts = [header, box]
    if footer_hint:
        parts.append(render_footer_hint(footer_hint))
    return join_vertical(LEFT, *parts)


def detail_section(title: str, body: str, border_color: str = "") -> str:
    """Secondary boxed section with a header."""
    border_color = border_color or COLOR_BORDER_SUBTLE
    content = join_vertical(LEFT, HEADER_STYLE.render(title), body)
    return SECONDARY_BOX_STYLE.evolve(border_foreground=border_color, width=80).render(content)


_KEY_STYLE = Style(foreground="232", background=COLOR_BORDER_SUBTLE, bold=True)
_ACTION_STYLE = Style(foreground=COLOR_TEXT_MUTED)


def render_footer_hint(hint: str) -> str:
    """Turn "s Start | q Back" into "[s] Start  [q] Back" with styled keys."""
    rendered = []
    for part in hint.split("|"):
        part = part.strip()
        if not part:
            continue
        key, _, action = part.partition(" ")
        rendered.append(_KEY_STYLE.render(f"[{key}]") + " " + _ACTION_STYLE.render(action))
    return "  ".join(rendered)