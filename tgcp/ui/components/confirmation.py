"""Confirmation dialog for actions on resources."""

from __future__ import annotations

from dataclasses import dataclass

from tgcp.styles import (
    BOX_STYLE,
    CENTER,
    COLOR_BRAND_ACCENT,
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_TEXT_MUTED,
    COLOR_WARNING,
    ROUNDED_BORDER,
    TITLE_STYLE,
    Style,
    join_vertical,
    place,
)
from tgcp.ui.components.detail import render_footer_hint


@dataclass(frozen=True)
class _ActionStyle:
    icon: str
    title: str
    color: str
    impact: str = ""


_DELETE = _ActionStyle("⚠", "Confirm Deletion", COLOR_ERROR, "This action cannot be undone.")
_STOP = _ActionStyle("⏸", "Confirm Stop", COLOR_WARNING)
_START = _ActionStyle("▶", "Confirm Start", COLOR_INFO)
_SNAPSHOT = _ActionStyle("📷", "Confirm Snapshot", COLOR_BRAND_ACCENT)
_DEFAULT = _ActionStyle("⚠", "Confirm Action", COLOR_WARNING)

_ACTION_STYLES = {
    **dict.fromkeys(("delete", "remove", "destroy"), _DELETE),
    **dict.fromkeys(("stop", "terminate", "shutdown"), _STOP),
    **dict.fromkeys(("start", "restart", "resume"), _START),
    **dict.fromkeys(("snapshot", "backup"), _SNAPSHOT),
}

_VERBS = {
    "start": "START",
    "stop": "STOP",
    "delete": "DELETE",
    "restart": "RESTART",
    "snapshot": "CREATE SNAPSHOT OF",
}

_IMPACT_STYLE = Style(foreground=COLOR_TEXT_MUTED, italic=True)


def _capitalize(text: str) -> str:
    if text and "a" <= text[0] <= "z":
        return text[0].upper() + text[1:]
    return text


@dataclass
class Confirmation:
    """A dialog asking whether to go ahead with an action on a resource."""

    action: str
    resource_name: str
    resource_type: str
    message: str = ""
    width: int = 0
    height: int = 0

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def action_text(self) -> str:
        """The question asked, built from the action, type and resource name."""
        verb = _VERBS.get(self.action, _capitalize(self.action))
        name = TITLE_STYLE.render(self.resource_name)
        return f"Are you sure you want to {verb} {self.resource_type} {name}?"

    def view(self) -> str:
        style = _ACTION_STYLES.get(self.action, _DEFAULT)
        title = Style(foreground=style.color, bold=True).render(f"{style.icon} {style.title}")
        text = self.message or self.action_text()
        parts = [title, "", text]
        if style.impact:
            parts += ["", _IMPACT_STYLE.render(style.impact)]
        parts += ["", render_footer_hint("y Confirm | n Cancel")]
        content = join_vertical(CENTER, *parts)
        dialog = BOX_STYLE.evolve(
            border=ROUNDED_BORDER,
            border_foreground=style.color,
            padding=(1, 4),
            width=70,
        ).render(content)
        return place(80, 20, CENTER, CENTER, dialog)


def render_confirmation(
    action: str, resource_name: str, resource_type: str, message: str = ""
) -> str:
    """Render a confirmation dialog, with an optional custom message."""
    return Confirmation(action, resource_name, resource_type, message).view()