"""Bottom status bar: mode badge, message and help hints."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tgcp.styles import (
    COLOR_BORDER_SUBTLE,
    COLOR_BRAND_ACCENT,
    COLOR_BRAND_PRIMARY,
    COLOR_TEXT_MUTED,
    COLOR_WARNING,
    STATUS_BAR_STYLE,
    TOP,
    Style,
    join_horizontal,
    text_width,
)


@dataclass(frozen=True)
class StatusMsg:
    """Replace the status bar message."""

    text: str


_SEP = Style(foreground=COLOR_BORDER_SUBTLE).render(" │ ")
_MODE_STYLE = Style(foreground="232", background=COLOR_BORDER_SUBTLE, bold=True, padding=(0, 1))
_HELP_STYLE = Style(foreground=COLOR_TEXT_MUTED)


@dataclass
class StatusBar:
    message: str = "Ready"
    mode: str = "NORMAL"
    focus_pane: str = ""
    help_text: str = ""
    width: int = 80
    last_updated: datetime | None = None
    is_error: bool = False

    def update(self, msg) -> None:
        if isinstance(msg, StatusMsg):
            self.message = msg.text
        return None

    def _mode_badge(self) -> str:
        style = _MODE_STYLE
        label = self.mode
        if self.is_error:
            style, label = style.evolve(background="196"), "ERROR"
        elif self.mode == "COMMAND":
            style = style.evolve(background=COLOR_BRAND_PRIMARY)
        elif self.mode == "FILTER":
            style = style.evolve(background=COLOR_WARNING)
        elif self.focus_pane == "MAIN":
            style, label = style.evolve(background=COLOR_BRAND_ACCENT), self.focus_pane
        elif self.focus_pane in ("SIDEBAR", "HOME"):
            style, label = style.evolve(background=COLOR_BORDER_SUBTLE), self.focus_pane
        elif self.mode == "NORMAL":
            label = "NORMAL"
        return style.render(label)

    def view(self) -> str:
        mode = self._mode_badge()
        right = _SEP + _HELP_STYLE.render(self.help_text) if self.help_text else ""
        info_width = max(self.width - text_width(mode) - text_width(right) - 1, 0)
        info = STATUS_BAR_STYLE.evolve(width=info_width).render(self.message)
        return join_horizontal(TOP, mode, " ", info, right)