"""Temporary notifications."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

from tgcp.styles import (
    COLOR_BRAND_PRIMARY,
    COLOR_ERROR,
    COLOR_SUCCESS,
    COLOR_TEXT_PRIMARY,
    ROUNDED_BORDER,
    Style,
)
from tgcp.ui.messages import Command, tick

DEFAULT_DURATION = 3.0


class ToastType(Enum):
    SUCCESS = ("✓", COLOR_SUCCESS)
    ERROR = ("✗", COLOR_ERROR)
    INFO = ("ℹ", COLOR_BRAND_PRIMARY)

    @property
    def icon(self) -> str:
        return self.value[0]

    @property
    def color(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class ToastMsg:
    """Request to show a toast; a duration of zero means the default."""

    message: str
    type: ToastType = ToastType.INFO
    duration: float = 0.0


@dataclass(frozen=True)
class ToastDismissMsg:
    """Sent when a toast should be dismissed."""


@dataclass
class Toast:
    message: str
    type: ToastType
    duration: float = DEFAULT_DURATION
    created_at: float = field(default_factory=time.monotonic)

    @classmethod
    def from_msg(cls, msg: ToastMsg) -> "Toast":
        return cls(msg.message, msg.type, msg.duration or DEFAULT_DURATION)

    def is_expired(self) -> bool:
        return time.monotonic() - self.created_at > self.duration

    def dismiss_cmd(self) -> Command:
        """Command that yields a dismiss message once the duration has passed."""
        return tick(self.duration, lambda _now: ToastDismissMsg())

    def view(self) -> str:
        color = self.type.color
        box = Style(
            border=ROUNDED_BORDER, border_foreground=color, padding=(0, 2), background="235"
        )
        icon = Style(foreground=color, bold=True).render(self.type.icon)
        text = Style(foreground=COLOR_TEXT_PRIMARY).render(self.message)
        return box.render(icon + " " + text)