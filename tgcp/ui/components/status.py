"""Status badges for resource states."""

from __future__ import annotations

from enum import Enum

from tgcp.styles import COLOR_TEXT_PRIMARY, Style


class StatusCategory(Enum):
    RUNNING = ("✓", "0", "42")
    STOPPED = ("✗", "0", "196")
    PENDING = ("◐", "0", "214")
    UNKNOWN = ("○", "252", "240")

    @property
    def icon(self) -> str:
        return self.value[0]

    @property
    def foreground(self) -> str:
        return self.value[1]

    @property
    def background(self) -> str:
        return self.value[2]


_RUNNING = frozenset(
    {"RUNNING", "READY", "ACTIVE", "DONE", "RUNNABLE", "SUCCEEDED", "HEALTHY", "ENABLED"}
)
_STOPPED = frozenset(
    {"STOPPED", "TERMINATED", "FAILED", "ERROR", "DELETED", "SUSPENDED", "OFFLINE", "DISABLED", "CANCELLED"}
)
_PENDING = frozenset(
    {
        "PENDING", "PROVISIONING", "STAGING", "STOPPING", "SUSPENDING", "REPAIRING",
        "STARTING", "UPDATING", "CREATING", "DELETING", "MAINTENANCE", "RECONCILING",
        "JOB_STATE_QUEUED", "DRAINING", "CANCELLING",
    }
)

_SHORT_NAMES = {
    "TERMINATED": "STOPPED",
    "JOB_STATE_QUEUED": "QUEUED",
    "JOB_STATE_RUNNING": "RUNNING",
    "JOB_STATE_DONE": "DONE",
    "JOB_STATE_FAILED": "FAILED",
    "JOB_STATE_CANCELLED": "CANCELLED",
}


def categorize_status(state: str) -> StatusCategory:
    """Classify a state string, case-insensitively."""
    upper = state.strip().upper()
    if upper in _RUNNING:
        return StatusCategory.RUNNING
    if upper in _STOPPED:
        return StatusCategory.STOPPED
    if upper in _PENDING:
        return StatusCategory.PENDING
    return StatusCategory.UNKNOWN


def _display(state: str) -> str:
    upper = state.strip().upper()
    return _SHORT_NAMES.get(upper, upper)


def render_status(state: str) -> str:
    """Badge with icon and coloured background."""
    cat = categorize_status(state)
    style = Style(foreground=cat.foreground, background=cat.background, padding=(0, 1))
    return style.render(f"{cat.icon} {_display(state)}")


def render_status_minimal(state: str) -> str:
    """Coloured icon followed by plain state text."""
    cat = categorize_status(state)
    icon = Style(foreground=cat.background, bold=True).render(cat.icon)
    return icon + Style(foreground=COLOR_TEXT_PRIMARY).render(" " + _display(state))