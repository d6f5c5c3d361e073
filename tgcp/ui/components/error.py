"""Boxed error display with suggestions based on the error text."""

from __future__ import annotations

from dataclasses import dataclass

from tgcp.styles import (
    BOX_STYLE,
    COLOR_ERROR,
    ERROR_STYLE,
    LEFT,
    ROUNDED_BORDER,
    SUBTLE_STYLE,
    VALUE_STYLE,
    join_horizontal,
    join_vertical,
)
from tgcp.ui.components.detail import render_footer_hint


def generate_suggestions(error, service_name: str) -> list[str]:
    """Suggestions that fit the kind of error described by its text."""
    text = str(error)
    suggestions: list[str] = []

    def has(*needles: str) -> bool:
        return any(n in text for n in needles)

    if has("403", "permission", "Insufficient", "denied"):
        suggestions += [
            f"Check IAM permissions for {service_name}",
            "Verify your account has the required roles",
        ]
    if has("network", "timeout", "connection", "dial"):
        suggestions += ["Check your internet connection", "Verify GCP API is accessible"]
    if has("404", "not found", "does not exist"):
        suggestions += ["Verify the resource exists", "Check project ID is correct"]
    if has("429", "rate limit", "quota"):
        suggestions += ["API rate limit reached", "Wait a moment and try again"]
    if has("401", "unauthorized", "credentials", "authentication"):
        suggestions += [
            "Check your GCP credentials",
            "Run: gcloud auth application-default login",
        ]
    if not suggestions:
        suggestions = ["Try refreshing with 'r'", "Check project configuration"]
    return suggestions


@dataclass
class ErrorView:
    """An error with a title, service name and suggestions."""

    error: BaseException | str | None
    title: str = ""
    service_name: str = ""
    suggestions: list[str] | None = None
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.suggestions is None:
            self.suggestions = (
                generate_suggestions(self.error, self.service_name)
                if self.error is not None
                else []
            )

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def view(self) -> str:
        if self.error is None:
            return ""
        header = join_horizontal(
            LEFT,
            ERROR_STYLE.render("⚠ "),
            ERROR_STYLE.evolve(bold=True).render(self.title),
        )
        message = str(self.error)
        if self.width > 0:
            max_width = self.width - 10
            if len(message) > max_width:
                message = message[: max(max_width - 3, 0)] + "..."

        suggestions = ""
        if self.suggestions:
            suggestions = join_vertical(
                LEFT,
                SUBTLE_STYLE.render("💡 Suggestions:"),
                "\n".join(f"  • {s}" for s in self.suggestions),
            )

        content = join_vertical(
            LEFT,
            header,
            "",
            VALUE_STYLE.render("Failed: " + message),
            "",
            suggestions,
            "",
            render_footer_hint("r Retry | q Back"),
        )
        return BOX_STYLE.evolve(
            border=ROUNDED_BORDER,
            border_foreground=COLOR_ERROR,
            padding=(1, 2),
            width=80,
        ).render(content)


def render_error(error, service_name: str, resource_type: str) -> str:
    """Render an error raised while loading resources of a service."""
    return ErrorView(error, f"Error Loading {resource_type}", service_name).view()