"""Breadcrumb line for navigation context."""

from tgcp.styles import COLOR_BORDER_SUBTLE, COLOR_TEXT_PRIMARY, SUBTLE_STYLE, Style

BREADCRUMB_SEP = " › "

_SEP_STYLE = Style(foreground=COLOR_BORDER_SUBTLE)
_CURRENT_STYLE = Style(foreground=COLOR_TEXT_PRIMARY, bold=True)


def breadcrumb(*args: str) -> str:
    """Render segments with muted path and a prominent last segment; blanks are skipped."""
    segments = [part for part in args if part.strip()]
    if not segments:
        return ""
    *path, current = segments
    sep = _SEP_STYLE.render(BREADCRUMB_SEP)
    rendered = sep.join(SUBTLE_STYLE.render(part) for part in path)
    if not path:
        return _CURRENT_STYLE.render(current)
    return rendered + sep + _CURRENT_STYLE.render(current)