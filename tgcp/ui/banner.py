"""Coloured ASCII art banner."""

from tgcp.styles import BOTTOM, Style, join_horizontal

_LETTER_T = "\n".join(
    ["████████╗", "╚══██╔══╝", "   ██║   ", "   ██║   ", "   ██║   ", "   ╚═╝   "]
)
_LETTER_G = "\n".join(
    [" ██████╗ ", "██╔════╝ ", "██║  ███╗", "██║   ██║", "╚██████╔╝", " ╚═════╝ "]
)
_LETTER_C = "\n".join(
    [" ██████╗", " ██╔════╝", " ██║     ", " ██║     ", " ╚██████╗", "  ╚═════╝"]
)
_LETTER_P = "\n".join(
    ["██████╗", "██╔══██╗", "██████╔╝", "██╔═══╝ ", "██║     ", "╚═╝     "]
)

_STYLE_T = Style(foreground="#4285F4")
_STYLE_G = Style(foreground="#DB4437")
_STYLE_C = Style(foreground="#F4B400")
_STYLE_P = Style(foreground="#0F9D58")


def get_banner() -> str:
    """Return the coloured banner."""
    return join_horizontal(
        BOTTOM,
        _STYLE_T.render(_LETTER_T),
        _STYLE_G.render(_LETTER_G),
        _STYLE_C.render(_LETTER_C),
        _STYLE_P.render(_LETTER_P),
    )