from tgcp.styles import strip_ansi, text_width
from tgcp.ui.components.detail import (
    KeyValue,
    detail_card,
    detail_section,
    render_footer_hint,
)


def test_footer_hint():
    assert strip_ansi(render_footer_hint("s Start | x Stop |  | q")) == "[s] Start  [x] Stop  [q] "


def test_detail_card_contents():
    card = detail_card(
        "Topic Details",
        [KeyValue("Name", "t1"), KeyValue("Status", "READY")],
        width=60,
        footer_hint="q Back",
    )
    plain = strip_ansi(card)
    assert "Topic Details" in plain
    assert "Name:" in plain and "t1" in plain
    assert "✓ READY" in plain
    assert plain.rstrip().endswith("[q] Back")


def test_detail_card_keys_aligned():
    plain = strip_ansi(detail_card("T", [KeyValue("A", "1"), KeyValue("Longer", "2")]))
    lines = [line for line in plain.split("\n") if "1" in line or "2" in line]
    assert lines[0].index("1") == lines[1].index("2")


def test_detail_card_default_width():
    assert text_width(detail_card("T", [])) >= 80


def test_detail_section():
    out = strip_ansi(detail_section("Meta", "body"))
    assert "Meta" in out and "body" in out
    assert out.startswith("┌")