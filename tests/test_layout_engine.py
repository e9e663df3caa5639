"""Placement and pagination tests driven through the recording surface."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from receiptgen.config import ConfigModel
from receiptgen.layout.engine import Cursor, ReceiptLayoutEngine
from receiptgen.layout.surface import Image, Line, RecordingSurface, Text
from receiptgen.models import Member
from receiptgen.utils.errors import LayoutOverflowError

Factory = Callable[[int], list[Member]]

WIDTH = 215.9
HEIGHT = 279.4
MID = WIDTH / 2.0
MARGIN = 7.76
OFFSET = 7.2
LOGO = Path("logo.bmp")


def _render(cfg: ConfigModel, members: list[Member], period: str = "March") -> RecordingSurface:
    surface = RecordingSurface()
    ReceiptLayoutEngine(cfg.layout, surface, LOGO).render(period, members)
    return surface


def _lines(page: list[object]) -> list[Line]:
    return [cmd for cmd in page if isinstance(cmd, Line)]


def _titles(page: list[object]) -> list[Text]:
    return [cmd for cmd in page if isinstance(cmd, Text) and cmd.text == "Mutual Fund"]


def test_first_block_coordinates(cfg: ConfigModel) -> None:
    surface = _render(cfg, [Member("Jane", "Doe", "50")])
    texts = surface.commands(Text)
    y0 = HEIGHT - MARGIN - MARGIN / 2.0
    expected = [
        ("Mutual Fund", y0),
        ("Period: March", y0 - 2 * OFFSET),
        ("Name: Doe Jane", y0 - 3 * OFFSET),
        ("Payment: $50", y0 - 4 * OFFSET),
        ("Date:", y0 - 6 * OFFSET),
        ("Signature:", y0 - 7 * OFFSET),
    ]
    assert [t.text for t in texts] == [text for text, _ in expected]
    for cmd, (_, y) in zip(texts, expected):
        assert cmd.x == pytest.approx(MARGIN)
        assert cmd.y == pytest.approx(y)


def test_vertical_cut_line_on_first_page(cfg: ConfigModel) -> None:
    surface = _render(cfg, [Member("Jane", "Doe", "50")])
    first = surface.pages[0][0]
    assert first == Line(MID, HEIGHT - 1.0, MID, 1.0)


def test_logo_anchored_below_block(cfg: ConfigModel) -> None:
    surface = _render(cfg, [Member("Jane", "Doe", "50")])
    (logo,) = surface.commands(Image)
    end_y = HEIGHT - 2.5 * MARGIN - 7 * OFFSET
    assert logo.path == LOGO
    assert logo.x == pytest.approx(MARGIN + 52.0)
    assert logo.y == pytest.approx(end_y + MARGIN - 1.0)
    assert logo.scale == 1.8


def test_no_logo_when_path_missing(cfg: ConfigModel, make_members: Factory) -> None:
    surface = RecordingSurface()
    ReceiptLayoutEngine(cfg.layout, surface).render("March", make_members(3))
    assert surface.commands(Image) == []


def test_four_members_stay_in_left_column(cfg: ConfigModel, make_members: Factory) -> None:
    surface = _render(cfg, make_members(4))
    assert len(surface.pages) == 1
    texts = surface.commands(Text)
    assert len(texts) == 24
    assert all(t.x == pytest.approx(MARGIN) for t in texts)
    horizontal = [ln for ln in surface.commands(Line) if ln.is_horizontal]
    assert len(horizontal) == 3
    assert all((ln.x1, ln.x2) == (1.0, MID) for ln in horizontal)


def test_right_column_starts_at_top(cfg: ConfigModel, make_members: Factory) -> None:
    surface = _render(cfg, make_members(5))
    titles = _titles(surface.pages[0])
    assert titles[4].x == pytest.approx(MID + MARGIN)
    assert titles[4].y == pytest.approx(titles[0].y)


def test_full_page_cut_lines(cfg: ConfigModel, make_members: Factory) -> None:
    surface = _render(cfg, make_members(8))
    assert len(surface.pages) == 1
    lines = _lines(surface.pages[0])
    vertical = [ln for ln in lines if ln.is_vertical]
    horizontal = [ln for ln in lines if ln.is_horizontal]
    assert len(vertical) == 1
    assert [(ln.x1, ln.x2) for ln in horizontal] == [(1.0, MID)] * 3 + [(MID, WIDTH - 1.0)] * 3
    # the eighth receipt is the last drawn element and is not followed by a cut line
    assert not isinstance(surface.pages[0][-1], Line)
    assert surface.saved


def test_cut_lines_sit_between_blocks(cfg: ConfigModel, make_members: Factory) -> None:
    surface = _render(cfg, make_members(2))
    cuts = [ln for ln in surface.commands(Line) if ln.is_horizontal]
    titles = _titles(surface.pages[0])
    assert len(cuts) == 2
    block = 2.5 * MARGIN + 7 * OFFSET
    assert cuts[0].y1 == pytest.approx(HEIGHT - block)
    assert cuts[1].y1 == pytest.approx(HEIGHT - 2 * block)
    assert titles[1].y == pytest.approx(cuts[0].y1 - 1.5 * MARGIN)


def test_ninth_member_starts_new_page(cfg: ConfigModel, make_members: Factory) -> None:
    surface = _render(cfg, make_members(9))
    assert len(surface.pages) == 2
    second = surface.pages[1]
    assert second[0] == Line(MID, HEIGHT - 1.0, MID, 1.0)
    (title,) = _titles(second)
    assert title.x == pytest.approx(MARGIN)
    assert title.y == pytest.approx(HEIGHT - 1.5 * MARGIN)
    names = [t.text for t in second if isinstance(t, Text) and t.text.startswith("Name:")]
    assert names == ["Name: Last9 First9"]


def test_render_returns_page_count(cfg: ConfigModel, make_members: Factory) -> None:
    engine = ReceiptLayoutEngine(cfg.layout, RecordingSurface(), LOGO)
    assert engine.render("Q1", make_members(17)) == 3


def test_empty_member_list_saves_blank_page(cfg: ConfigModel) -> None:
    surface = _render(cfg, [])
    assert surface.saved
    assert surface.pages == [[Line(MID, HEIGHT - 1.0, MID, 1.0)]]


def test_layout_is_deterministic(cfg: ConfigModel, make_members: Factory) -> None:
    assert _render(cfg, make_members(6)).pages == _render(cfg, make_members(6)).pages


def test_three_columns(cfg: ConfigModel, make_members: Factory) -> None:
    layout = cfg.layout.model_copy(update={"columns": 3})
    surface = RecordingSurface()
    ReceiptLayoutEngine(layout, surface).render("May", make_members(12))
    width = WIDTH / 3
    vertical = [ln for ln in surface.commands(Line) if ln.is_vertical]
    assert [ln.x1 for ln in vertical] == pytest.approx([width, 2 * width])
    spans = sorted({(ln.x1, ln.x2) for ln in surface.commands(Line) if ln.is_horizontal})
    flat = [x for span in spans for x in span]
    assert flat == pytest.approx([1.0, width, width, 2 * width, 2 * width, WIDTH - 1.0])


def test_overflow_guard(cfg: ConfigModel) -> None:
    engine = ReceiptLayoutEngine(cfg.layout, RecordingSurface())
    with pytest.raises(LayoutOverflowError):
        engine.draw_receipt(Member("A", "B", "1"), "May", Cursor(MARGIN, 50.0))
