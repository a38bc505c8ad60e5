"""Tests for search hit -> highlight rect conversion."""

from pdflayout.core.geometry import Rect
from pdflayout.search.rects import (
    extract_text_with_positions,
    find_text_positions,
    quads_to_pdf_rects,
    search_for_rects,
    search_text,
)


def r(x1, y1, x2, y2):
    return Rect(x1=x1, y1=y1, x2=x2, y2=y2)


def test_no_quads_no_rects():
    assert quads_to_pdf_rects([], 800) == []


def test_one_rect_per_quad_in_search_order(quad):
    # a match wrapping onto a second line
    quads = [quad(300, 100, 550, 112), quad(50, 114, 120, 126)]
    assert quads_to_pdf_rects(quads, 800) == [r(300, 688, 550, 700), r(50, 674, 120, 686)]


def test_search_for_rects(make_source, quad):
    source = make_source(size=(612.0, 792.0), quads={"entropy": [quad(72, 90, 130, 102)]})
    assert search_for_rects(source, 0, "entropy") == [r(72, 690, 130, 702)]
    assert search_for_rects(source, 0, "missing") == []


def test_search_respects_max_hits(make_source, quad):
    quads = [quad(10, y, 40, y + 10) for y in range(0, 100, 20)]
    source = make_source(quads={"the": quads})
    assert len(search_for_rects(source, 0, "the", max_hits=2)) == 2


def test_search_text(make_source, quad):
    source = make_source(quads={"entropy": [quad(72, 90, 130, 102)]})
    results = search_text(source, 0, "entropy")
    assert len(results) == 1
    assert results[0].text == "entropy"
    assert results[0].page == 0
    assert results[0].to_rects() == [r(72, 90, 130, 102)]
    assert search_text(source, 0, "missing") == []


def test_text_positions_in_pdf_space(make_source):
    source = make_source(
        lines=[("Deep Residual Learning", r(50, 40, 300, 60)), ("for Image Recognition", r(50, 62, 280, 80))]
    )
    fragments = extract_text_with_positions(source, 0)
    assert [f.text for f in fragments] == ["Deep Residual Learning", "for Image Recognition"]
    assert fragments[0].rect == r(50, 740, 300, 760)
    assert fragments[0].page == 0

    found = find_text_positions(source, 0, "IMAGE")
    assert [f.text for f in found] == ["for Image Recognition"]
