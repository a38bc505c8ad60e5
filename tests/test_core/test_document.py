"""Tests for the value models."""

import pytest
from pydantic import ValidationError

from pdflayout.core.document import (
    FigureRegion,
    FigureType,
    OutlineItem,
    PdfOutline,
    SearchResult,
)
from pdflayout.core.geometry import Quad, Rect


def test_rect_dimensions():
    rect = Rect(x1=100, y1=200, x2=400, y2=350)
    assert rect.width == 300
    assert rect.height == 150
    assert rect.area == 45000
    assert rect.as_list() == [100, 200, 400, 350]
    assert Rect.from_sequence([100, 200, 400, 350]) == rect


def test_rect_is_immutable():
    rect = Rect(x1=0, y1=0, x2=1, y2=1)
    with pytest.raises(ValidationError):
        rect.x1 = 5


def test_quad_to_rect():
    quad = Quad.from_points((10.0, 20.0), (50.0, 20.0), (10.0, 35.0), (50.0, 35.0))
    assert quad.to_rect() == Rect(x1=10, y1=20, x2=50, y2=35)


def test_skewed_quad_to_rect_takes_extremes():
    quad = Quad.from_points((12.0, 21.0), (50.0, 19.0), (10.0, 34.0), (48.0, 36.0))
    assert quad.to_rect() == Rect(x1=10, y1=19, x2=50, y2=36)


def test_figure_region_dimensions():
    fig = FigureRegion(
        index=0,
        rect=Rect(x1=100, y1=200, x2=400, y2=500),
        figure_type=FigureType.IMAGE,
        confidence=0.8,
    )
    assert fig.width == 300
    assert fig.height == 300
    assert fig.aspect_ratio == pytest.approx(1.0)


def test_figure_region_aspect_ratio():
    wide = FigureRegion(
        index=0, rect=Rect(x1=0, y1=0, x2=400, y2=200), figure_type=FigureType.CHART, confidence=0.7
    )
    tall = FigureRegion(
        index=0, rect=Rect(x1=0, y1=0, x2=100, y2=400), figure_type=FigureType.DIAGRAM, confidence=0.6
    )
    flat = FigureRegion(
        index=0, rect=Rect(x1=0, y1=10, x2=100, y2=10), figure_type=FigureType.UNKNOWN, confidence=0.5
    )
    assert wide.aspect_ratio == pytest.approx(2.0)
    assert tall.aspect_ratio == pytest.approx(0.25)
    assert flat.aspect_ratio == 1.0


def test_figure_region_padding_clamps_at_origin():
    fig = FigureRegion(
        index=0, rect=Rect(x1=5, y1=50, x2=200, y2=300), figure_type=FigureType.CHART, confidence=0.9
    )
    assert fig.padded(10) == Rect(x1=0, y1=40, x2=210, y2=310)


def test_confidence_must_be_in_unit_interval():
    with pytest.raises(ValidationError):
        FigureRegion(
            index=0, rect=Rect(x1=0, y1=0, x2=1, y2=1), figure_type=FigureType.IMAGE, confidence=1.5
        )


def test_figure_type_descriptions():
    assert FigureType.IMAGE.description == "image"
    assert FigureType.CHART.description == "chart"
    assert FigureType.DIAGRAM.description == "diagram"
    assert FigureType.UNKNOWN.description == "figure"


def test_outline_titles_are_preorder(paper_outline):
    assert paper_outline.titles() == [
        "Introduction",
        "Methods",
        "Data Collection",
        "Analysis",
        "Results",
    ]


def test_outline_item_defaults():
    item = OutlineItem(title="Preface")
    assert item.page is None
    assert item.children == []
    assert PdfOutline(has_outline=False, total_pages=3).titles() == []


def test_search_result_rects_stay_in_render_space(quad):
    result = SearchResult(text="x", page=0, quads=[quad(10, 20, 50, 35), quad(10, 40, 30, 55)])
    assert result.to_rects() == [
        Rect(x1=10, y1=20, x2=50, y2=35),
        Rect(x1=10, y1=40, x2=30, y2=55),
    ]


def test_figure_type_is_a_plain_string():
    assert str(FigureType.CHART) == "chart"
    assert f"{FigureType.DIAGRAM}" == "diagram"
    assert FigureType("image") is FigureType.IMAGE
