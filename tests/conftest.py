"""Shared fixtures: an in-memory PDF source and a sample outline."""

import pytest

from pdflayout.backends.base import BasePdfSource
from pdflayout.core.document import OutlineItem, PdfOutline, TextBlock, TextLine
from pdflayout.core.geometry import Quad


class FakeSource(BasePdfSource):
    """Serves canned page data instead of reading a file."""

    name = "fake"

    def __init__(
        self,
        pages=1,
        size=(600.0, 800.0),
        blocks=None,
        lines=None,
        quads=None,
        outline=None,
        texts=None,
    ):
        super().__init__("fake.pdf")
        self.pages = pages
        self.size = size
        self.blocks = blocks or []
        self.lines = lines or []
        self.quads = quads or {}
        self._outline = outline
        self.texts = texts or {}
        self.closed = False

    def page_count(self):
        return self.pages

    def page_bounds(self, page_index):
        self.check_page(page_index)
        return self.size

    def text_blocks(self, page_index):
        return [TextBlock(bbox=b) for b in self.blocks]

    def text_lines(self, page_index):
        return [TextLine(text=t, bbox=b) for t, b in self.lines]

    def page_text(self, page_index):
        return self.texts.get(page_index, f"text of page {page_index + 1}")

    def search(self, page_index, text, max_hits=500):
        return list(self.quads.get(text, []))[:max_hits]

    def outline(self):
        if self._outline is None:
            return PdfOutline(has_outline=False, total_pages=self.pages)
        return self._outline

    def close(self):
        self.closed = True


@pytest.fixture
def paper_outline():
    """Introduction@0, Methods@5 (Data Collection@6, Analysis@8), Results@10; 20 pages."""
    return PdfOutline(
        has_outline=True,
        total_pages=20,
        items=[
            OutlineItem(title="Introduction", page=0),
            OutlineItem(
                title="Methods",
                page=5,
                children=[
                    OutlineItem(title="Data Collection", page=6),
                    OutlineItem(title="Analysis", page=8),
                ],
            ),
            OutlineItem(title="Results", page=10),
        ],
    )


@pytest.fixture
def make_source():
    return FakeSource


@pytest.fixture
def quad():
    def _quad(x1, y1, x2, y2):
        return Quad.from_points((x1, y1), (x2, y1), (x1, y2), (x2, y2))

    return _quad
