"""Turn text search hits into PDF-space highlight rectangles."""

from __future__ import annotations

import logging

from pdflayout.backends.base import BasePdfSource
from pdflayout.core.document import SearchResult, TextFragment
from pdflayout.core.geometry import Quad, Rect
from pdflayout.layout.coords import to_pdf_space

logger = logging.getLogger(__name__)

DEFAULT_MAX_HITS = 500


def quads_to_pdf_rects(quads: list[Quad], page_height: float) -> list[Rect]:
    """One PDF-space rect per quad, in search order.

    A match wrapping over several lines yields one quad, and so one rect, per
    line fragment. An empty list means the text was not found.
    """
    return [to_pdf_space(quad, page_height) for quad in quads]


def search_text(
    source: BasePdfSource, page_index: int, text: str, max_hits: int = DEFAULT_MAX_HITS
) -> list[SearchResult]:
    """Native search on one page, quads kept in rendering space."""
    quads = source.search(page_index, text, max_hits)
    if not quads:
        return []
    return [SearchResult(text=text, page=page_index, quads=quads)]


def search_for_rects(
    source: BasePdfSource, page_index: int, text: str, max_hits: int = DEFAULT_MAX_HITS
) -> list[Rect]:
    """PDF-space rects for every occurrence of ``text`` on the page."""
    _, page_height = source.page_bounds(page_index)
    quads = source.search(page_index, text, max_hits)
    logger.debug("'%s' on page %d: %d quads", text, page_index, len(quads))
    return quads_to_pdf_rects(quads, page_height)


def extract_text_with_positions(source: BasePdfSource, page_index: int) -> list[TextFragment]:
    """Every text line on the page with its PDF-space rect."""
    _, page_height = source.page_bounds(page_index)
    return [
        TextFragment(text=line.text, page=page_index, rect=to_pdf_space(line.bbox, page_height))
        for line in source.text_lines(page_index)
    ]


def find_text_positions(source: BasePdfSource, page_index: int, needle: str) -> list[TextFragment]:
    """Lines containing ``needle`` (case-insensitive).

    Coarser than ``search_for_rects``, which locates the exact glyph run.
    """
    needle_lower = needle.lower()
    return [
        fragment
        for fragment in extract_text_with_positions(source, page_index)
        if needle_lower in fragment.text.lower()
    ]
