"""Page selection, text reading and highlight lookup for tool callers.

Callers speak 1-based page numbers; everything below this module is 0-based.
"""

from __future__ import annotations

from pdflayout.backends.base import BasePdfSource
from pdflayout.core.errors import InvalidPageRange, NoOutline, PageOutOfRange, TextNotFound
from pdflayout.core.geometry import Rect
from pdflayout.outline.resolver import resolve_sections_to_pages
from pdflayout.search.rects import search_for_rects
from pdflayout.utils.pages import parse_page_range


def select_pages(
    source: BasePdfSource, pages: str | None = None, section: str | None = None
) -> list[int]:
    """0-based pages for a page spec or a section list. ``pages`` wins."""
    if pages is not None:
        return parse_page_range(pages, source.page_count())
    if section is not None:
        outline = source.outline()
        if not outline.has_outline:
            raise NoOutline()
        return resolve_sections_to_pages(outline, section)
    raise InvalidPageRange("Either 'pages' or 'section' parameter is required")


def read_pages(
    source: BasePdfSource, pages: str | None = None, section: str | None = None
) -> str:
    """Text of the selected pages, each under a ``--- Page N ---`` header."""
    parts = [
        f"--- Page {page + 1} ---\n\n{source.page_text(page)}"
        for page in select_pages(source, pages, section)
    ]
    return "\n\n".join(parts)


def highlight_rects(source: BasePdfSource, page: int, text: str) -> list[Rect]:
    """PDF-space rects for ``text`` on 1-based ``page``, ready to annotate."""
    total = source.page_count()
    if not 1 <= page <= total:
        raise PageOutOfRange(page, total)

    rects = search_for_rects(source, page - 1, text)
    if not rects:
        raise TextNotFound(page, text)
    return rects
