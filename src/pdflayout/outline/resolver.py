"""Map outline section titles to page ranges.

A section runs from its own start page up to (not including) the start page of
its next sibling. The last child of a section inherits the end of its parent,
and the last top-level section runs to the end of the document. The end page
is passed down explicitly while walking the tree, so items need no parent
links.

A header item without a page of its own starts at the page of its first paged
descendant. As a sibling boundary it does not count, so the preceding sibling
runs to the parent end instead.
"""

from __future__ import annotations

import logging

from pdflayout.core.document import OutlineItem, PdfOutline
from pdflayout.core.errors import NoOutline, SectionNotFound

logger = logging.getLogger(__name__)


def _matches(query_lower: str, item_title: str) -> bool:
    item_lower = item_title.lower()
    return query_lower == item_lower or query_lower in item_lower


def resolve_section(
    items: list[OutlineItem], title: str, parent_end_page: int
) -> tuple[OutlineItem, int] | None:
    """Find the first item (pre-order) whose title matches ``title``.

    Matching is case-insensitive and accepts ``title`` anywhere inside the
    item's title. An earlier partial match wins over a later exact one.
    Returns the item with its exclusive end page, or None.
    """
    query_lower = title.lower()

    for i, item in enumerate(items):
        end_page = parent_end_page
        if i + 1 < len(items) and items[i + 1].page is not None:
            end_page = items[i + 1].page

        if _matches(query_lower, item.title):
            return item, end_page

        found = resolve_section(item.children, title, end_page)
        if found is not None:
            return found

    return None


def _start_page(item: OutlineItem) -> int | None:
    """The item's page, else the first page found among its descendants."""
    if item.page is not None:
        return item.page
    for child in item.children:
        page = _start_page(child)
        if page is not None:
            return page
    return None


def _require_outline(outline: PdfOutline) -> None:
    if not outline.has_outline or not outline.items:
        raise NoOutline()


def section_page_range(outline: PdfOutline, title: str) -> range:
    """0-based, end-exclusive page range covered by one section."""
    _require_outline(outline)
    title = title.strip()

    found = resolve_section(outline.items, title, outline.total_pages)
    start = _start_page(found[0]) if found is not None else None
    if found is None or start is None:
        raise SectionNotFound(title, outline.titles())

    item, end = found
    # Sections starting on the same page as their successor still own that page.
    end = max(end, start + 1)
    logger.debug("Section '%s' -> '%s' pages %d..%d", title, item.title, start, end)
    return range(start, end)


def resolve_sections_to_pages(outline: PdfOutline, sections: str) -> list[int]:
    """Resolve comma-separated section titles to sorted, unique 0-based pages."""
    _require_outline(outline)

    names = [name.strip() for name in sections.split(",") if name.strip()]
    if not names:
        raise SectionNotFound(sections, outline.titles())

    pages: set[int] = set()
    for name in names:
        pages.update(section_page_range(outline, name))
    return sorted(pages)
