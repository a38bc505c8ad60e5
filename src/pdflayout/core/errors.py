"""Exceptions raised by the layout engine and its callers."""

from __future__ import annotations


class PdfLayoutError(Exception):
    """Base for every error raised by pdflayout."""


class PdfError(PdfLayoutError):
    """The underlying PDF library failed to open, load or query a page."""


class NoOutline(PdfLayoutError):
    def __init__(self) -> None:
        super().__init__("PDF has no outline. Please use page numbers instead.")


class SectionNotFound(PdfLayoutError):
    """A requested section title matched nothing in the outline."""

    def __init__(self, section: str, available: list[str]) -> None:
        self.section = section
        self.available = available
        listing = ", ".join(available) if available else "(none)"
        super().__init__(
            f"Section not found: '{section}'. Available sections: {listing}"
        )


class TextNotFound(PdfLayoutError):
    def __init__(self, page: int, text: str) -> None:
        self.page = page
        self.text = text
        super().__init__(f"Text not found on page {page}: {text}")


class InvalidPageRange(PdfLayoutError, ValueError):
    """A page specification could not be parsed."""


class PageOutOfRange(PdfLayoutError):
    def __init__(self, page: int, total_pages: int) -> None:
        self.page = page
        self.total_pages = total_pages
        super().__init__(f"Page {page} is out of range (PDF has {total_pages} pages)")


class FigureNotFound(PdfLayoutError):
    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Figure {index} not found. Page has {count} detected figures.")
