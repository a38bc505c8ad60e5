"""PyMuPDF-backed PDF source."""

from __future__ import annotations

import logging
from pathlib import Path

import fitz  # pymupdf

from pdflayout.backends.base import BasePdfSource
from pdflayout.core.document import OutlineItem, PdfOutline, TextBlock, TextLine
from pdflayout.core.errors import PdfError
from pdflayout.core.geometry import Quad, Rect
from pdflayout.core.registry import SourceRegistry

logger = logging.getLogger(__name__)

# get_text("blocks") tuples: (x0, y0, x1, y1, text, block_no, block_type)
_TEXT_BLOCK = 0


def _toc_to_items(toc: list[list]) -> list[OutlineItem]:
    """Build an outline tree from PyMuPDF's flat ``[level, title, page]`` list.

    TOC pages are 1-based, with values below 1 meaning "no target".
    """
    root: list[dict] = []
    stack: list[tuple[int, list[dict]]] = [(0, root)]

    for entry in toc:
        level, title, page = entry[0], entry[1], entry[2]
        node = {"title": title, "page": page - 1 if page >= 1 else None, "children": []}
        while len(stack) > 1 and stack[-1][0] >= level:
            stack.pop()
        stack[-1][1].append(node)
        stack.append((level, node["children"]))

    return [OutlineItem.model_validate(node) for node in root]


class PyMuPDFSource(BasePdfSource):
    """PDF source using PyMuPDF (MuPDF) for text layer, search and outline."""

    name = "pymupdf"

    def __init__(self, file_path: str | Path, **kwargs) -> None:
        super().__init__(file_path, **kwargs)
        try:
            self._doc = fitz.open(str(self.file_path))
        except Exception as exc:
            raise PdfError(f"Failed to open PDF '{self.file_path}': {exc}") from exc

    def _page(self, page_index: int) -> fitz.Page:
        self.check_page(page_index)
        try:
            return self._doc.load_page(page_index)
        except Exception as exc:
            raise PdfError(f"Failed to load page {page_index}: {exc}") from exc

    def page_count(self) -> int:
        return self._doc.page_count

    def page_bounds(self, page_index: int) -> tuple[float, float]:
        rect = self._page(page_index).rect
        return rect.width, rect.height

    def text_blocks(self, page_index: int) -> list[TextBlock]:
        blocks = []
        for b in self._page(page_index).get_text("blocks"):
            if b[6] != _TEXT_BLOCK:
                continue
            blocks.append(TextBlock(bbox=Rect.from_sequence(b[:4]), text=b[4]))
        return blocks

    def text_lines(self, page_index: int) -> list[TextLine]:
        lines = []
        page_dict = self._page(page_index).get_text("dict")
        for block in page_dict["blocks"]:
            if block.get("type") != _TEXT_BLOCK:
                continue
            for line in block["lines"]:
                text = "".join(span["text"] for span in line["spans"])
                if text:
                    lines.append(TextLine(text=text, bbox=Rect.from_sequence(line["bbox"])))
        return lines

    def page_text(self, page_index: int) -> str:
        return self._page(page_index).get_text()

    def search(self, page_index: int, text: str, max_hits: int = 500) -> list[Quad]:
        page = self._page(page_index)
        try:
            hits = page.search_for(text, quads=True)
        except Exception as exc:
            raise PdfError(f"Failed to search page {page_index}: {exc}") from exc
        return [
            Quad.from_points(
                (q.ul.x, q.ul.y), (q.ur.x, q.ur.y), (q.ll.x, q.ll.y), (q.lr.x, q.lr.y)
            )
            for q in hits[:max_hits]
        ]

    def outline(self) -> PdfOutline:
        toc = self._doc.get_toc(simple=True)
        items = _toc_to_items(toc)
        logger.debug("Outline of %s: %d entries, %d top-level", self.file_path, len(toc), len(items))
        return PdfOutline(has_outline=bool(items), total_pages=self.page_count(), items=items)

    def close(self) -> None:
        self._doc.close()


SourceRegistry.register("pymupdf", PyMuPDFSource)
