"""Base class for PDF-access backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from pdflayout.core.document import PdfOutline, TextBlock, TextLine
from pdflayout.core.errors import PageOutOfRange
from pdflayout.core.geometry import Quad


class BasePdfSource(ABC):
    """Abstract handle onto one open PDF document.

    Everything the layout engine needs from a PDF library goes through this
    interface. Page indices are 0-based and all geometry is returned in
    rendering space (origin top-left). Use as a context manager so the
    document is released at the end of the call:

        with PyMuPDFSource("paper.pdf") as source:
            figures = detect_figures(source, 0)
    """

    name: str  # unique identifier for this backend

    def __init__(self, file_path: str | Path, **kwargs) -> None:
        self.file_path = Path(file_path)
        self.kwargs = kwargs

    @abstractmethod
    def page_count(self) -> int: ...

    @abstractmethod
    def page_bounds(self, page_index: int) -> tuple[float, float]:
        """(width, height) of the page."""
        ...

    @abstractmethod
    def text_blocks(self, page_index: int) -> list[TextBlock]: ...

    @abstractmethod
    def text_lines(self, page_index: int) -> list[TextLine]: ...

    @abstractmethod
    def page_text(self, page_index: int) -> str: ...

    @abstractmethod
    def search(self, page_index: int, text: str, max_hits: int = 500) -> list[Quad]:
        """Quads for every occurrence of ``text``, at most ``max_hits``."""
        ...

    @abstractmethod
    def outline(self) -> PdfOutline: ...

    @abstractmethod
    def close(self) -> None: ...

    def check_page(self, page_index: int) -> None:
        """Raise PageOutOfRange (reported 1-based) for a bad 0-based index."""
        total = self.page_count()
        if not 0 <= page_index < total:
            raise PageOutOfRange(page_index + 1, total)

    def __enter__(self) -> BasePdfSource:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
