"""File lookup and backend opening."""

from __future__ import annotations

from pathlib import Path

from pdflayout.backends.base import BasePdfSource
from pdflayout.core.errors import PdfError
from pdflayout.core.registry import SourceRegistry


def resolve_path(file_path: str | Path) -> Path:
    """Resolve and validate a file path."""
    path = Path(file_path).resolve()
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path


def is_pdf(file_path: str | Path) -> bool:
    return Path(file_path).suffix.lower() == ".pdf"


def open_source(file_path: str | Path, backend: str = "pymupdf", **kwargs) -> BasePdfSource:
    """Open ``file_path`` with the named backend.

    The caller owns the returned handle and should close it, preferably with
    a ``with`` block.
    """
    # Registers the bundled backend.
    import pdflayout.backends.pymupdf_source  # noqa: F401

    path = resolve_path(file_path)
    if not is_pdf(path):
        raise PdfError(f"Not a PDF file: {path}")
    return SourceRegistry.create(backend, path, **kwargs)
