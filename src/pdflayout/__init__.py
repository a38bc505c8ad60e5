"""PDF layout analysis: coordinates, figure detection, outlines and search."""

from pdflayout.core.document import (
    FigureRegion,
    FigureType,
    OutlineItem,
    PdfOutline,
    SearchResult,
    TextBlock,
)
from pdflayout.core.geometry import Point, Quad, Rect
from pdflayout.core.registry import SourceRegistry
from pdflayout.core.settings import DetectionSettings

__all__ = [
    "DetectionSettings",
    "FigureRegion",
    "FigureType",
    "OutlineItem",
    "PdfOutline",
    "Point",
    "Quad",
    "Rect",
    "SearchResult",
    "SourceRegistry",
    "TextBlock",
]
