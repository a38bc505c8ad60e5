"""Value models produced and consumed by the layout engine."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from pdflayout.core.geometry import Quad, Rect


class TextBlock(BaseModel):
    """A block from the page text layer, bbox in rendering space."""

    model_config = ConfigDict(frozen=True)

    bbox: Rect
    text: str = ""


class TextLine(BaseModel):
    """A single line of text, bbox in rendering space."""

    model_config = ConfigDict(frozen=True)

    text: str
    bbox: Rect


class TextFragment(BaseModel):
    """A line of text positioned in PDF space, ready for annotation."""

    model_config = ConfigDict(frozen=True)

    text: str
    page: int  # 0-based
    rect: Rect


class FigureType(StrEnum):
    IMAGE = "image"
    CHART = "chart"
    DIAGRAM = "diagram"
    UNKNOWN = "unknown"

    @property
    def description(self) -> str:
        if self is FigureType.UNKNOWN:
            return "figure"
        return self.value


class FigureRegion(BaseModel):
    """A detected figure on a page, rect in PDF space."""

    model_config = ConfigDict(frozen=True)

    index: int
    rect: Rect
    figure_type: FigureType
    confidence: float = Field(ge=0.0, le=1.0)

    @property
    def width(self) -> float:
        return self.rect.width

    @property
    def height(self) -> float:
        return self.rect.height

    @property
    def aspect_ratio(self) -> float:
        if self.height > 0:
            return self.width / self.height
        return 1.0

    def padded(self, padding: float = 10.0) -> Rect:
        """Rect grown by ``padding`` on every side, lower edges kept >= 0."""
        return Rect(
            x1=max(self.rect.x1 - padding, 0.0),
            y1=max(self.rect.y1 - padding, 0.0),
            x2=self.rect.x2 + padding,
            y2=self.rect.y2 + padding,
        )


class OutlineItem(BaseModel):
    """One bookmark. ``page`` is 0-based and absent for pure headers."""

    model_config = ConfigDict(frozen=True)

    title: str
    page: int | None = None
    children: list[OutlineItem] = Field(default_factory=list)


class PdfOutline(BaseModel):
    """The document's table of contents."""

    model_config = ConfigDict(frozen=True)

    has_outline: bool
    total_pages: int
    items: list[OutlineItem] = Field(default_factory=list)

    def titles(self) -> list[str]:
        """All titles, flattened in pre-order."""
        result: list[str] = []

        def _walk(items: list[OutlineItem]) -> None:
            for item in items:
                result.append(item.title)
                _walk(item.children)

        _walk(self.items)
        return result


class SearchResult(BaseModel):
    """Hits for one search call on one page."""

    model_config = ConfigDict(frozen=True)

    text: str
    page: int  # 0-based
    quads: list[Quad] = Field(default_factory=list)

    def to_rects(self) -> list[Rect]:
        """Bounding rects of every quad, still in rendering space."""
        return [quad.to_rect() for quad in self.quads]
