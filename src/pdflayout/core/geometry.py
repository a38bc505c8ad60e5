"""Rectangles, points and quads shared by every layout component."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict


class Rect(BaseModel):
    """Axis-aligned rectangle ``[x1, y1, x2, y2]``.

    The model does not know which coordinate space it lives in. In rendering
    space ``y1`` is the upper edge, in PDF space it is the lower edge.
    """

    model_config = ConfigDict(frozen=True)

    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Rect:
        x1, y1, x2, y2 = values
        return cls(x1=x1, y1=y1, x2=x2, y2=y2)

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    @property
    def area(self) -> float:
        return self.width * self.height

    def as_list(self) -> list[float]:
        return [self.x1, self.y1, self.x2, self.y2]


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Quad(BaseModel):
    """Four-corner polygon around a run of text (rendering space)."""

    model_config = ConfigDict(frozen=True)

    ul: Point
    ur: Point
    ll: Point
    lr: Point

    @classmethod
    def from_points(
        cls,
        ul: tuple[float, float],
        ur: tuple[float, float],
        ll: tuple[float, float],
        lr: tuple[float, float],
    ) -> Quad:
        return cls(
            ul=Point(x=ul[0], y=ul[1]),
            ur=Point(x=ur[0], y=ur[1]),
            ll=Point(x=ll[0], y=ll[1]),
            lr=Point(x=lr[0], y=lr[1]),
        )

    def to_rect(self) -> Rect:
        """Bounding rectangle in the quad's own space. Loses rotation."""
        return Rect(
            x1=min(self.ul.x, self.ll.x),
            y1=min(self.ul.y, self.ur.y),
            x2=max(self.ur.x, self.lr.x),
            y2=max(self.ll.y, self.lr.y),
        )
