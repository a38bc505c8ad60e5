"""Conversions between rendering space and PDF space.

Rendering space (MuPDF, most rasterizers) has its origin at the top-left
corner with y growing downwards. PDF space has its origin at the bottom-left
corner with y growing upwards. Only y changes; x is shared.

Annotation placement depends on these being exact, so nothing here rounds.
"""

from __future__ import annotations

from pdflayout.core.geometry import Quad, Rect


def to_pdf_space(shape: Rect | Quad, page_height: float) -> Rect:
    """Flip a rendering-space rect or quad into PDF space."""
    if isinstance(shape, Quad):
        shape = shape.to_rect()
    return Rect(
        x1=shape.x1,
        y1=page_height - shape.y2,
        x2=shape.x2,
        y2=page_height - shape.y1,
    )


def to_render_space(rect: Rect, page_height: float) -> Rect:
    """Flip a PDF-space rect into rendering space."""
    return Rect(
        x1=rect.x1,
        y1=page_height - rect.y2,
        x2=rect.x2,
        y2=page_height - rect.y1,
    )


def clip_to_page(rect: Rect, page_width: float, page_height: float) -> Rect:
    """Rendering-space clip for a PDF-space ``rect``, clamped to the page."""
    render = to_render_space(rect, page_height)
    return Rect(
        x1=max(render.x1, 0.0),
        y1=max(render.y1, 0.0),
        x2=min(render.x2, page_width),
        y2=min(render.y2, page_height),
    )
