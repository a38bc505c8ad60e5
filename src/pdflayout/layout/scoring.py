"""Filtering, confidence scoring and typing of figure candidates."""

from __future__ import annotations

import logging

from pdflayout.core.document import FigureRegion, FigureType
from pdflayout.core.geometry import Rect
from pdflayout.core.settings import DetectionSettings
from pdflayout.layout.coords import to_pdf_space

logger = logging.getLogger(__name__)


def calculate_confidence(
    width: float,
    height: float,
    page_width: float,
    page_height: float,
    settings: DetectionSettings | None = None,
) -> float:
    """Score a candidate between 0 and 1 from its size, shape and position."""
    settings = settings or DetectionSettings()
    confidence = settings.base_confidence

    area_ratio = (width * height) / (page_width * page_height)
    low, high = settings.area_ratio_range
    if low <= area_ratio <= high:
        confidence += settings.area_bonus

    aspect_ratio = width / height
    low, high = settings.aspect_ratio_range
    if low <= aspect_ratio <= high:
        confidence += settings.aspect_bonus

    # Measured from the candidate's half-width, not its absolute position.
    center_x = width / 2.0
    page_center = page_width / 2.0
    if abs(center_x - page_center) / page_center < settings.max_center_offset:
        confidence += settings.center_bonus

    return min(confidence, 1.0)


def estimate_figure_type(aspect_ratio: float, width: float, height: float) -> FigureType:
    # square-ish or wide: charts, plots
    if 0.8 <= aspect_ratio <= 1.2:
        return FigureType.CHART
    if aspect_ratio > 1.5:
        return FigureType.CHART
    if aspect_ratio < 0.7:
        return FigureType.DIAGRAM
    if width > 300.0 and height > 300.0:
        return FigureType.IMAGE
    return FigureType.UNKNOWN


def _rejected(
    rect: Rect, page_width: float, page_height: float, settings: DetectionSettings
) -> str | None:
    width, height = rect.width, rect.height
    if width < settings.min_dimension or height < settings.min_dimension:
        return "too small"
    if width * height < settings.min_area:
        return "area too small"
    if (
        width > page_width * settings.band_width_ratio
        and height < page_height * settings.band_height_ratio
    ):
        return "header/footer band"
    return None


def score_candidates(
    candidates: list[Rect],
    page_width: float,
    page_height: float,
    settings: DetectionSettings | None = None,
) -> list[FigureRegion]:
    """Turn rendering-space candidates into ranked PDF-space figure regions.

    The result is sorted by confidence (highest first) and indexed in that
    order.
    """
    settings = settings or DetectionSettings()
    scored: list[tuple[Rect, FigureType, float]] = []

    for rect in candidates:
        reason = _rejected(rect, page_width, page_height, settings)
        if reason is not None:
            logger.debug("Rejected candidate %s: %s", rect.as_list(), reason)
            continue

        width, height = rect.width, rect.height
        confidence = calculate_confidence(width, height, page_width, page_height, settings)
        if confidence < settings.min_confidence:
            logger.debug("Rejected candidate %s: confidence %.2f", rect.as_list(), confidence)
            continue

        figure_type = estimate_figure_type(width / height, width, height)
        scored.append((to_pdf_space(rect, page_height), figure_type, confidence))

    scored.sort(key=lambda item: item[2], reverse=True)
    return [
        FigureRegion(index=i, rect=rect, figure_type=figure_type, confidence=confidence)
        for i, (rect, figure_type, confidence) in enumerate(scored)
    ]
