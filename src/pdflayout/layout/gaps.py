"""Whitespace-gap search over a page's text blocks."""

from __future__ import annotations

import logging

from pdflayout.core.geometry import Rect
from pdflayout.core.settings import DetectionSettings
from pdflayout.layout.merge import merge_overlapping_regions

logger = logging.getLogger(__name__)


def _vertical_gaps(
    blocks: list[Rect], page_width: float, page_height: float, settings: DetectionSettings
) -> list[Rect]:
    """Full-width bands between text blocks, swept top to bottom."""
    candidates: list[Rect] = []
    last_bottom = 0.0
    for block in blocks:
        if block.y1 - last_bottom > settings.min_gap:
            candidates.append(Rect(x1=0.0, y1=last_bottom, x2=page_width, y2=block.y1))
        last_bottom = max(last_bottom, block.y2)

    if page_height - last_bottom > settings.min_gap:
        candidates.append(Rect(x1=0.0, y1=last_bottom, x2=page_width, y2=page_height))
    return candidates


def _side_gaps(blocks: list[Rect], page_width: float, settings: DetectionSettings) -> list[Rect]:
    """Columns of whitespace beside narrow, tall text blocks."""
    candidates: list[Rect] = []
    min_side = page_width * settings.side_gap_ratio
    max_text_width = page_width * settings.side_text_max_width_ratio

    for block in blocks:
        if block.width >= max_text_width or block.height <= settings.side_text_min_height:
            continue

        left_gap = block.x1
        right_gap = page_width - block.x2
        if left_gap > min_side:
            candidates.append(
                Rect(x1=0.0, y1=block.y1, x2=left_gap - settings.side_inset, y2=block.y2)
            )
        if right_gap > min_side:
            candidates.append(
                Rect(x1=block.x2 + settings.side_inset, y1=block.y1, x2=page_width, y2=block.y2)
            )
    return candidates


def find_figure_gaps(
    text_regions: list[Rect],
    page_width: float,
    page_height: float,
    settings: DetectionSettings | None = None,
) -> list[Rect]:
    """Return merged rendering-space rects that may hold a figure.

    A page without any text is returned whole since it is probably a scan.
    """
    settings = settings or DetectionSettings()

    if not text_regions:
        return [Rect(x1=0.0, y1=0.0, x2=page_width, y2=page_height)]

    blocks = sorted(text_regions, key=lambda r: r.y1)
    candidates = _vertical_gaps(blocks, page_width, page_height, settings)
    candidates.extend(_side_gaps(blocks, page_width, settings))

    merged = merge_overlapping_regions(candidates)
    logger.debug(
        "%d text blocks -> %d gap candidates -> %d merged",
        len(blocks),
        len(candidates),
        len(merged),
    )
    return merged
