"""Heuristic figure detection.

Figures in papers usually sit either in a horizontal whitespace band between
paragraphs or in a side column next to narrow text. Detection looks only at
the text layer:

1. find whitespace gaps between text blocks (``gaps``),
2. merge overlapping gaps (``merge``),
3. filter, score and type what is left (``scoring``).

Works best on standard academic layouts. Small inline figures are missed and
sparse text can be mistaken for a figure.
"""

from __future__ import annotations

import logging

from pdflayout.backends.base import BasePdfSource
from pdflayout.core.document import FigureRegion, TextBlock
from pdflayout.core.errors import FigureNotFound
from pdflayout.core.settings import DetectionSettings
from pdflayout.layout.gaps import find_figure_gaps
from pdflayout.layout.scoring import score_candidates

logger = logging.getLogger(__name__)


def detect_figures_in_blocks(
    blocks: list[TextBlock],
    page_width: float,
    page_height: float,
    settings: DetectionSettings | None = None,
) -> list[FigureRegion]:
    """Detect figures from rendering-space text blocks.

    Returns PDF-space regions sorted by confidence, highest first.
    """
    candidates = find_figure_gaps(
        [block.bbox for block in blocks], page_width, page_height, settings
    )
    return score_candidates(candidates, page_width, page_height, settings)


def detect_figures(
    source: BasePdfSource,
    page_index: int,
    settings: DetectionSettings | None = None,
) -> list[FigureRegion]:
    """Detect figures on the 0-based ``page_index`` of an open source."""
    page_width, page_height = source.page_bounds(page_index)
    blocks = source.text_blocks(page_index)
    figures = detect_figures_in_blocks(blocks, page_width, page_height, settings)
    logger.debug(
        "Page %d of %s: %d figures", page_index, source.file_path, len(figures)
    )
    return figures


def figure_by_index(figures: list[FigureRegion], index: int) -> FigureRegion:
    """The figure with the given (confidence-ranked) index."""
    for figure in figures:
        if figure.index == index:
            return figure
    raise FigureNotFound(index, len(figures))
