"""Tunable thresholds for figure detection (all values in PDF points)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DetectionSettings(BaseModel):
    """Heuristic thresholds used by the gap finder and the figure scorer.

    The defaults reproduce the behaviour tuned for single and two-column
    academic papers. Override individual fields when working with slides or
    scanned material, e.g. ``DetectionSettings(min_gap=30)``.
    """

    model_config = ConfigDict(frozen=True)

    # Gap finder
    min_gap: float = 50.0
    side_gap_ratio: float = 0.3
    side_text_max_width_ratio: float = 0.5
    side_text_min_height: float = 100.0
    side_inset: float = 10.0

    # Scorer: rejection
    min_dimension: float = 50.0
    min_area: float = 5000.0
    band_width_ratio: float = 0.95
    band_height_ratio: float = 0.15
    min_confidence: float = Field(default=0.3, ge=0.0, le=1.0)

    # Scorer: confidence bonuses
    base_confidence: float = 0.5
    area_ratio_range: tuple[float, float] = (0.05, 0.5)
    area_bonus: float = 0.2
    aspect_ratio_range: tuple[float, float] = (0.5, 2.0)
    aspect_bonus: float = 0.2
    max_center_offset: float = 0.3
    center_bonus: float = 0.1
