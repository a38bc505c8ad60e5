"""Greedy merging of overlapping candidate regions."""

from __future__ import annotations

from pdflayout.core.geometry import Rect


def regions_overlap(a: Rect, b: Rect) -> bool:
    """True when both axis projections intersect. Shared edges do not count."""
    return a.x1 < b.x2 and b.x1 < a.x2 and a.y1 < b.y2 and b.y1 < a.y2


def merge_overlapping_regions(regions: list[Rect]) -> list[Rect]:
    """Fold each region into the first merged region it overlaps.

    Single pass, seeded with the first region. A region that overlaps nothing
    starts a new merged region. Because merged regions are never re-compared
    with each other, the result depends on input order.
    """
    if not regions:
        return []

    merged = [regions[0]]
    for region in regions[1:]:
        for i, existing in enumerate(merged):
            if regions_overlap(existing, region):
                merged[i] = Rect(
                    x1=min(existing.x1, region.x1),
                    y1=min(existing.y1, region.y1),
                    x2=max(existing.x2, region.x2),
                    y2=max(existing.y2, region.y2),
                )
                break
        else:
            merged.append(region)
    return merged
