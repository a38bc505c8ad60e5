"""Tests for greedy region merging."""

from pdflayout.core.geometry import Rect
from pdflayout.layout.merge import merge_overlapping_regions, regions_overlap


def r(x1, y1, x2, y2):
    return Rect(x1=x1, y1=y1, x2=x2, y2=y2)


def test_overlap():
    assert regions_overlap(r(0, 0, 10, 10), r(5, 5, 15, 15))
    assert regions_overlap(r(0, 0, 10, 10), r(2, 2, 8, 8))
    assert not regions_overlap(r(0, 0, 10, 10), r(20, 0, 30, 10))


def test_touching_edges_do_not_overlap():
    assert not regions_overlap(r(0, 0, 10, 10), r(10, 0, 20, 10))
    assert not regions_overlap(r(0, 0, 10, 10), r(0, 10, 10, 20))


def test_empty():
    assert merge_overlapping_regions([]) == []


def test_disjoint_regions_are_returned_unchanged():
    regions = [r(0, 0, 10, 10), r(20, 0, 30, 10), r(0, 20, 10, 30)]
    assert merge_overlapping_regions(regions) == regions


def test_overlapping_regions_are_unioned():
    merged = merge_overlapping_regions([r(0, 0, 10, 10), r(5, 5, 20, 20)])
    assert merged == [r(0, 0, 20, 20)]


def test_merge_is_single_pass_and_order_dependent():
    a, b, c = r(0, 0, 10, 10), r(20, 0, 30, 10), r(5, 0, 25, 10)

    # c bridges a and b, but b was placed before the bridge existed.
    assert merge_overlapping_regions([a, b, c]) == [r(0, 0, 25, 10), r(20, 0, 30, 10)]
    assert merge_overlapping_regions([c, a, b]) == [r(0, 0, 30, 10)]


def test_region_joins_first_overlapping_merged_region():
    a, b = r(0, 0, 10, 10), r(20, 0, 30, 10)
    both = r(5, 0, 25, 10)
    merged = merge_overlapping_regions([a, b, both])
    assert merged[0] == r(0, 0, 25, 10)
    assert merged[1] == b
