import pytest

from dungeonrun.geometry import (
    AlphaMask,
    Rect,
    bounding_box_test,
    pixel_perfect_test,
)


def test_overlapping_rects_intersect():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))


def test_disjoint_rects_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(20, 20, 5, 5))
    assert Rect(0, 0, 10, 10).intersection(Rect(20, 20, 5, 5)) is None


def test_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))


def test_intersection_is_symmetric_and_inside_both():
    a = Rect(0, 0, 10, 10)
    b = Rect(4, 6, 10, 10)
    inter = a.intersection(b)
    assert inter == b.intersection(a)
    assert inter.left >= a.left and inter.left >= b.left
    assert inter.right <= a.right and inter.right <= b.right
    assert inter.bottom <= a.bottom and inter.bottom <= b.bottom


def test_intersection_of_contained_rect_is_itself():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(10, 20, 5, 7)
    assert outer.intersection(inner) == inner


def test_contains_includes_left_top_excludes_right_bottom():
    r = Rect(0, 0, 10, 10)
    assert r.contains(0, 0)
    assert r.contains(9.5, 9.5)
    assert not r.contains(10, 5)
    assert not r.contains(5, 10)
    assert not r.contains(-0.1, 5)


def test_alpha_mask_reads_row_major():
    mask = AlphaMask(2, 2, [1, 2, 3, 4])
    assert mask.alpha_at(1, 0) == 2
    assert mask.alpha_at(0, 1) == 3


def test_alpha_mask_out_of_range():
    mask = AlphaMask.filled(2, 2)
    with pytest.raises(IndexError):
        mask.alpha_at(2, 0)


def test_alpha_mask_wrong_length():
    with pytest.raises(ValueError):
        AlphaMask(2, 2, [0, 0, 0])


def test_bounding_box_test_matches_intersects():
    assert bounding_box_test(Rect(0, 0, 4, 4), Rect(2, 2, 4, 4))
    assert not bounding_box_test(Rect(0, 0, 4, 4), Rect(8, 8, 4, 4))


def test_pixel_perfect_opaque_overlap():
    mask = AlphaMask.filled(4, 4, 255)
    assert pixel_perfect_test(Rect(0, 0, 4, 4), mask, Rect(2, 2, 4, 4), mask)


def test_pixel_perfect_transparent_overlap():
    opaque = AlphaMask.filled(4, 4, 255)
    clear = AlphaMask.filled(4, 4, 0)
    assert not pixel_perfect_test(Rect(0, 0, 4, 4), opaque, Rect(2, 2, 4, 4), clear)


def test_pixel_perfect_disjoint():
    mask = AlphaMask.filled(4, 4, 255)
    assert not pixel_perfect_test(Rect(0, 0, 4, 4), mask, Rect(10, 10, 4, 4), mask)


def test_pixel_perfect_threshold_is_strict():
    at_threshold = AlphaMask.filled(4, 4, 128)
    assert not pixel_perfect_test(
        Rect(0, 0, 4, 4), at_threshold, Rect(0, 0, 4, 4), at_threshold, 128
    )
    assert pixel_perfect_test(
        Rect(0, 0, 4, 4), at_threshold, Rect(0, 0, 4, 4), at_threshold, 127
    )


def test_pixel_perfect_only_opaque_pixel_in_overlap_counts():
    # Only the bottom-right pixel of the first sprite is opaque.
    first = AlphaMask(2, 2, [0, 0, 0, 255])
    second = AlphaMask.filled(2, 2, 255)
    assert pixel_perfect_test(Rect(0, 0, 2, 2), first, Rect(1, 1, 2, 2), second)
    assert not pixel_perfect_test(Rect(1, 1, 2, 2), first, Rect(0, 0, 2, 2), second)