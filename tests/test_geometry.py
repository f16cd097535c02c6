"""Tests for boundary coordinates and rectangles."""

import numpy as np
import pytest

from designgrid.core import Rect, build_offsets


def test_offsets_are_prefix_sums():
    np.testing.assert_array_equal(build_offsets([10, 0, 25], 0), [0, 10, 10, 35])


def test_offsets_start_at_origin():
    coords = build_offsets([10, 20], origin=7)
    np.testing.assert_array_equal(coords, [7, 17, 37])


def test_empty_axis_has_single_edge():
    np.testing.assert_array_equal(build_offsets([], 4), [4])


@pytest.mark.parametrize("sizes", [[3, 1, 4, 1, 5], [0, 0], [100]])
def test_offsets_are_monotonic_and_span_total(sizes):
    coords = build_offsets(sizes, 2)
    assert len(coords) == len(sizes) + 1
    assert (np.diff(coords) >= 0).all()
    assert coords[-1] - coords[0] == sum(sizes)


def test_rect_edges_and_bounds():
    rect = Rect(left=10.5, top=2.0, width=20, height=7.5)
    assert rect.right == 30.5
    assert rect.bottom == 9.5
    assert rect.to_bounds() == (10, 2, 30, 9)
