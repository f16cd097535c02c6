"""Tests for weighted distribution of size differences."""

import numpy as np
import pytest

from designgrid.solver import distribute


def test_even_surplus_split():
    np.testing.assert_array_equal(distribute([10, 20], [1, 1], 2, 40), [15, 25])


def test_zero_weight_sum_keeps_natural_sizes():
    natural = [10, 20, 30]
    np.testing.assert_array_equal(distribute(natural, [0, 0, 0], 0, 500), natural)


def test_only_weighted_tracks_grow():
    np.testing.assert_array_equal(distribute([10, 20, 10], [0, 1, 0], 1, 100), [10, 80, 10])


def test_growth_truncates_toward_zero():
    # unit = 10 / 3
    np.testing.assert_array_equal(distribute([0, 0, 0], [1, 1, 1], 3, 10), [3, 3, 3])


def test_shrink_truncates_toward_zero():
    # unit = -10 / 3, truncated to -3 per track
    np.testing.assert_array_equal(distribute([20, 20, 20], [1, 1, 1], 3, 50), [17, 17, 17])


def test_weights_are_proportional():
    np.testing.assert_array_equal(distribute([0, 0], [1, 3], 4, 100), [25, 75])


def test_shrinking_below_zero_is_not_clamped_by_default():
    result = distribute([5, 50], [1, 0], 1, 20)
    np.testing.assert_array_equal(result, [-30, 50])


def test_clamp_floors_at_zero():
    result = distribute([5, 50], [1, 0], 1, 20, clamp=True)
    np.testing.assert_array_equal(result, [0, 50])


def test_distribute_returns_new_array():
    natural = np.array([10, 20], dtype=np.int64)
    result = distribute(natural, [1, 1], 2, 40)
    assert result is not natural
    np.testing.assert_array_equal(natural, [10, 20])


@pytest.mark.parametrize("desired", [0, 57, 300])
def test_exact_fill_with_single_weighted_track(desired):
    result = distribute([12, 8, 30], [0, 2, 0], 2, desired)
    assert result.sum() == desired
