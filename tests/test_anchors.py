"""Tests for anchoring items within their cells."""

import numpy as np
import pytest

from conftest import make_item
from designgrid.errors import ConfigError
from designgrid.layout import Anchor, parse_anchor, place_item

# Three 100px columns and three 50px rows, starting at 10
COLUMNS = np.array([10, 110, 210, 310])
ROWS = np.array([10, 60, 110, 160])


def test_parse_anchor_reads_from_the_end():
    assert parse_anchor("lrt") == [Anchor.TOP, Anchor.RIGHT, Anchor.LEFT]


@pytest.mark.parametrize("anchor", [None, ""])
def test_parse_anchor_empty(anchor):
    assert parse_anchor(anchor) == []


@pytest.mark.parametrize("anchor", ["x", "lR", "l r"])
def test_parse_anchor_rejects_unknown_characters(anchor):
    with pytest.raises(ConfigError, match="anchor"):
        parse_anchor(anchor)


def test_no_anchor_centers_item():
    rect = place_item(make_item(0, 0, 40, 20, anchor=""), COLUMNS, ROWS)
    assert rect.left == 10 + 30
    assert rect.top == 10 + 15
    assert (rect.width, rect.height) == (40, 20)


def test_centering_keeps_half_pixels():
    rect = place_item(make_item(0, 0, 41, 20, anchor=""), COLUMNS, ROWS)
    assert rect.left == 10 + 29.5


@pytest.mark.parametrize("anchor", ["lr", "rl"])
def test_opposing_anchors_fill_cell(anchor):
    rect = place_item(make_item(0, 0, 40, 20, anchor=anchor), COLUMNS, ROWS)
    assert rect.left == 10
    assert rect.width == 100
    assert rect.height == 20


def test_left_anchor_snaps_to_leading_edge():
    rect = place_item(make_item(1, 0, 40, 20, anchor="l"), COLUMNS, ROWS)
    assert rect.left == 110
    assert rect.width == 40


def test_right_anchor_snaps_to_trailing_edge():
    rect = place_item(make_item(1, 0, 40, 20, anchor="r"), COLUMNS, ROWS)
    assert rect.right == 210
    assert rect.width == 40


def test_top_and_bottom_anchors():
    top = place_item(make_item(0, 1, 40, 20, anchor="t"), COLUMNS, ROWS)
    bottom = place_item(make_item(0, 1, 40, 20, anchor="b"), COLUMNS, ROWS)
    assert top.top == 60
    assert bottom.bottom == 110


def test_default_anchor_fills_both_axes():
    rect = place_item(make_item(2, 2, 5, 5), COLUMNS, ROWS)
    assert (rect.left, rect.top, rect.width, rect.height) == (210, 110, 100, 50)


def test_repeated_anchor_is_idempotent():
    assert place_item(make_item(0, 0, 40, 20, anchor="rr"), COLUMNS, ROWS).right == 110
    assert place_item(make_item(0, 0, 40, 20, anchor="ll"), COLUMNS, ROWS).width == 40


def test_spanning_item_uses_whole_span():
    rect = place_item(make_item(0, 0, 40, 20, w=3, h=2, anchor="lrb"), COLUMNS, ROWS)
    assert (rect.left, rect.width) == (10, 300)
    assert rect.bottom == 110


def test_negative_span_uses_fixed_size_in_single_cell():
    rect = place_item(make_item(1, 0, 999, 999, w=-60, h=-10, anchor=""), COLUMNS, ROWS)
    assert (rect.width, rect.height) == (60, 10)
    assert rect.left == 110 + 20
    assert rect.top == 10 + 20


def test_item_larger_than_cell_overflows_evenly():
    rect = place_item(make_item(0, 0, 140, 20, anchor="tb"), COLUMNS, ROWS)
    assert rect.left == 10 - 20
    assert rect.height == 50


def test_bad_anchor_on_item_raises():
    with pytest.raises(ConfigError):
        place_item(make_item(0, 0, 1, 1, anchor="lz"), COLUMNS, ROWS)


@pytest.mark.parametrize("item", [
    make_item(-1, 0, 40, 20, anchor=""),
    make_item(3, 0, 40, 20),
    make_item(0, 2, 40, 20, h=2),
    make_item(0, 0, 40, 20, w=0),
])
def test_items_outside_coordinates_raise(item):
    with pytest.raises(ConfigError):
        place_item(item, COLUMNS, ROWS)
