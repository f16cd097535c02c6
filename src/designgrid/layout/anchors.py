"""Anchor system for positioning items within their grid cells."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..core.geometry import Rect
from ..core.item import Item
from ..core.track import Axis
from ..errors import ConfigError


class Anchor(Enum):
    """Cell edges an item can snap to.

    Anchors are written as a string of single characters, e.g. "lr" or "t".
    An item snaps to every edge it names; naming both edges of an axis makes
    the item fill the cell on that axis. An item with no anchor on an axis
    is centered on that axis.
    """

    LEFT = "l"
    RIGHT = "r"
    TOP = "t"
    BOTTOM = "b"


# The anchor on the opposite edge of the same axis
OPPOSITE: dict[Anchor, Anchor] = {
    Anchor.LEFT: Anchor.RIGHT,
    Anchor.RIGHT: Anchor.LEFT,
    Anchor.TOP: Anchor.BOTTOM,
    Anchor.BOTTOM: Anchor.TOP,
}


def parse_anchor(anchor: str | None) -> list[Anchor]:
    """Parse an anchor string into anchors in the order they are applied.

    Characters are applied from the end of the string to the start.

    Args:
        anchor: Anchor string such as "lrtb"; None means no anchors

    Returns:
        Anchors in application order (duplicates kept)

    Raises:
        ConfigError: If the string contains a character other than l, r, t, b
    """
    if not anchor:
        return []
    parsed = []
    for char in reversed(anchor):
        try:
            parsed.append(Anchor(char))
        except ValueError:
            raise ConfigError(f"Wrong character {char!r} in anchor {anchor!r}") from None
    return parsed


def _cell_extent(item: Item, axis: Axis, coords: NDArray[np.int64]) -> tuple[int, int]:
    start = item.start(axis)
    end = start + item.cell_span(axis)
    return int(coords[start]), int(coords[end] - coords[start])


def _content_size(item: Item, axis: Axis) -> int:
    span = item.span(axis)
    if span < 0:
        return -span
    if axis is Axis.COLUMNS:
        return int(item.content.natural_width())
    return int(item.content.natural_height())


def place_item(
    item: Item,
    column_coords: Sequence[int] | NDArray[np.int64],
    row_coords: Sequence[int] | NDArray[np.int64],
) -> Rect:
    """Compute the final rectangle of an item within its cell span.

    The item is first centered in its cell, then moved and stretched by its
    anchors:

    - "l" / "t" snaps the item to the leading edge of the cell
    - "r" / "b" moves the item to the trailing edge of the cell
    - opposing anchors on one axis stretch the item to fill the cell

    Args:
        item: Item to place
        column_coords: Column boundary coordinates from build_offsets()
        row_coords: Row boundary coordinates from build_offsets()

    Returns:
        Rectangle of the item in the grid's coordinate space

    Raises:
        ConfigError: If the item's cells leave the grid or the anchor string
            is invalid
    """
    column_coords = np.asarray(column_coords, dtype=np.int64)
    row_coords = np.asarray(row_coords, dtype=np.int64)
    item.validate(len(column_coords) - 1, len(row_coords) - 1)

    cell_x, cell_w = _cell_extent(item, Axis.COLUMNS, column_coords)
    cell_y, cell_h = _cell_extent(item, Axis.ROWS, row_coords)
    width = _content_size(item, Axis.COLUMNS)
    height = _content_size(item, Axis.ROWS)

    # Centre first; real-valued so odd differences don't drift by a pixel
    dx = (cell_w - width) / 2.0
    dy = (cell_h - height) / 2.0
    left = cell_x + dx
    top = cell_y + dy

    applied: set[Anchor] = set()
    for anchor in parse_anchor(item.anchor):
        stretch = OPPOSITE[anchor] in applied
        if anchor is Anchor.LEFT:
            left = float(cell_x)
            if stretch:
                width = cell_w
        elif anchor is Anchor.RIGHT:
            if stretch:
                width = cell_w
            elif anchor not in applied:
                left += dx
        elif anchor is Anchor.TOP:
            top = float(cell_y)
            if stretch:
                height = cell_h
        elif anchor is Anchor.BOTTOM:
            if stretch:
                height = cell_h
            elif anchor not in applied:
                top += dy
        applied.add(anchor)

    return Rect(left=left, top=top, width=width, height=height)
