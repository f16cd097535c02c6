"""Track size resolver: natural track sizes from items and size links.

Each track gets a natural size in three steps:

1. Fixed tracks use their declared size.
2. Auto and linked tracks use the largest item that occupies exactly one
   cell of that track.
3. Linked tracks are collapsed so that every track of a link chain or cycle
   shares one size.

Links form a graph where every track has at most one outgoing edge. It is
walked iteratively from each unvisited linked track, recording the path:

- path ends at an unlinked auto track: the whole path takes the largest size
  seen on it
- path reaches a fixed or already settled track: the path adopts its size
- path runs into itself: the path takes the largest size of the cycle members
  only, so a large tail feeding into a cycle does not inflate it
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from ..core.grid import Grid
from ..core.item import Item
from ..core.track import Axis, Fixed, LinkedTo, TrackSize
from ..errors import ConfigError

logger = logging.getLogger(__name__)

# Walk state per track
_UNVISITED = 0
_ON_PATH = 1
_SETTLED = 2


def natural_sizes(
    sizes: Sequence[TrackSize], axis: Axis, items: Iterable[Item]
) -> NDArray[np.int64]:
    """Compute per-track sizes before links are collapsed.

    Args:
        sizes: Declared size of each track on the axis
        axis: Axis the tracks belong to
        items: Items laid out in the grid

    Returns:
        Fixed size for fixed tracks, largest single-cell item otherwise

    Raises:
        ConfigError: If an item's cells leave the axis
    """
    lengths = np.zeros(len(sizes), dtype=np.int64)
    for item in items:
        item.validate_axis(axis, len(sizes))
        if item.cell_span(axis) != 1:
            continue
        index = item.start(axis)
        lengths[index] = max(lengths[index], item.natural_size(axis))

    for i, size in enumerate(sizes):
        if isinstance(size, Fixed):
            lengths[i] = size.size
    return lengths


def _link_targets(sizes: Sequence[TrackSize]) -> list[int | None]:
    count = len(sizes)
    targets: list[int | None] = []
    for i, size in enumerate(sizes):
        if not isinstance(size, LinkedTo):
            targets.append(None)
            continue
        if not 0 <= size.index < count:
            raise ConfigError(
                f"Track {i} references non-existing track {size.index} (count is {count})"
            )
        if size.index == i:
            # A track linked to itself behaves as auto.
            logger.debug("Track %d links to itself, treating it as auto", i)
            targets.append(None)
        else:
            targets.append(size.index)
    return targets


def solve_links(
    sizes: Sequence[TrackSize], lengths: Sequence[int] | NDArray[np.int64]
) -> NDArray[np.int64]:
    """Collapse link chains and cycles so linked tracks share one size.

    Args:
        sizes: Declared size of each track
        lengths: Natural size of each track before collapsing links

    Returns:
        New array of resolved sizes; the input is not modified

    Raises:
        ConfigError: If a link references a track outside the axis
    """
    targets = _link_targets(sizes)
    lengths = np.array(lengths, dtype=np.int64)
    state = np.full(len(sizes), _UNVISITED, dtype=np.int8)
    for i, size in enumerate(sizes):
        if isinstance(size, Fixed):
            state[i] = _SETTLED

    for start in reversed(range(len(sizes))):
        if targets[start] is None or state[start] != _UNVISITED:
            continue

        path: list[int] = []
        longest = 0
        current = start
        while True:
            path.append(current)
            state[current] = _ON_PATH
            longest = max(longest, int(lengths[current]))
            following = targets[current]

            if following is None:
                value = longest
                break
            if state[following] == _SETTLED:
                value = int(lengths[following])
                break
            if state[following] == _ON_PATH:
                value = int(lengths[following])
                member = targets[following]
                while member != following:
                    value = max(value, int(lengths[member]))
                    member = targets[member]
                logger.debug("Link cycle through track %d resolved to %d", following, value)
                break
            current = following

        for track in path:
            lengths[track] = value
            state[track] = _SETTLED

    return lengths


def resolve(grid: Grid, axis: Axis, items: Iterable[Item]) -> NDArray[np.int64]:
    """Compute the natural size of every track on one axis of a grid.

    Args:
        grid: Grid configuration
        axis: Axis to resolve
        items: Items laid out in the grid

    Returns:
        Natural size per track, with links collapsed

    Raises:
        ConfigError: If a link references a track outside the axis or an
            item's cells leave the grid
    """
    sizes = grid.sizes(axis)
    items = list(items)
    for item in items:
        item.validate(grid.column_count, grid.row_count)
    return solve_links(sizes, natural_sizes(sizes, axis, items))
