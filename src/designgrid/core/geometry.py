"""Cell geometry: track boundary coordinates and item rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


def build_offsets(final_sizes: Sequence[int] | NDArray[np.int64], origin: int = 0) -> NDArray[np.int64]:
    """Compute the absolute boundary coordinates of a row of tracks.

    Args:
        final_sizes: Final size of each track, in order
        origin: Coordinate of the leading edge of the first track (padding)

    Returns:
        Array of len(final_sizes) + 1 offsets; coord[i] is the leading edge
        of track i and the last entry is the trailing edge of the grid
    """
    sizes = np.asarray(final_sizes, dtype=np.int64)
    coords = np.empty(len(sizes) + 1, dtype=np.int64)
    coords[0] = origin
    np.cumsum(sizes, out=coords[1:])
    coords[1:] += origin
    return coords


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with real-valued position and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def to_bounds(self) -> tuple[int, int, int, int]:
        """Integer (left, top, right, bottom), truncating toward zero."""
        return (int(self.left), int(self.top), int(self.right), int(self.bottom))
