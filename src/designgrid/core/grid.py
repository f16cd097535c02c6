"""Grid configuration: ordered column and row tracks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..errors import ConfigError
from .track import Axis, LinkedTo, Track, TrackSize


@dataclass
class Grid:
    """Column and row tracks of a design grid.

    The grid only holds configuration. Resolved and final track sizes are
    recomputed from scratch by every layout pass, so none of the mutators
    below need to invalidate anything.

    Example:
        grid = configure_grid([10, 0, -2, 10], [0, 0], column_weights=[0, 1, 0, 0])
        grid.set_track_declared_size(Axis.ROWS, 1, 24)
    """

    columns: list[Track] = field(default_factory=list)
    rows: list[Track] = field(default_factory=list)

    def __post_init__(self) -> None:
        for axis in Axis:
            self.validate_links(axis)

    def tracks(self, axis: Axis) -> list[Track]:
        """Get the tracks of one axis."""
        return self.columns if axis is Axis.COLUMNS else self.rows

    def count(self, axis: Axis) -> int:
        return len(self.tracks(axis))

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def sizes(self, axis: Axis) -> list[TrackSize]:
        return [track.size for track in self.tracks(axis)]

    def weights(self, axis: Axis) -> NDArray[np.int64]:
        return np.array([track.weight for track in self.tracks(axis)], dtype=np.int64)

    def weight_sum(self, axis: Axis) -> int:
        """Sum of the weights on one axis, computed on demand."""
        return int(sum(track.weight for track in self.tracks(axis)))

    def validate_links(self, axis: Axis) -> None:
        """Check that every link on an axis references an existing track.

        Raises:
            ConfigError: If a link points outside the axis
        """
        count = self.count(axis)
        for i, track in enumerate(self.tracks(axis)):
            self._check_link(axis, i, track.size, count)

    @staticmethod
    def _check_link(axis: Axis, index: int, size: TrackSize, count: int) -> None:
        if isinstance(size, LinkedTo) and not 0 <= size.index < count:
            raise ConfigError(
                f"{axis.value[:-1].capitalize()} {index} links to non-existing "
                f"{axis.value[:-1]} {size.index} (count is {count})"
            )

    def resize(self, axis: Axis, count: int) -> None:
        """Grow or shrink an axis to exactly ``count`` tracks.

        New tracks are auto-sized with zero weight. The axis is left unchanged
        if shrinking would leave a link pointing past the new end.

        Raises:
            ConfigError: If the count is negative or a kept track links to a
                removed one
        """
        if count < 0:
            raise ConfigError(f"Track count must be non-negative, got {count}")
        tracks = self.tracks(axis)
        if count < len(tracks):
            for i, track in enumerate(tracks[:count]):
                self._check_link(axis, i, track.size, count)
            del tracks[count:]
        else:
            tracks.extend(Track() for _ in range(count - len(tracks)))

    def set_track_declared_size(self, axis: Axis, index: int, value: int | TrackSize) -> None:
        """Set the declared size of a track.

        Setting a track past the end of the axis grows the axis to include it.
        A rejected value leaves the grid unchanged.

        Args:
            axis: Axis of the track
            index: Track index
            value: Integer declared size (>0 fixed, 0 auto, -k link) or a TrackSize

        Raises:
            ConfigError: If the index is negative or the new link is out of range
        """
        if index < 0:
            raise ConfigError(f"Track index must be non-negative, got {index}")
        if not isinstance(value, TrackSize):
            value = TrackSize.from_declared(value)
        self._check_link(axis, index, value, max(self.count(axis), index + 1))

        if index >= self.count(axis):
            self.resize(axis, index + 1)
        self.tracks(axis)[index].size = value

    def set_track_weight(self, axis: Axis, index: int, value: int) -> None:
        """Set the weight of an existing track.

        Raises:
            ConfigError: If the index is out of range or the weight is negative
        """
        count = self.count(axis)
        if not 0 <= index < count:
            raise ConfigError(
                f"{axis.value[:-1].capitalize()} index {index} out of range (count is {count})"
            )
        if value < 0:
            raise ConfigError(f"Track weight must be non-negative, got {value}")
        self.tracks(axis)[index].weight = int(value)


def _build_tracks(
    name: str, sizes: Sequence[int] | None, weights: Sequence[int] | None
) -> list[Track]:
    if sizes is None:
        raise ConfigError(f"Missing attribute: {name}")
    if weights is None:
        weights = [0] * len(sizes)
    elif len(weights) != len(sizes):
        raise ConfigError(
            f"{name} has {len(sizes)} tracks but {len(weights)} weights were given"
        )
    return [Track(TrackSize.from_declared(s), int(w)) for s, w in zip(sizes, weights)]


def configure_grid(
    column_sizes: Sequence[int] | None,
    row_sizes: Sequence[int] | None,
    column_weights: Sequence[int] | None = None,
    row_weights: Sequence[int] | None = None,
) -> Grid:
    """Build a Grid from integer declared sizes and weights.

    Args:
        column_sizes: Declared size per column (>0 fixed, 0 auto, -k link)
        row_sizes: Declared size per row
        column_weights: Weight per column, defaults to all zeros
        row_weights: Weight per row, defaults to all zeros

    Returns:
        A validated Grid

    Raises:
        ConfigError: If sizes are missing, weight counts do not match track
            counts or a link is out of range
    """
    return Grid(
        columns=_build_tracks("column_widths", column_sizes, column_weights),
        rows=_build_tracks("row_heights", row_sizes, row_weights),
    )
