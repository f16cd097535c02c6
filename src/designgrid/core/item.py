"""Item placement records and the host measurement capability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..errors import ConfigError
from .track import Axis


@runtime_checkable
class Measurable(Protocol):
    """Capability a host item must provide to be laid out.

    Any object with these three methods satisfies this protocol; the engine
    never depends on a concrete widget type.
    """

    def natural_width(self) -> int:
        """Unconstrained width of the item in pixels."""
        ...

    def natural_height(self) -> int:
        """Unconstrained height of the item in pixels."""
        ...

    def is_visible(self) -> bool:
        """Whether the item takes part in track sizing."""
        ...


@dataclass
class StaticItem:
    """A Measurable with fixed natural size, for configuration files and tests."""

    width: int = 0
    height: int = 0
    visible: bool = True

    def natural_width(self) -> int:
        return self.width

    def natural_height(self) -> int:
        return self.height

    def is_visible(self) -> bool:
        return self.visible


@dataclass
class Item:
    """Where one item sits in the grid and how it anchors to its cell.

    Attributes:
        content: Host object providing natural size and visibility
        x: Starting column index
        y: Starting row index
        w: Column span; negative means one column at fixed width |w|
        h: Row span; negative means one row at fixed height |h|
        anchor: Cell edges to snap to, any of 'l', 'r', 't', 'b'
        name: Optional label used in error messages and output
    """

    content: Measurable
    x: int = 0
    y: int = 0
    w: int = 1
    h: int = 1
    anchor: str = "lrtb"
    name: str | None = None

    def __str__(self) -> str:
        return self.name or f"item at ({self.x}, {self.y})"

    def start(self, axis: Axis) -> int:
        return self.x if axis is Axis.COLUMNS else self.y

    def span(self, axis: Axis) -> int:
        """Declared span on an axis, negative for fixed-size items."""
        return self.w if axis is Axis.COLUMNS else self.h

    def cell_span(self, axis: Axis) -> int:
        """Number of tracks the item covers on an axis."""
        span = self.span(axis)
        return 1 if span < 0 else span

    def natural_size(self, axis: Axis) -> int:
        """Size the item asks for on an axis.

        A negative span overrides the host size. Invisible items ask for 0.
        """
        span = self.span(axis)
        if span < 0:
            return -span
        if not self.content.is_visible():
            return 0
        if axis is Axis.COLUMNS:
            return int(self.content.natural_width())
        return int(self.content.natural_height())

    def validate_axis(self, axis: Axis, count: int) -> None:
        """Check that the item's cells on one axis lie inside ``count`` tracks.

        Raises:
            ConfigError: If the span is zero or the cells leave the axis
        """
        if self.span(axis) == 0:
            raise ConfigError(f"{self}: {axis.value[:-1]} span must not be zero")
        start = self.start(axis)
        end = start + self.cell_span(axis)
        if start < 0 or end > count:
            raise ConfigError(
                f"{self}: {axis.value} {start}..{end - 1} outside grid of {count} {axis.value}"
            )

    def validate(self, column_count: int, row_count: int) -> None:
        """Check that the item's cells lie inside the grid.

        Raises:
            ConfigError: If a span is zero or the cells leave the grid
        """
        self.validate_axis(Axis.COLUMNS, column_count)
        self.validate_axis(Axis.ROWS, row_count)
