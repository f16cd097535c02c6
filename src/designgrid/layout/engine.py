"""Grid layout pipeline: resolve, distribute, build offsets, place items."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..core.geometry import Rect, build_offsets
from ..core.grid import Grid
from ..core.item import Item
from ..core.track import Axis
from ..solver.distributor import distribute
from ..solver.resolver import resolve
from .anchors import parse_anchor, place_item

logger = logging.getLogger(__name__)


class MeasureMode(Enum):
    """How a host constrains the size of the grid along one axis."""

    UNSPECIFIED = "unspecified"  # take the content size
    EXACTLY = "exactly"  # fill the imposed size
    AT_MOST = "at_most"  # content size, shrunk to the imposed size if larger


@dataclass(frozen=True)
class MeasureSpec:
    """A host-imposed size constraint for one axis, including padding."""

    mode: MeasureMode = MeasureMode.UNSPECIFIED
    size: int = 0

    @classmethod
    def exactly(cls, size: int) -> MeasureSpec:
        return cls(MeasureMode.EXACTLY, size)

    @classmethod
    def at_most(cls, size: int) -> MeasureSpec:
        return cls(MeasureMode.AT_MOST, size)

    @classmethod
    def unspecified(cls) -> MeasureSpec:
        return cls(MeasureMode.UNSPECIFIED, 0)

    def resolve(self, content: int, padding: int) -> int:
        """Size available to the tracks, excluding padding."""
        available = self.size - padding
        if self.mode is MeasureMode.EXACTLY:
            return available
        if self.mode is MeasureMode.AT_MOST and content > available:
            return available
        return content


@dataclass(frozen=True)
class Padding:
    """Inset between the grid's bounds and its first/last tracks."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


@dataclass
class Measurement:
    """Track sizes and overall size produced by a measure pass.

    Attributes:
        column_widths: Final width per column
        row_heights: Final height per row
        content_width: Sum of the natural column widths
        content_height: Sum of the natural row heights
        width: Measured width of the grid, including padding
        height: Measured height of the grid, including padding
    """

    column_widths: NDArray[np.int64]
    row_heights: NDArray[np.int64]
    content_width: int
    content_height: int
    width: int
    height: int


@dataclass
class LayoutResult:
    """Output of a full layout pass."""

    measurement: Measurement
    column_coords: NDArray[np.int64]
    row_coords: NDArray[np.int64]
    rects: list[Rect] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.measurement.width

    @property
    def height(self) -> int:
        return self.measurement.height


class GridLayout:
    """Lays out items on a design grid.

    Every call runs the whole pipeline from scratch:

    1. Resolve natural track sizes from fixed sizes, items and links
    2. Distribute the difference to the imposed size by track weights
    3. Build absolute column/row boundary coordinates
    4. Place every item in its cell according to its anchors

    Nothing is cached between calls, so changing the grid or the items is
    always reflected in the next pass.

    Example:
        layout = GridLayout(configure_grid([10, 0, 10], [0], [0, 1, 0], [0]))
        label = Item(StaticItem(40, 12), x=1, y=0, anchor="l")
        result = layout.layout([label], MeasureSpec.exactly(200), MeasureSpec.unspecified())
        result.rects[0]
    """

    def __init__(self, grid: Grid, padding: Padding | None = None, clamp: bool = False) -> None:
        """Initialize the layout.

        Args:
            grid: Grid configuration
            padding: Inset around the grid, defaults to none
            clamp: Floor shrunk tracks at 0 during distribution
        """
        self.grid = grid
        self.padding = padding or Padding()
        self.clamp = clamp

    def validate(self, items: Sequence[Item]) -> None:
        """Check grid links, item cells and anchors before a pass.

        Raises:
            ConfigError: On the first invalid setting found
        """
        for axis in Axis:
            self.grid.validate_links(axis)
        for item in items:
            item.validate(self.grid.column_count, self.grid.row_count)
            parse_anchor(item.anchor)

    def measure(
        self,
        items: Sequence[Item],
        width_spec: MeasureSpec | None = None,
        height_spec: MeasureSpec | None = None,
    ) -> Measurement:
        """Compute final track sizes and the grid's measured size.

        Args:
            items: Items laid out in the grid
            width_spec: Horizontal constraint, defaults to unspecified
            height_spec: Vertical constraint, defaults to unspecified

        Returns:
            Measurement with final track sizes and overall size

        Raises:
            ConfigError: If the grid or an item is misconfigured
        """
        width_spec = width_spec or MeasureSpec.unspecified()
        height_spec = height_spec or MeasureSpec.unspecified()
        self.validate(items)
        logger.debug("Imposed dimension: %s %d x %s %d",
                     width_spec.mode.value, width_spec.size,
                     height_spec.mode.value, height_spec.size)

        natural_widths = resolve(self.grid, Axis.COLUMNS, items)
        natural_heights = resolve(self.grid, Axis.ROWS, items)
        content_width = int(natural_widths.sum())
        content_height = int(natural_heights.sum())
        logger.debug("Minimum dimension: %dx%d",
                     content_width + self.padding.horizontal,
                     content_height + self.padding.vertical)

        preferred_width = width_spec.resolve(content_width, self.padding.horizontal)
        preferred_height = height_spec.resolve(content_height, self.padding.vertical)

        column_widths = distribute(
            natural_widths,
            self.grid.weights(Axis.COLUMNS),
            self.grid.weight_sum(Axis.COLUMNS),
            preferred_width,
            clamp=self.clamp,
        )
        row_heights = distribute(
            natural_heights,
            self.grid.weights(Axis.ROWS),
            self.grid.weight_sum(Axis.ROWS),
            preferred_height,
            clamp=self.clamp,
        )

        measurement = Measurement(
            column_widths=column_widths,
            row_heights=row_heights,
            content_width=content_width,
            content_height=content_height,
            width=preferred_width + self.padding.horizontal,
            height=preferred_height + self.padding.vertical,
        )
        logger.debug("Final dimension: %dx%d", measurement.width, measurement.height)
        return measurement

    def layout(
        self,
        items: Sequence[Item],
        width_spec: MeasureSpec | None = None,
        height_spec: MeasureSpec | None = None,
    ) -> LayoutResult:
        """Measure the grid and place every item.

        Returns:
            LayoutResult with boundary coordinates and one Rect per item,
            in the order of ``items``
        """
        measurement = self.measure(items, width_spec, height_spec)
        column_coords = build_offsets(measurement.column_widths, self.padding.left)
        row_coords = build_offsets(measurement.row_heights, self.padding.top)
        rects = [place_item(item, column_coords, row_coords) for item in items]
        return LayoutResult(
            measurement=measurement,
            column_coords=column_coords,
            row_coords=row_coords,
            rects=rects,
        )


def resolve_and_distribute(
    grid: Grid,
    items: Sequence[Item],
    imposed_width: int,
    imposed_height: int,
    padding: Padding | None = None,
) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Run the sizing pipeline for an exactly imposed size.

    Args:
        grid: Grid configuration
        items: Items laid out in the grid
        imposed_width: Total width, including padding
        imposed_height: Total height, including padding
        padding: Inset around the grid

    Returns:
        (column_coords, row_coords) boundary coordinate arrays

    Raises:
        ConfigError: If the grid or an item is misconfigured
    """
    layout = GridLayout(grid, padding)
    measurement = layout.measure(
        items, MeasureSpec.exactly(imposed_width), MeasureSpec.exactly(imposed_height)
    )
    return (
        build_offsets(measurement.column_widths, layout.padding.left),
        build_offsets(measurement.row_heights, layout.padding.top),
    )
