"""Core grid model: tracks, items and cell geometry."""

from .track import Axis, Track, TrackSize, Fixed, Auto, LinkedTo
from .grid import Grid, configure_grid
from .item import Item, Measurable, StaticItem
from .geometry import Rect, build_offsets
from . import geometry

__all__ = [
    "Axis",
    "Track",
    "TrackSize",
    "Fixed",
    "Auto",
    "LinkedTo",
    "Grid",
    "configure_grid",
    "Item",
    "Measurable",
    "StaticItem",
    "Rect",
    "build_offsets",
    "geometry",
]
