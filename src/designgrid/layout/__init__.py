"""Layout system for placing items on a design grid."""

from .anchors import Anchor, parse_anchor, place_item
from .engine import (
    GridLayout,
    LayoutResult,
    MeasureMode,
    MeasureSpec,
    Measurement,
    Padding,
    resolve_and_distribute,
)
from .loader import GridDocument, LayoutLoader, parse_int_list

__all__ = [
    "Anchor",
    "parse_anchor",
    "place_item",
    "GridLayout",
    "LayoutResult",
    "MeasureMode",
    "MeasureSpec",
    "Measurement",
    "Padding",
    "resolve_and_distribute",
    "GridDocument",
    "LayoutLoader",
    "parse_int_list",
]
