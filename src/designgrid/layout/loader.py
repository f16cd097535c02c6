"""YAML loader for grid layout definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..core.grid import configure_grid
from ..core.item import Item, StaticItem
from ..errors import ConfigError
from .engine import GridLayout, LayoutResult, MeasureSpec, Padding


def parse_int_list(text: str, attribute: str) -> list[int]:
    """Convert a comma separated string of integers to a list.

    Every value becomes one track, e.g. "10,0,-2" gives three tracks.

    Args:
        text: Comma separated integers
        attribute: Name of the attribute being parsed, used in errors

    Returns:
        List of integers

    Raises:
        ConfigError: If any token is not an integer
    """
    try:
        return [int(token) for token in text.split(",")]
    except ValueError as e:
        raise ConfigError(f"Illegal value in {attribute} attribute: {text!r}") from e


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _int_list(value: Any, attribute: str) -> list[int] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return parse_int_list(value, attribute)
    if _is_int(value):
        return [value]
    if not isinstance(value, list) or not all(_is_int(v) for v in value):
        raise ConfigError(f"Illegal value in {attribute} attribute: {value!r}")
    return list(value)


def _pair(value: Any, attribute: str, default: tuple[int, int]) -> tuple[int, int]:
    values = _int_list(value, attribute)
    if values is None:
        return default
    if len(values) != 2:
        raise ConfigError(f"{attribute} must have two values, got {values}")
    return values[0], values[1]


@dataclass
class GridDocument:
    """A grid layout and its items, as loaded from a definition."""

    name: str
    layout: GridLayout
    items: list[Item] = field(default_factory=list)

    def run(
        self, width_spec: MeasureSpec | None = None, height_spec: MeasureSpec | None = None
    ) -> LayoutResult:
        """Lay out the document's items."""
        return self.layout.layout(self.items, width_spec, height_spec)


class LayoutLoader:
    """Loads grid layout definitions from YAML files.

    YAML format:
        name: login_form
        columns: "10,0,5,0,10"     # declared widths: >0 fixed, 0 auto, -k same as column k
        rows: [10, 0, 5, 0, 10]    # declared heights, string or list
        column_weights: "0,0,0,1,0"  # optional, defaults to zeros
        row_weights: "0,0,0,0,0"
        padding: [4, 4, 4, 4]      # optional: left, top, right, bottom (or one value)

        items:
          user_label:
            cell: [1, 1]           # column, row
            span: [1, 1]           # optional; negative means fixed size of one cell
            anchor: r              # optional, any of l r t b; defaults to lrtb
            size: [60, 14]         # natural width and height
            visible: true          # optional
    """

    def load(self, path: str | Path) -> GridDocument:
        """Load a grid layout definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            GridDocument with the configured layout and items
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._build_document(data, default_name=path.stem)

    def load_string(self, yaml_string: str) -> GridDocument:
        """Load a grid layout definition from a YAML string."""
        data = yaml.safe_load(yaml_string)
        return self._build_document(data)

    def _build_document(self, data: Any, default_name: str = "grid") -> GridDocument:
        """Build layout and items from parsed YAML data."""
        if not isinstance(data, dict):
            raise ConfigError("Layout definition must be a mapping")

        name = data.get("name", default_name)
        grid = configure_grid(
            _int_list(data.get("columns"), "column_widths"),
            _int_list(data.get("rows"), "row_heights"),
            _int_list(data.get("column_weights"), "column_weights"),
            _int_list(data.get("row_weights"), "row_weights"),
        )
        layout = GridLayout(grid, self._parse_padding(data.get("padding")))

        items_data = data.get("items") or {}
        if not isinstance(items_data, dict):
            raise ConfigError(f"items must be a mapping, got {items_data!r}")

        items = []
        for item_name, item_def in items_data.items():
            if item_def is None:
                item_def = {}
            elif not isinstance(item_def, dict):
                raise ConfigError(f"Item '{item_name}' must be a mapping, got {item_def!r}")
            items.append(self._parse_item(str(item_name), item_def))

        return GridDocument(name=name, layout=layout, items=items)

    def _parse_padding(self, value: Any) -> Padding:
        values = _int_list(value, "padding")
        if values is None:
            return Padding()
        if len(values) == 1:
            return Padding(*(values * 4))
        if len(values) != 4:
            raise ConfigError(f"padding must have one or four values, got {values}")
        return Padding(*values)

    def _parse_item(self, name: str, item_def: dict[str, Any]) -> Item:
        x, y = _pair(item_def.get("cell"), f"{name}.cell", (0, 0))
        w, h = _pair(item_def.get("span"), f"{name}.span", (1, 1))
        width, height = _pair(item_def.get("size"), f"{name}.size", (0, 0))

        anchor = item_def.get("anchor", "lrtb")
        if anchor is None:
            anchor = ""

        content = StaticItem(width, height, bool(item_def.get("visible", True)))
        return Item(content=content, x=x, y=y, w=w, h=h, anchor=str(anchor), name=name)
