"""Main entry point for designgrid."""

import argparse
import logging
import sys

from .errors import ConfigError
from .layout import LayoutLoader, LayoutResult, MeasureMode, MeasureSpec


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Designgrid - compute track sizes and item bounds for a grid layout",
    )
    parser.add_argument("layout", help="Path to a layout YAML file")
    parser.add_argument(
        "--width",
        type=int,
        default=0,
        help="Imposed width including padding (default: 0)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=0,
        help="Imposed height including padding (default: 0)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in MeasureMode],
        default=MeasureMode.UNSPECIFIED.value,
        help="How the imposed size constrains the grid (default: unspecified)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each layout pass",
    )
    return parser.parse_args(argv)


def format_result(name: str, result: LayoutResult, item_names: list[str]) -> str:
    """Render a layout result as plain text."""
    lines = [
        f"Layout: {name}",
        f"Size: {result.width}x{result.height}",
        f"Columns: {', '.join(str(int(x)) for x in result.column_coords)}",
        f"Rows: {', '.join(str(int(y)) for y in result.row_coords)}",
        "Items:",
    ]
    for item_name, rect in zip(item_names, result.rects):
        left, top, right, bottom = rect.to_bounds()
        lines.append(f"  - {item_name}: ({left}, {top}) - ({right}, {bottom})")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Load a layout definition and print its computed geometry."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mode = MeasureMode(args.mode)
    try:
        document = LayoutLoader().load(args.layout)
        result = document.run(MeasureSpec(mode, args.width), MeasureSpec(mode, args.height))
    except (ConfigError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(format_result(document.name, result, [str(item) for item in document.items]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
