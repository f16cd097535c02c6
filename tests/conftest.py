"""Shared fixtures for layout tests."""

from pathlib import Path

import pytest

from designgrid.core import Item, StaticItem

ASSETS_DIR = Path(__file__).parent.parent / "assets" / "layouts"


def make_item(x: int, y: int, width: int = 0, height: int = 0, **kwargs) -> Item:
    """Create an item with a static natural size."""
    visible = kwargs.pop("visible", True)
    return Item(StaticItem(width, height, visible), x=x, y=y, **kwargs)


@pytest.fixture
def assets_dir() -> Path:
    return ASSETS_DIR
