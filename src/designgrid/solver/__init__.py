"""Track sizing: link resolution and weighted distribution."""

from .resolver import natural_sizes, resolve, solve_links
from .distributor import distribute

__all__ = ["natural_sizes", "resolve", "solve_links", "distribute"]
