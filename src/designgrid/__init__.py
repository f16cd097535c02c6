"""Designgrid - a design-grid layout engine."""

from .errors import ConfigError

__all__ = ["ConfigError"]
