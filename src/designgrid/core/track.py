"""Track descriptors for grid columns and rows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from ..errors import ConfigError


class Axis(Enum):
    """The two axes of a grid."""

    COLUMNS = "columns"
    ROWS = "rows"


class TrackSize(ABC):
    """How a track obtains its natural size.

    One of three variants:
    - Fixed(size): a fixed size in pixels
    - Auto(): the largest single-cell item placed in the track
    - LinkedTo(index): the resolved size of another track on the same axis

    The integer encoding used by configuration files maps positive values to
    Fixed, zero to Auto and -k to LinkedTo(k).
    """

    __slots__ = ()

    @staticmethod
    def from_declared(value: int) -> TrackSize:
        """Convert an integer declared size to its tagged form."""
        value = int(value)
        if value > 0:
            return Fixed(value)
        if value == 0:
            return Auto()
        return LinkedTo(-value)

    @abstractmethod
    def to_declared(self) -> int:
        """Convert back to the integer encoding."""
        pass


@dataclass(frozen=True, slots=True)
class Fixed(TrackSize):
    size: int

    def to_declared(self) -> int:
        return self.size


@dataclass(frozen=True, slots=True)
class Auto(TrackSize):

    def to_declared(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class LinkedTo(TrackSize):
    index: int

    def to_declared(self) -> int:
        if self.index == 0:
            # -0 reads back as Auto
            raise ConfigError("A link to track 0 has no integer encoding")
        return -self.index


@dataclass
class Track:
    """One column or row of the grid.

    Attributes:
        size: How the natural size of the track is obtained
        weight: Share of any surplus or deficit during distribution
    """

    size: TrackSize = field(default_factory=Auto)
    weight: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.size, TrackSize):
            self.size = TrackSize.from_declared(self.size)
        if self.weight < 0:
            raise ConfigError(f"Track weight must be non-negative, got {self.weight}")

    @property
    def declared_size(self) -> int:
        return self.size.to_declared()
