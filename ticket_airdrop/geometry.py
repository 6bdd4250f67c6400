"""
Small 3-D geometry toolkit for the geometric distribution methods.

All points live in the [0, 999]^3 cube. Sampled points are collapsed to a
single draw number by reading their three coordinates as one 9 digit
decimal number (z, then y, then x).
"""

from dataclasses import dataclass
from typing import List, Union

Number = Union[int, float]

EDGE = 999
MAX_DISTANCE_SQ = EDGE * EDGE * 3


@dataclass(frozen=True)
class Point3:
    """Point inside the sampling cube."""

    x: Number
    y: Number
    z: Number

    @property
    def value(self) -> int:
        """Draw number of this point; coordinates are truncated toward zero."""
        return int(self.z) * 1_000_000 + int(self.y) * 1_000 + int(self.x)


@dataclass(frozen=True)
class Segment3:
    """Line segment between two points, parameterised over t in [0, 1]."""

    start: Point3
    end: Point3

    def at(self, t: float) -> Point3:
        """Point at parameter t, interpolating each coordinate independently."""
        s, e = self.start, self.end
        return Point3(
            (e.x - s.x) * t + s.x,
            (e.y - s.y) * t + s.y,
            (e.z - s.z) * t + s.z,
        )

    def distance_sq(self) -> Number:
        return distance_sq(self.start, self.end)


def distance_sq(a: Point3, b: Point3) -> Number:
    """Squared euclidean distance between two points."""
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2


def sample_along(segment: Segment3, count: int, step: float) -> List[Point3]:
    """Sample `count` points at parameters step * i for i = 1..count."""
    return [segment.at(step * i) for i in range(1, count + 1)]


def sampling_quantity(segment: Segment3, depth: int = EDGE) -> int:
    """
    Number of samples for a segment, proportional to its squared length.

    A segment spanning the full cube diagonal gets `depth` samples.
    """
    return int((segment.distance_sq() / MAX_DISTANCE_SQ) * depth)


def sample_segment(segment: Segment3, depth: int = EDGE) -> List[int]:
    """Draw numbers of a segment sampled evenly up to its end point."""
    quantity = sampling_quantity(segment, depth)
    if quantity <= 0:
        return []
    return [point.value for point in sample_along(segment, quantity, 1 / quantity)]
