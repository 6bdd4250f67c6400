"""
Registry of distribution methods turning a digit stream into draw numbers.

Every method is a pure function of the chunks cut from the digit stream at
the method's width. Selected methods are run in order and their outputs
concatenated; deduplication happens later, in the resolver.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Literal

from .errors import MalformedInputError, UnknownMethodError
from .geometry import EDGE, Point3, Segment3, sample_along, sample_segment
from .utils import Utils

logger = logging.getLogger(__name__)

FishDepth = Literal['beam', 'slow']

FISH_DEPTHS: Dict[str, int] = {
    'beam': 999,
    'slow': 333,
}


@dataclass(frozen=True)
class DrawOptions:
    """Tunables for methods that have them"""
    fish_splinter: bool = False
    fish_depth: FishDepth = 'beam'


Sampler = Callable[[List[str], DrawOptions], List[int]]


@dataclass(frozen=True)
class DistributionMethod:
    name: str
    width: int
    sampler: Sampler


def _sqrt(value: int) -> float:
    if value < 0:
        raise MalformedInputError(f"Square root of negative value {value}")
    return math.sqrt(value)


def _parse_all(chunks: Iterable[str]) -> List[int]:
    return [Utils.parse_chunk(c) for c in chunks]


def _reversed_values(chunks: Iterable[str]) -> List[int]:
    return [Utils.parse_chunk(Utils.reverse_chunk(c)) for c in chunks]


def _point(chunk: str) -> Point3:
    x, y, z = _parse_all(Utils.chunk(chunk, 3))
    return Point3(x, y, z)


def _triangle_pi(values: List[int]) -> List[int]:
    draws = []
    for i in range(len(values)):
        for y in range(i, len(values) - i):
            a = math.floor(_sqrt(values[i]))
            b = math.floor(_sqrt(values[y]))
            draws.append(int(a * b * math.pi))
    return draws


# Numeric methods

def forward(chunks: List[str], options: DrawOptions) -> List[int]:
    """Chunks read as they are (0 - 999,999,999)."""
    return _parse_all(chunks)


def reverse(chunks: List[str], options: DrawOptions) -> List[int]:
    """Chunks read with their digits reversed."""
    return _reversed_values(chunks)


def pi(chunks: List[str], options: DrawOptions) -> List[int]:
    return _triangle_pi(_parse_all(chunks))


def reverse_pi(chunks: List[str], options: DrawOptions) -> List[int]:
    return _triangle_pi(_reversed_values(chunks))


def cubed(chunks: List[str], options: DrawOptions) -> List[int]:
    """3 digit chunks cubed (0 - 997,002,999)."""
    return [value ** 3 for value in _parse_all(chunks)]


def hypercube(chunks: List[str], options: DrawOptions) -> List[int]:
    """5 digit chunks, then their reversals, each mapped to 3(sqrt(x)pi)^3."""
    values = _parse_all(chunks) + _reversed_values(chunks)
    return [int(3 * (_sqrt(x) * math.pi) ** 3) for x in values]


# Geometric methods

def avg_point_lines(chunks: List[str], options: DrawOptions) -> List[int]:
    """Lines from every point to the average point of the cloud."""
    points = [_point(c) for c in chunks]
    if not points:
        return []
    count = len(points)
    average = Point3(
        sum(p.x for p in points) // count,
        sum(p.y for p in points) // count,
        sum(p.z for p in points) // count,
    )
    draws = []
    for point in points:
        draws.extend(sample_segment(Segment3(point, average)))
    return draws


def alien_blood(chunks: List[str], options: DrawOptions) -> List[int]:
    """Vertical drips through each (x, y) from the floor to the ceiling."""
    draws = []
    for chunk in chunks:
        x, y = _parse_all(Utils.chunk(chunk, 3))
        drip = Segment3(Point3(x, y, 0), Point3(x, y, EDGE))
        draws.extend(p.value for p in sample_along(drip, EDGE, 1 / EDGE))
    return draws


def bouncing_ball(chunks: List[str], options: DrawOptions) -> List[int]:
    """
    A ball travelling through every point, hitting the floor between any two
    points where it does not climb, and finally coming to rest on the floor.
    """
    points = [_point(c) for c in chunks]
    if not points:
        return []

    path = []
    for current, following in zip(points, points[1:]):
        path.append(current)
        if following.z <= current.z:
            path.append(Point3((current.x + following.x) // 2,
                               (current.y + following.y) // 2,
                               0))
    last = points[-1]
    path.append(last)
    path.append(Point3(last.x, last.y, 0))

    draws = []
    for start, end in zip(path, path[1:]):
        draws.extend(sample_segment(Segment3(start, end)))
    return draws


def fish(chunks: List[str], options: DrawOptions) -> List[int]:
    """
    Projectiles fired from the first point: either into the next point only,
    or splintering into every remaining point.
    """
    points = [_point(c) for c in chunks]
    if len(points) < 2:
        return []
    impact = points[0]
    targets = points[1:] if options.fish_splinter else points[1:2]
    depth = FISH_DEPTHS[options.fish_depth]

    draws = []
    for target in targets:
        draws.extend(sample_segment(Segment3(impact, target), depth))
    return draws


METHODS: Dict[str, DistributionMethod] = {
    method.name: method for method in (
        DistributionMethod('forward', 9, forward),
        DistributionMethod('reverse', 9, reverse),
        DistributionMethod('pi', 9, pi),
        DistributionMethod('reverse_pi', 9, reverse_pi),
        DistributionMethod('cubed', 3, cubed),
        DistributionMethod('hypercube', 5, hypercube),
        DistributionMethod('avg_point_lines', 9, avg_point_lines),
        DistributionMethod('alien_blood', 6, alien_blood),
        DistributionMethod('bouncing_ball', 9, bouncing_ball),
        DistributionMethod('fish', 9, fish),
    )
}


def get_method(name: str) -> DistributionMethod:
    try:
        return METHODS[name]
    except KeyError:
        raise UnknownMethodError(
            f"Unknown distribution method {name!r}; choose from {', '.join(METHODS)}"
        ) from None


def generate_draws(
    stream: str,
    methods: Iterable[str],
    options: DrawOptions = DrawOptions(),
) -> List[int]:
    """
    Run the selected methods over a digit stream and pool their draws.

    Args:
        stream: Digit stream from digest.digitize
        methods: Method names, run in the given order
        options: Method tunables

    Returns:
        Concatenated draw numbers, duplicates kept
    """
    selected = [get_method(name) for name in methods]
    pooled: List[int] = []
    for method in selected:
        draws = method.sampler(Utils.chunk(stream, method.width), options)
        logger.info("%s generated %d numbers", method.name, len(draws))
        pooled.extend(draws)
    return pooled
