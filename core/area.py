"""
Area membership test for submitted points.

The area is the union of three shapes scaled by ``r``:

* a quarter circle of radius ``r/2`` in the first quadrant,
* a ``r`` x ``r/2`` rectangle in the second quadrant,
* a right triangle with legs ``r`` in the third quadrant.

Every comparison is inclusive, so boundary points count as inside.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

ShapeTest = Callable[[float, float, float], bool]


def in_circle(x: float, y: float, r: float) -> bool:
    return x >= 0 and y >= 0 and x * x + y * y <= (r / 2) * (r / 2)


def in_rectangle(x: float, y: float, r: float) -> bool:
    return -r <= x <= 0 and 0 <= y <= r / 2


def in_triangle(x: float, y: float, r: float) -> bool:
    return -r <= x <= 0 and -r <= y <= 0 and y >= -x - r


SHAPES: Tuple[ShapeTest, ...] = (in_circle, in_rectangle, in_triangle)


@dataclass(frozen=True)
class AreaVerdict:
    inside: bool
    matched: Tuple[str, ...]


def evaluate(x: float, y: float, r: float) -> AreaVerdict:
    """Run every shape test and report which ones matched."""
    matched = tuple(test.__name__ for test in SHAPES if test(x, y, r))
    return AreaVerdict(inside=bool(matched), matched=matched)


def in_area(x: float, y: float, r: float) -> bool:
    """True when ``(x, y)`` lies in any of the shapes for scale ``r``."""
    return any(test(x, y, r) for test in SHAPES)
