from __future__ import annotations

from typing import List

from ..cases import SPLIT_CIRCLE, FixtureCase
from .types import Raster

WHITE = 255
BLACK = 0


def split_circle_sample(x: int, y: int, radius: int = 16) -> int:
    """Return the grayscale value at centered coordinates (x, y).

    The left half holds a circle centered on the origin. On the right half
    the circle center moves to y = -radius for the upper quadrant and to
    y = +radius for the lower one, so the two halves do not line up.
    """
    if x < 0:
        shift = 0
    elif y < 0:
        shift = -radius
    else:
        shift = radius
    dy = y - shift
    return WHITE if x * x + dy * dy < radius * radius else BLACK


def render_split_circle(case: FixtureCase = SPLIT_CIRCLE) -> Raster:
    """Evaluate the split-circle pattern for every pixel of the case."""
    radius = case.radius
    samples: List[int] = []
    for row in range(case.height):
        y = row - case.height // 2
        for col in range(case.width):
            x = col - case.width // 2
            samples.append(split_circle_sample(x, y, radius))
    return Raster(tuple(samples), case.width)
