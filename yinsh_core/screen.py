from __future__ import annotations

import math
from typing import Tuple

from .lattice import COORDS, Coord

Point = Tuple[float, float]  # continuous screen position (x, y)

# Layout of the lattice in screen space, in pixels.
SPACING = 60.0
ORIGIN_X = -15.0
ORIGIN_Y = 495.0


def screen_point(c: Coord) -> Point:
    """Translates lattice coordinates to screen coordinates."""
    x = SPACING * c[0]
    y = SPACING * c[1]
    return 0.5 * math.sqrt(3) * x + ORIGIN_X, -y + 0.5 * x + ORIGIN_Y


POINTS: Tuple[Point, ...] = tuple(screen_point(c) for c in COORDS)


def closest_coordinate(p: Point) -> Coord:
    """
    The lattice point whose screen position is nearest to p.
    Ties go to the first point in COORDS order.
    """
    x, y = p

    def dist(i: int) -> float:
        px, py = POINTS[i]
        return (x - px) ** 2 + (y - py) ** 2

    return COORDS[min(range(len(COORDS)), key=dist)]
