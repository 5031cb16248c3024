"""Recursive drawing of the Flag of Recursia from golden-ratio triangles."""

from __future__ import annotations

import math
from typing import Callable

from recursia.color import Color
from recursia.geometry import Point, Rectangle

# A callback that paints one filled triangle given its corners and color.
DrawTriangle = Callable[[Point, Point, Point, Color], None]

CARDINAL = Color(196, 30, 58)
SANDSTONE = Color(245, 242, 225)

# The golden ratio, used to subdivide the triangles.
PHI = (1 + math.sqrt(5.0)) / 2

DECAGON_SIDES = 10


def _half(n):
    """Halve an integer, truncating toward zero."""
    return n // 2 if n >= 0 else -((-n) // 2)


def draw_acute_triangle(apex, base1, base2, order, draw):
    """Draw an acute golden triangle of the given order; return the number drawn."""
    if order == 0:
        draw(apex, base1, base2, CARDINAL)
        return 1
    side_mid = apex + (base1 - apex) / PHI
    return (draw_acute_triangle(base2, side_mid, base1, order - 1, draw)
            + draw_obtuse_triangle(side_mid, base2, apex, order - 1, draw))


def draw_obtuse_triangle(apex, base1, base2, order, draw):
    """Draw an obtuse golden triangle of the given order; return the number drawn."""
    if order == 0:
        draw(apex, base1, base2, SANDSTONE)
        return 1
    base_mid = base1 + (base2 - base1) / PHI
    side_mid = base1 + (apex - base1) / PHI
    return (draw_obtuse_triangle(side_mid, base_mid, base1, order - 1, draw)
            + draw_obtuse_triangle(base_mid, base2, apex, order - 1, draw)
            + draw_acute_triangle(base_mid, side_mid, apex, order - 1, draw))


def place_decagon_in(bounds):
    """Return the ten corners of a regular decagon centred in the bounds."""
    if bounds.width >= bounds.height:
        side = bounds.height
        left = bounds.x + _half(bounds.width - bounds.height)
        top = bounds.y
    else:
        side = bounds.width
        left = bounds.x
        top = bounds.y + _half(bounds.height - bounds.width)

    cx = left + _half(side)
    cy = top + _half(side)
    radius = int(side * 0.4)

    return [
        Point(
            int(cx - radius * math.cos(i * math.pi / 5 + math.pi / 10)),
            int(cy + radius * math.sin(i * math.pi / 5 + math.pi / 10)),
        )
        for i in range(DECAGON_SIDES)
    ]


def draw_flag_of_recursia(bounds, draw):
    """Draw the whole flag inside the bounds; return the number of triangles drawn."""
    if not callable(draw):
        raise TypeError("draw_flag_of_recursia() needs a triangle-drawing callback.")
    corners = place_decagon_in(bounds)
    center = Point(bounds.x + _half(bounds.width), bounds.y + _half(bounds.height))
    pairs = zip(corners, corners[1:] + corners[:1])
    return sum(
        draw_acute_triangle(center, p0, p1, order, draw)
        for order, (p0, p1) in enumerate(pairs)
    )


def scramble(value):
    """Scramble an integer with a 32-bit xorshift step; the result is non-negative."""
    u = value & 0xFFFFFFFF
    u ^= (u << 13) & 0xFFFFFFFF
    u ^= u >> 17
    u ^= (u << 5) & 0xFFFFFFFF
    return u & 0x7FFFFFFF