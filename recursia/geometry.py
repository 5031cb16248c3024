"""Integer points, rectangles and displacement vectors in the plane."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """A displacement in 2D space with integer components."""

    dx: int = 0
    dy: int = 0

    def __add__(self, other):
        if isinstance(other, Vector2D):
            return Vector2D(self.dx + other.dx, self.dy + other.dy)
        if isinstance(other, Point):
            return Point(other.x + self.dx, other.y + self.dy)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Point):
            return Point(other.x + self.dx, other.y + self.dy)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector2D):
            return self + (-other)
        return NotImplemented

    def __neg__(self):
        return Vector2D(-self.dx, -self.dy)

    def __mul__(self, scalar):
        if isinstance(scalar, (int, float)) and not isinstance(scalar, bool):
            # Components are truncated toward zero after scaling.
            return Vector2D(int(self.dx * scalar), int(self.dy * scalar))
        return NotImplemented

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if isinstance(scalar, (int, float)) and not isinstance(scalar, bool):
            return self * (1 / scalar)
        return NotImplemented

    def __str__(self):
        return f"{{ {self.dx}, {self.dy} }}"


@dataclass(frozen=True)
class Point:
    """A point in 2D space with integer coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other):
        if isinstance(other, Vector2D):
            return Point(self.x + other.dx, self.y + other.dy)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector2D(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2D):
            return self + (-other)
        return NotImplemented

    def __str__(self):
        return f"{{ {self.x}, {self.y} }}"


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its upper-left corner and its size.

    The top and left edges belong to the rectangle; the bottom and right
    edges do not.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __str__(self):
        return f"{{ {self.x}, {self.y}, {self.width}, {self.height} }}"