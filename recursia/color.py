"""24-bit RGB colors."""

from __future__ import annotations

import functools
import math
import random as _random
from typing import ClassVar


@functools.total_ordering
class Color:
    """An immutable RGB color; defaults to black."""

    __slots__ = ("_rgb",)

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    GRAY: ClassVar[Color]

    def __init__(self, red=0, green=0, blue=0):
        if not all(0 <= c < 256 for c in (red, green, blue)):
            raise ValueError("Color values out of range.")
        self._rgb = (int(red) << 16) + (int(green) << 8) + int(blue)

    def red(self):
        return (self._rgb >> 16) & 0xFF

    def green(self):
        return (self._rgb >> 8) & 0xFF

    def blue(self):
        return self._rgb & 0xFF

    def to_rgb(self):
        """Return the color as a 0xRRGGBB integer."""
        return self._rgb

    def to_html(self):
        """Return the color as an HTML '#rrggbb' string."""
        return f"#{self.red():02x}{self.green():02x}{self.blue():02x}"

    @classmethod
    def from_hex(cls, hex_value):
        if hex_value < 0 or hex_value > 0xFFFFFF:
            raise ValueError("Color.from_hex(): Value out of range.")
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF)

    @classmethod
    def from_hsv(cls, h, s, v):
        """Build a color from hue, saturation and value, each in [0, 1]."""
        if not (0 <= h <= 1 and 0 <= s <= 1 and 0 <= v <= 1):
            raise ValueError("Color.from_hsv(): Values out of range.")

        def channel(n):
            k = math.fmod(n + h * 6, 6)
            return v - v * s * max(0.0, min(k, 4 - k, 1.0))

        return cls(int(255 * channel(5)), int(255 * channel(3)), int(255 * channel(1)))

    @classmethod
    def random(cls):
        return cls(_random.randint(0, 255), _random.randint(0, 255), _random.randint(0, 255))

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb == other._rgb

    def __lt__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb < other._rgb

    def __hash__(self):
        return hash(self._rgb)

    def __repr__(self):
        return f"Color({self.red()}, {self.green()}, {self.blue()})"

    def __str__(self):
        for name in _NAMED:
            if getattr(Color, name) == self:
                return f"Color.{name}"
        return self.to_html()


_NAMED = ("BLACK", "BLUE", "CYAN", "GRAY", "GREEN", "MAGENTA", "RED", "WHITE", "YELLOW")

Color.WHITE = Color.from_hex(0xFFFFFF)
Color.BLACK = Color.from_hex(0x000000)
Color.RED = Color.from_hex(0xFF0000)
Color.GREEN = Color.from_hex(0x00FF00)
Color.BLUE = Color.from_hex(0x0000FF)
Color.YELLOW = Color.from_hex(0xFFFF00)
Color.CYAN = Color.from_hex(0x00FFFF)
Color.MAGENTA = Color.from_hex(0xFF00FF)
Color.GRAY = Color.from_hex(0x808080)