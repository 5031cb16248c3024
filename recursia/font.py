"""Styled fonts: family, style, size and color."""

from __future__ import annotations

import dataclasses
import enum
import sys
from dataclasses import dataclass, field

from recursia.color import Color


class FontFamily(enum.Enum):
    SERIF = enum.auto()
    SANS_SERIF = enum.auto()
    MONOSPACE = enum.auto()
    UNICODE_SERIF = enum.auto()
    UNICODE_SANS_SERIF = enum.auto()
    UNICODE_MONOSPACE = enum.auto()


class FontStyle(enum.Enum):
    NORMAL = enum.auto()
    BOLD = enum.auto()
    ITALIC = enum.auto()
    BOLD_ITALIC = enum.auto()


_STYLE_NAMES = {
    FontStyle.BOLD: "BOLD",
    FontStyle.BOLD_ITALIC: "BOLDITALIC",
    FontStyle.ITALIC: "ITALIC",
    FontStyle.NORMAL: "<normal>",
}


def _family_name(family):
    platform = sys.platform
    if platform == "darwin":
        names = {
            FontFamily.SERIF: "Didot",
            FontFamily.SANS_SERIF: "Helvetica",
            FontFamily.MONOSPACE: "Monaco",
            FontFamily.UNICODE_SERIF: "Times",
            FontFamily.UNICODE_SANS_SERIF: "Lucida Grande",
            FontFamily.UNICODE_MONOSPACE: "Lucida Grande",
        }
    elif platform == "win32":
        names = {
            FontFamily.SERIF: "Serif",
            FontFamily.SANS_SERIF: "Sans Serif",
            FontFamily.MONOSPACE: "Monospace",
            FontFamily.UNICODE_SERIF: "Times New Roman",
            FontFamily.UNICODE_SANS_SERIF: "Lucida Sans Unicode",
            FontFamily.UNICODE_MONOSPACE: "Lucida Sans Unicode",
        }
    else:
        names = {
            FontFamily.SERIF: "Serif",
            FontFamily.SANS_SERIF: "Sans Serif",
            FontFamily.MONOSPACE: "Monospace",
            FontFamily.UNICODE_SERIF: "Serif",
            FontFamily.UNICODE_SANS_SERIF: "Sans Serif",
            FontFamily.UNICODE_MONOSPACE: "Monospace",
        }
    try:
        return names[family]
    except KeyError:
        raise ValueError("Unknown font family.") from None


@dataclass(frozen=True)
class Font:
    """An immutable styled font."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = field(default_factory=lambda: Color.BLACK)

    def with_family(self, family):
        return dataclasses.replace(self, family=family)

    def with_style(self, style):
        return dataclasses.replace(self, style=style)

    def with_size(self, size):
        return dataclasses.replace(self, size=size)

    def with_color(self, color):
        return dataclasses.replace(self, color=color)

    def library_font_string(self):
        """Return the 'Family[-STYLE]-size' string used by the graphics layer."""
        result = _family_name(self.family)
        if self.style is not FontStyle.NORMAL:
            try:
                result += "-" + _STYLE_NAMES[self.style]
            except KeyError:
                raise ValueError("Unknown font style.") from None
        return f"{result}-{self.size}"