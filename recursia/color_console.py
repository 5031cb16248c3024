"""A text console that records styled runs of text and renders them as HTML."""

from __future__ import annotations

import enum
import html
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from recursia.color import Color

DEFAULT_FONT_SIZE = 11

_HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

_HTML_FOOTER = """</pre>
            </body>
        </html>
    """


class ConsoleFontStyle(enum.IntFlag):
    """Font effects for console text; BOLD_ITALIC combines both."""

    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3


@dataclass(frozen=True)
class ConsoleStyle:
    """The color, font effects and point size applied to a run of text."""

    color: Color = field(default_factory=lambda: Color.BLACK)
    font_style: ConsoleFontStyle = ConsoleFontStyle.NORMAL
    font_size: int = DEFAULT_FONT_SIZE

    def __post_init__(self):
        if self.font_size < 0:
            raise ValueError("Font size must not be negative.")

    def css(self) -> str:
        parts = [f"color:{self.color.to_html()};"]
        if self.font_style & ConsoleFontStyle.BOLD:
            parts.append("font-weight:bold;")
        if self.font_style & ConsoleFontStyle.ITALIC:
            parts.append("font-style:italic;")
        parts.append(f"font-size:{self.font_size}pt;")
        return "".join(parts)


class ColorConsole:
    """A writable text stream whose output keeps the style it was written in.

    Text written with ``write`` is buffered; changing the style or flushing
    moves the buffered text into the list of styled runs. ``flush`` renders
    the whole console as HTML and hands it to the optional ``on_update``
    callback.
    """

    def __init__(self, on_update: Optional[Callable[[str], None]] = None):
        self._on_update = on_update
        self._style = ConsoleStyle()
        self._buffer: list[str] = []
        self._contents: list[tuple[ConsoleStyle, str]] = []

    @property
    def style(self) -> ConsoleStyle:
        """The style applied to text written from now on."""
        return self._style

    @property
    def contents(self) -> list[tuple[ConsoleStyle, str]]:
        """All styled runs written so far, including buffered text."""
        self._flush_buffer()
        return list(self._contents)

    def write(self, text: str) -> int:
        if not isinstance(text, str):
            raise TypeError(f"write() argument must be str, not {type(text).__name__}")
        self._buffer.append(text)
        return len(text)

    def _flush_buffer(self) -> None:
        text = "".join(self._buffer)
        self._buffer.clear()
        if text:
            self._contents.append((self._style, text))

    def flush(self) -> None:
        """Render the console and pass the HTML to the update callback."""
        rendered = self.to_html()
        if self._on_update is not None:
            self._on_update(rendered)

    def clear_display(self) -> None:
        """Discard everything written so far, buffered text included."""
        self._flush_buffer()
        self._contents.clear()

    def set_style(self, color=None, style=ConsoleFontStyle.NORMAL, size=DEFAULT_FONT_SIZE) -> None:
        """Set the style for subsequent text; color defaults to black."""
        new_style = ConsoleStyle(
            Color.BLACK if color is None else color,
            ConsoleFontStyle(style),
            size,
        )
        self._flush_buffer()
        self._style = new_style

    @contextmanager
    def styled(self, color=None, style=None, size=None) -> Iterator["ColorConsole"]:
        """Temporarily change the style; arguments left as None keep their value."""
        old = self._style
        self.set_style(
            old.color if color is None else color,
            old.font_style if style is None else style,
            old.font_size if size is None else size,
        )
        try:
            yield self
        finally:
            self.set_style(old.color, old.font_style, old.font_size)

    def to_html(self) -> str:
        """Return the console contents as an HTML document."""
        self._flush_buffer()
        spans = "".join(
            f'<span style="{style.css()}">{html.escape(text)}</span>'
            for style, text in self._contents
        )
        return _HTML_HEADER + spans + _HTML_FOOTER