"""Flag of Recursia drawing, with 2D geometry, colors, fonts, a timer, chi-squared checks and console tools."""

__version__ = "1.0.0"

__all__ = [
    "chisquared",
    "color",
    "color_console",
    "console_utils",
    "flag",
    "font",
    "geometry",
    "registry",
    "timer",
]