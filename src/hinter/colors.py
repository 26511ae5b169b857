"""Console foreground colors and their SGR escape codes."""

from __future__ import annotations

from typing import Literal

ColorName = Literal[
    "default",
    "black",
    "darkRed",
    "darkGreen",
    "darkYellow",
    "darkBlue",
    "darkMagenta",
    "darkCyan",
    "gray",
    "darkGray",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
]


class Color:
    """Named color constants, mirroring the sixteen console colors."""

    default = "default"
    black = "black"
    dark_red = "darkRed"
    dark_green = "darkGreen"
    dark_yellow = "darkYellow"
    dark_blue = "darkBlue"
    dark_magenta = "darkMagenta"
    dark_cyan = "darkCyan"
    gray = "gray"
    dark_gray = "darkGray"
    red = "red"
    green = "green"
    yellow = "yellow"
    blue = "blue"
    magenta = "magenta"
    cyan = "cyan"
    white = "white"


# Color name -> SGR foreground parameter
SGR_FOREGROUND: dict[str, int] = {
    "default": 39,
    "black": 30,
    "darkRed": 31,
    "darkGreen": 32,
    "darkYellow": 33,
    "darkBlue": 34,
    "darkMagenta": 35,
    "darkCyan": 36,
    "gray": 37,
    "darkGray": 90,
    "red": 91,
    "green": 92,
    "yellow": 93,
    "blue": 94,
    "magenta": 95,
    "cyan": 96,
    "white": 97,
}

_LOOKUP: dict[str, str] = {name.lower(): name for name in SGR_FOREGROUND}


def parse_color(name: str) -> ColorName:
    """Resolve a color name, ignoring case, dashes and underscores.

    ``"DarkGray"``, ``"dark-gray"`` and ``"DARK_GRAY"`` all give
    ``"darkGray"``.  Raises ``ValueError`` for unknown names.
    """
    key = name.replace("-", "").replace("_", "").lower()
    if key not in _LOOKUP:
        raise ValueError(f"Unknown color: {name!r}")
    return _LOOKUP[key]  # type: ignore[return-value]


def foreground_sgr(color: str) -> str:
    """Escape sequence that switches the foreground to *color*."""
    return f"\x1b[{SGR_FOREGROUND[color]}m"
