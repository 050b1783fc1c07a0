"""Color vocabulary used to describe generated images.

`match_color` recognizes the color named at the start of free text typed by a
viewer. Compound colors are two primary words joined by `-` and may be typed in
either order or with a space or slash as the separator: "orange-red",
"Red/Orange" and "red orange" all resolve to `Color.RED_ORANGE`.

The pattern and lookup table are built once at import time and are read-only
afterwards.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from vcr_schemas.contracts.errors import NoColor


SEPARATOR = "-"


class Color(str, Enum):
    RED = "red"
    RED_ORANGE = "red-orange"
    ORANGE = "orange"
    YELLOW_ORANGE = "yellow-orange"
    YELLOW = "yellow"
    CHARTREUSE = "chartreuse"
    GREEN = "green"
    CYAN = "cyan"
    SKY_BLUE = "sky-blue"
    BLUE = "blue"
    INDIGO = "indigo"
    PURPLE = "purple"
    MAGENTA = "magenta"

    def complement(self) -> "Color":
        return COMPLEMENTS[self]


# Curated, not symmetric: indigo and blue both map to yellow-orange.
COMPLEMENTS: dict[Color, Color] = {
    Color.RED: Color.GREEN,
    Color.RED_ORANGE: Color.CYAN,
    Color.ORANGE: Color.SKY_BLUE,
    Color.YELLOW_ORANGE: Color.BLUE,
    Color.YELLOW: Color.INDIGO,
    Color.CHARTREUSE: Color.MAGENTA,
    Color.GREEN: Color.RED,
    Color.CYAN: Color.RED_ORANGE,
    Color.SKY_BLUE: Color.ORANGE,
    Color.BLUE: Color.YELLOW_ORANGE,
    Color.INDIGO: Color.YELLOW_ORANGE,
    Color.PURPLE: Color.YELLOW,
    Color.MAGENTA: Color.CHARTREUSE,
}


def _split(name: str) -> tuple[str, str]:
    """Split a color name into its (lhs, rhs) slugs; rhs is "" for primaries."""

    pos = name.find(SEPARATOR)
    if 0 < pos < len(name) - 1:
        return name[:pos], name[pos + 1 :]
    return name, ""


def resolve_lookup_key(lhs: str, rhs: Optional[str] = None) -> str:
    """Canonical key for one or two slugs, independent of their order and case."""

    lhs = lhs.lower()
    rhs = (rhs or "").lower()
    if not rhs or rhs == lhs:
        return lhs
    a, b = sorted((lhs, rhs))
    return f"{a}{SEPARATOR}{b}"


def _build_pattern() -> "re.Pattern[str]":
    slugs: set[str] = set()
    for color in Color:
        lhs, rhs = _split(color.value)
        slugs.add(lhs)
        if rhs:
            slugs.add(rhs)
    # Sorted for a deterministic pattern.
    group = "(" + "|".join(re.escape(s) for s in sorted(slugs)) + ")"
    # group 1 required; group 2 optional, after a space, slash or hyphen
    return re.compile(rf"^{group}(?:[-/ ]{group})?", re.IGNORECASE)


def _build_lookup() -> dict[str, Color]:
    return {resolve_lookup_key(*_split(color.value)): color for color in Color}


_COLOR_RE = _build_pattern()
_COLOR_LOOKUP = _build_lookup()


def match_color(s: str) -> tuple[Color, str]:
    """Return the color named at the start of `s` and the rest of the string.

    Spaces following the color name are dropped from the remainder; nothing
    else is trimmed. Raises `NoColor` when `s` does not start with a color, or
    when it starts with two slugs that do not form a known color
    ("green-orange").

    >>> match_color("Green Muscadine grapes")
    (<Color.GREEN: 'green'>, 'Muscadine grapes')
    """

    m = _COLOR_RE.match(s)
    if m is None:
        raise NoColor(f"not a color: {s!r}")
    color = _COLOR_LOOKUP.get(resolve_lookup_key(m.group(1), m.group(2)))
    if color is None:
        raise NoColor(f"not a color: {m.group(0)!r}")
    pos = m.end()
    while pos < len(s) and s[pos] == " ":
        pos += 1
    return color, s[pos:]
