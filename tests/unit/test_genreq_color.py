from __future__ import annotations

import pytest

from vcr_schemas.contracts.errors import NoColor
from vcr_schemas.genreq.color import COMPLEMENTS, Color, match_color, resolve_lookup_key


@pytest.mark.parametrize(
    "text,color,remainder",
    [
        ("red", Color.RED, ""),
        ("red shoes", Color.RED, "shoes"),
        ("Green Muscadine grapes", Color.GREEN, "Muscadine grapes"),
        ("red-orange", Color.RED_ORANGE, ""),
        ("orange-red", Color.RED_ORANGE, ""),
        ("orange", Color.ORANGE, ""),
        ("yellow-orange", Color.YELLOW_ORANGE, ""),
        ("orange-yellow", Color.YELLOW_ORANGE, ""),
        ("Sky/Blue whale", Color.SKY_BLUE, "whale"),
        ("blue sky", Color.SKY_BLUE, ""),
        ("RED RED balloon", Color.RED, "balloon"),
        ("magenta   cat", Color.MAGENTA, "cat"),
        ("cyan\tcat", Color.CYAN, "\tcat"),
        ("indigo, the color", Color.INDIGO, ", the color"),
    ],
)
def test_match_color(text: str, color: Color, remainder: str) -> None:
    assert match_color(text) == (color, remainder)


@pytest.mark.parametrize("text", ["green-orange", "a ripe orange on a tree", "", "sky", " red", "beige"])
def test_match_color_no_color(text: str) -> None:
    with pytest.raises(NoColor):
        match_color(text)


@pytest.mark.parametrize("color", list(Color))
def test_every_color_matches_itself(color: Color) -> None:
    assert match_color(color.value) == (color, "")
    assert match_color(color.value.upper()) == (color, "")


def test_resolve_lookup_key() -> None:
    assert resolve_lookup_key("red") == "red"
    assert resolve_lookup_key("red", "") == "red"
    assert resolve_lookup_key("red", "red") == "red"
    assert resolve_lookup_key("Red", "RED") == "red"
    assert resolve_lookup_key("red", "orange") == "orange-red"
    assert resolve_lookup_key("orange", "red") == "orange-red"


@pytest.mark.parametrize(
    "color,complement",
    [
        (Color.RED, Color.GREEN),
        (Color.GREEN, Color.RED),
        (Color.RED_ORANGE, Color.CYAN),
        (Color.CYAN, Color.RED_ORANGE),
        (Color.ORANGE, Color.SKY_BLUE),
        (Color.SKY_BLUE, Color.ORANGE),
        (Color.YELLOW_ORANGE, Color.BLUE),
        (Color.BLUE, Color.YELLOW_ORANGE),
        (Color.YELLOW, Color.INDIGO),
        (Color.INDIGO, Color.YELLOW_ORANGE),
        (Color.CHARTREUSE, Color.MAGENTA),
        (Color.MAGENTA, Color.CHARTREUSE),
        (Color.PURPLE, Color.YELLOW),
    ],
)
def test_complement(color: Color, complement: Color) -> None:
    assert color.complement() is complement


def test_complement_is_total() -> None:
    assert set(COMPLEMENTS) == set(Color)
    assert set(COMPLEMENTS.values()) <= set(Color)
