import pytest

from statscene.render.color import FALLBACK_COLOR
from statscene.render.color import darken
from statscene.render.color import normalize_color
from statscene.render.color import parse_hex


def test_darken_scales_each_channel_down() -> None:
    assert darken("#40c463", 0.8) == "#339c4f"


def test_darken_accepts_color_without_hash_and_uppercase() -> None:
    assert darken("ABCDEF", 1.0) == "#abcdef"


def test_darken_half_white_floors_channels() -> None:
    assert darken("#ffffff", 0.5) == "#7f7f7f"


@pytest.mark.parametrize("color", ["#000000", "#0f1e2d", "#ffffff", "9be9a8"])
@pytest.mark.parametrize("factor", [0.01, 0.5, 0.6, 0.8, 1.0])
def test_darken_never_brightens(color: str, factor: float) -> None:
    result = darken(color, factor)

    assert len(result) == 7
    assert result.startswith("#")
    before = parse_hex(color)
    after = parse_hex(result)
    assert before is not None and after is not None
    assert all(a <= b for a, b in zip(after, before))


@pytest.mark.parametrize(
    "color", ["not-a-color", "#12345", "#1234567", "#gggggg", "", None]
)
def test_darken_falls_back_for_malformed_colors(color) -> None:
    assert darken(color, 0.5) == FALLBACK_COLOR


def test_darken_clamps_factors_above_one() -> None:
    assert darken("#808080", 3.0) == "#ffffff"


@pytest.mark.parametrize(
    ("factor", "expected"),
    [
        (float("nan"), "#000000"),
        (float("inf"), "#ffffff"),
        (float("-inf"), "#000000"),
    ],
)
def test_darken_clamps_non_finite_factors(factor: float, expected: str) -> None:
    assert darken("#808080", factor) == expected


def test_normalize_color_lowercases_and_falls_back() -> None:
    assert normalize_color("00ADD8") == "#00add8"
    assert normalize_color("#40c463") == "#40c463"
    assert normalize_color("rgb(1, 2, 3)") == FALLBACK_COLOR
