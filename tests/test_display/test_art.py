"""Tests for the ASCII art logo and its colorization."""

import pytest

from hostfetch.display.art import (
    FLAT_COLOR,
    RAINBOW_BANDS,
    band_color,
    colorize_banded,
    colorize_flat,
    get_art,
)
from hostfetch.display.colors import RESET, Color, strip_ansi


class TestGetArt:
    def test_non_empty(self):
        art = get_art()
        assert len(art) == 17
        assert all(line for line in art)

    def test_deterministic(self):
        assert get_art() == get_art()

    def test_returns_fresh_list(self):
        art = get_art()
        art.append("extra")
        assert "extra" not in get_art()

    def test_plain_text(self):
        for line in get_art():
            assert "\033" not in line

    def test_bands_cover_the_logo(self):
        assert sum(rows for _, rows in RAINBOW_BANDS) == len(get_art())


class TestColorizeFlat:
    def test_preserves_count_and_text(self):
        art = get_art()
        colored = colorize_flat(art, FLAT_COLOR)
        assert len(colored) == len(art)
        for original, line in zip(art, colored):
            assert original in line
            assert line.startswith(FLAT_COLOR.value)
            assert line.endswith(RESET)
            assert strip_ansi(line) == original

    def test_empty(self):
        assert colorize_flat([], Color.RED) == []


class TestBandColor:
    def test_first_band(self):
        assert band_color(0, RAINBOW_BANDS) == Color.BRIGHT_GREEN
        assert band_color(5, RAINBOW_BANDS) == Color.BRIGHT_GREEN

    def test_band_boundaries(self):
        assert band_color(6, RAINBOW_BANDS) == Color.BRIGHT_YELLOW
        assert band_color(8, RAINBOW_BANDS) == Color.BRIGHT_RED
        assert band_color(12, RAINBOW_BANDS) == Color.BRIGHT_MAGENTA
        assert band_color(14, RAINBOW_BANDS) == Color.BLUE
        assert band_color(16, RAINBOW_BANDS) == Color.BLUE

    def test_past_last_band_uses_last_color(self):
        assert band_color(100, RAINBOW_BANDS) == Color.BLUE

    def test_empty_bands_rejected(self):
        with pytest.raises(ValueError):
            band_color(0, [])


class TestColorizeBanded:
    def test_rainbow_stripes(self):
        colored = colorize_banded(get_art())
        assert colored[0].startswith(Color.BRIGHT_GREEN.value)
        assert colored[6].startswith(Color.BRIGHT_YELLOW.value)
        assert colored[8].startswith(Color.BRIGHT_RED.value)
        assert colored[12].startswith(Color.BRIGHT_MAGENTA.value)
        assert colored[16].startswith(Color.BLUE.value)

    def test_preserves_count_and_text(self):
        art = get_art()
        colored = colorize_banded(art)
        assert len(colored) == len(art)
        assert [strip_ansi(line) for line in colored] == art
        assert all(line.endswith(RESET) for line in colored)

    def test_lines_beyond_bands(self):
        bands = [(Color.RED, 1), (Color.CYAN, 1)]
        colored = colorize_banded(["a", "b", "c", "d"], bands)
        assert colored == [
            f"{Color.RED.value}a{RESET}",
            f"{Color.CYAN.value}b{RESET}",
            f"{Color.CYAN.value}c{RESET}",
            f"{Color.CYAN.value}d{RESET}",
        ]

    def test_empty_bands_rejected(self):
        with pytest.raises(ValueError, match="band"):
            colorize_banded(["a"], [])
