"""ASCII art logo and its colorization."""

from collections.abc import Sequence

from .colors import Color, colorize

# Classic six-stripe logo: green, yellow, red, purple, blue
RAINBOW_BANDS: tuple[tuple[Color, int], ...] = (
    (Color.BRIGHT_GREEN, 6),
    (Color.BRIGHT_YELLOW, 2),
    (Color.BRIGHT_RED, 4),
    (Color.BRIGHT_MAGENTA, 2),
    (Color.BLUE, 3),
)

FLAT_COLOR = Color.BRIGHT_GREEN

_LOGO = (
    "                    'c.",
    "                 ,xNMM.",
    "               .OMMMMo",
    "               OMMM0,",
    "     .;loddo:' loolloddol;.",
    "   cKMMMMMMMMMMNWMMMMMMMMMM0:",
    " .KMMMMMMMMMMMMMMMMMMMMMMMWd.",
    " XMMMMMMMMMMMMMMMMMMMMMMMX.",
    ";MMMMMMMMMMMMMMMMMMMMMMMM:",
    ":MMMMMMMMMMMMMMMMMMMMMMMM:",
    ".MMMMMMMMMMMMMMMMMMMMMMMMX.",
    " kMMMMMMMMMMMMMMMMMMMMMMMMWd.",
    " .XMMMMMMMMMMMMMMMMMMMMMMMMMMk",
    "  .XMMMMMMMMMMMMMMMMMMMMMMMMK.",
    "    kMMMMMMMMMMMMMMMMMMMMMMd",
    "     ;KMMMMMMMWXXWMMMMMMMk.",
    "       .cooc,.    .,coo:.",
)


def get_art() -> list[str]:
    """Return the logo lines. Callers get a fresh list they may modify."""
    return list(_LOGO)


def colorize_flat(lines: Sequence[str], color: Color) -> list[str]:
    """Apply one color to every line."""
    return [colorize(line, color) for line in lines]


def band_color(index: int, bands: Sequence[tuple[Color, int]]) -> Color:
    """Return the color of the band covering line ``index``.

    Lines past the last declared band keep the last band's color.
    """
    if not bands:
        raise ValueError("At least one color band is required")

    accumulated = 0
    for color, rows in bands:
        accumulated += rows
        if index < accumulated:
            return color
    return bands[-1][0]


def colorize_banded(
    lines: Sequence[str],
    bands: Sequence[tuple[Color, int]] = RAINBOW_BANDS,
) -> list[str]:
    """Color lines in horizontal stripes.

    Args:
        lines: Art lines to color.
        bands: Ordered ``(color, row_count)`` pairs, top to bottom.

    Returns:
        One colorized line per input line.
    """
    if not bands:
        raise ValueError("At least one color band is required")
    return [colorize(line, band_color(i, bands)) for i, line in enumerate(lines)]
