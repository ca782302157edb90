"""Side-by-side layout of the art column and the info column."""

from collections.abc import Sequence

from .colors import visible_len

# Spaces between the widest art line and the info column
GUTTER = 4


def combine_art_and_info(
    art: Sequence[str],
    info: Sequence[str],
    gutter: int = GUTTER,
) -> list[str]:
    """Place info lines to the right of art lines.

    Every art line is padded to the visible width of the widest art line
    plus ``gutter``, so info text starts in the same visible column on
    every row regardless of how many escape sequences an art line carries.
    When one block is longer, the other side is left blank.

    Args:
        art: Art lines, possibly colorized.
        info: Info lines, possibly colorized.
        gutter: Spaces between the art column and the info column.

    Returns:
        ``max(len(art), len(info))`` combined lines.
    """
    if not info:
        return list(art)

    art_width = max((visible_len(line) for line in art), default=0)
    blank = " " * (art_width + gutter)

    combined = []
    for i in range(max(len(art), len(info))):
        if i < len(art):
            line = art[i] + " " * (art_width - visible_len(art[i]) + gutter)
        else:
            line = blank
        if i < len(info):
            line += info[i]
        combined.append(line)

    return combined
