"""ANSI color roles, colorization, and visible-width measurement."""

import re
from enum import Enum


class Color(Enum):
    """Color roles and their escape sequences."""

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD_CYAN = "\033[1;36m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_MAGENTA = "\033[95m"
    ORANGE = "\033[38;5;208m"


RESET = "\033[0m"

LABEL_COLOR = Color.BOLD_CYAN
VALUE_COLOR = Color.WHITE

# SGR sequences only: ESC [ digits/semicolons m
ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def colorize(text: str, color: Color) -> str:
    """Wrap text in the color's start sequence and a reset."""
    return f"{color.value}{text}{RESET}"


def format_label(label: str) -> str:
    return colorize(label, LABEL_COLOR)


def format_value(value: str) -> str:
    return colorize(value, VALUE_COLOR)


def format_line(label: str, value: str) -> str:
    """Format a ``Label: value`` line with label and value in distinct colors."""
    return f"{format_label(label)}: {format_value(value)}"


def strip_ansi(text: str) -> str:
    """Remove color escape sequences; anything malformed is kept literally."""
    return ANSI_PATTERN.sub("", text)


def visible_len(text: str) -> int:
    """Return the length of text as displayed, ignoring color escapes."""
    return len(strip_ansi(text))
