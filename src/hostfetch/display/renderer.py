"""Compose the final display from collected system information."""

from collections.abc import Collection

from hostfetch.collectors.system_info import SystemInfo

from .art import FLAT_COLOR, RAINBOW_BANDS, colorize_banded, colorize_flat, get_art
from .colors import RESET, Color, format_line
from .layout import combine_art_and_info

SEPARATOR = "-" * 33

ART_STYLES = ("rainbow", "flat")

INFO_LABELS = (
    "OS",
    "Host",
    "Kernel",
    "Uptime",
    "Packages",
    "Shell",
    "Resolution",
    "DE",
    "WM",
    "WM Theme",
    "Terminal",
    "Terminal Font",
    "CPU",
    "CPU Cores",
    "GPU",
    "Memory",
    "Load Average",
    "Disk Space",
    "Disk Encryption",
    "Battery",
)


def _info_values(info: SystemInfo) -> list[tuple[str, str]]:
    """Pair each display label with its value text."""
    return [
        ("OS", f"{info.os_name} {info.os_version} {info.os_build} {info.architecture}"),
        ("Host", info.host_model),
        ("Kernel", info.kernel),
        ("Uptime", info.uptime),
        ("Packages", info.packages),
        ("Shell", info.shell),
        ("Resolution", info.resolution),
        ("DE", info.de),
        ("WM", info.wm),
        ("WM Theme", info.wm_theme),
        ("Terminal", info.terminal),
        ("Terminal Font", info.terminal_font),
        ("CPU", info.cpu_model),
        ("CPU Cores", info.cpu_cores),
        ("GPU", info.gpu_model),
        ("Memory", f"{info.memory_used} MiB / {info.memory_total} MiB"),
        ("Load Average", f"{info.load_average_1}, {info.load_average_5}, {info.load_average_15}"),
        ("Disk Space", f"{info.disk_used} GiB / {info.disk_free} GiB"),
        ("Disk Encryption", info.disk_encryption),
        ("Battery", info.battery_charge),
    ]


def format_header(username: str, hostname: str) -> str:
    """Format the ``user@host`` title line."""
    green = Color.BRIGHT_GREEN.value
    return f"{green}{username}{RESET}@{green}{hostname}{RESET}"


def build_info_lines(info: SystemInfo, hidden: Collection[str] = ()) -> list[str]:
    """Format system information as colorized display lines.

    Args:
        info: Collected system information.
        hidden: Labels (from INFO_LABELS) to leave out.

    Returns:
        Header, separator, then one ``Label: value`` line per shown field.
    """
    lines = [format_header(info.username, info.hostname), SEPARATOR]
    for label, value in _info_values(info):
        if label not in hidden:
            lines.append(format_line(label, value))
    return lines


def render(info: SystemInfo, art_style: str = "rainbow", hidden: Collection[str] = ()) -> list[str]:
    """Render the logo and the info lines side by side.

    Raises:
        ValueError: If ``art_style`` is not one of ART_STYLES.
    """
    if art_style == "rainbow":
        art = colorize_banded(get_art(), RAINBOW_BANDS)
    elif art_style == "flat":
        art = colorize_flat(get_art(), FLAT_COLOR)
    else:
        raise ValueError(f"Unknown art style '{art_style}'. Options: {', '.join(ART_STYLES)}")

    return combine_art_and_info(art, build_info_lines(info, hidden))
