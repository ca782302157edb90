"""User session and desktop environment information.

Like the hardware detectors, each ``get_*`` function returns a string and
returns "" rather than raising when its source is unavailable.
"""

import getpass
import logging
import os
import platform
import re
import socket
import time
from pathlib import Path

from hostfetch.utils.process import COMMAND_TIMEOUT, first_line, run_command

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"\d+\.\d+(\.\d+)?")

# Package managers probed for the package count, in display order.
# Each command prints one line per installed package.
PACKAGE_MANAGERS = [
    ("dpkg", ["dpkg-query", "-f", ".\n", "-W"]),
    ("rpm", ["rpm", "-qa"]),
    ("pacman", ["pacman", "-Qq"]),
    ("apk", ["apk", "info"]),
    ("brew", ["brew", "list", "--formula"]),
]


def get_hostname() -> str:
    try:
        return socket.gethostname()
    except Exception as e:
        logger.debug(f"Hostname lookup failed: {e}")
        return ""


def get_username() -> str:
    try:
        return getpass.getuser()
    except Exception as e:
        logger.debug(f"Username lookup failed: {e}")
        return ""


def format_uptime(seconds: float) -> str:
    """Format a duration as ``D days, H hours, M mins``.

    Zero day and hour parts are omitted. Minutes are always shown when
    nothing else is, so a fresh boot reads ``0 mins``.
    """
    total = max(int(seconds), 0)
    days = total // 86400
    hours = (total % 86400) // 3600
    minutes = (total % 3600) // 60

    parts = []
    if days > 0:
        parts.append(f"{days} day{'' if days == 1 else 's'}")
    if hours > 0:
        parts.append(f"{hours} hour{'' if hours == 1 else 's'}")
    if minutes > 0 or not parts:
        parts.append(f"{minutes} min{'' if minutes == 1 else 's'}")
    return ", ".join(parts)


def get_uptime() -> str:
    """Time since boot, human readable."""
    try:
        import psutil

        return format_uptime(time.time() - psutil.boot_time())
    except Exception as e:
        logger.debug(f"Uptime detection failed: {e}")
        return ""


def _count_lines(output: str | None) -> int:
    if not output:
        return 0
    return sum(1 for line in output.splitlines() if line.strip())


def get_packages(timeout: float = COMMAND_TIMEOUT) -> str:
    """Count installed packages per available package manager.

    Returns e.g. ``"1873 (dpkg), 42 (brew)"``; managers that are missing
    or report nothing are left out.
    """
    counts = []
    for name, command in PACKAGE_MANAGERS:
        count = _count_lines(run_command(command, timeout=timeout))
        if count > 0:
            counts.append(f"{count} ({name})")
    return ", ".join(counts)


def parse_shell_version(output: str | None) -> str:
    """Extract a dotted version number from the first line of ``--version`` output."""
    line = first_line(output)
    match = _VERSION_RE.search(line)
    return match.group(0) if match else ""


def get_shell(timeout: float = COMMAND_TIMEOUT) -> str:
    """Login shell name with its version when the shell reports one."""
    shell_path = os.environ.get("SHELL", "")
    if not shell_path:
        return ""

    shell_name = Path(shell_path).name
    version = parse_shell_version(run_command([shell_path, "--version"], timeout=timeout))
    if version:
        return f"{shell_name} {version}"
    return shell_name


def get_resolution(timeout: float = COMMAND_TIMEOUT) -> str:
    """Main display resolution as ``WIDTHxHEIGHT``."""
    if platform.system() == "Darwin":
        output = run_command(["system_profiler", "SPDisplaysDataType"], timeout=timeout)
        for line in (output or "").splitlines():
            # "Resolution: 3024 x 1964 Retina"
            match = re.search(r"Resolution:\s*(\d+)\s*x\s*(\d+)", line)
            if match:
                return f"{match.group(1)}x{match.group(2)}"
        return ""

    if not (os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")):
        return ""

    output = run_command(["xrandr", "--current"], timeout=timeout)
    for line in (output or "").splitlines():
        # "Screen 0: minimum 320 x 200, current 1920 x 1080, maximum 16384 x 16384"
        match = re.search(r"current\s+(\d+)\s*x\s*(\d+)", line)
        if match:
            return f"{match.group(1)}x{match.group(2)}"
    return ""


def get_desktop_environment() -> str:
    if platform.system() == "Darwin":
        return "Aqua"
    desktop = os.environ.get("XDG_CURRENT_DESKTOP") or os.environ.get("DESKTOP_SESSION", "")
    # XDG_CURRENT_DESKTOP may be a colon-separated list, e.g. "ubuntu:GNOME"
    return desktop.split(":")[-1].strip()


def get_window_manager(timeout: float = COMMAND_TIMEOUT) -> str:
    if platform.system() == "Darwin":
        return "Quartz Compositor"

    if not (os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")):
        return ""

    output = run_command(["wmctrl", "-m"], timeout=timeout)
    for line in (output or "").splitlines():
        if line.startswith("Name:"):
            return line.split(":", 1)[1].strip()
    return ""


def get_wm_theme(timeout: float = COMMAND_TIMEOUT) -> str:
    """Window manager theme.

    macOS: ``Blue (Dark)`` or ``Blue (Light)``. The AppleInterfaceStyle key
    only exists in dark mode, so a failed read means light mode.
    Linux: the GTK theme name from gsettings.
    """
    if platform.system() == "Darwin":
        output = run_command(["defaults", "read", "-g", "AppleInterfaceStyle"], timeout=timeout)
        if (output or "").strip().lower() == "dark":
            return "Blue (Dark)"
        return "Blue (Light)"

    output = run_command(
        ["gsettings", "get", "org.gnome.desktop.interface", "gtk-theme"],
        timeout=timeout,
    )
    return first_line(output).strip("'\"")


def get_terminal() -> str:
    """Terminal application name, from TERM_PROGRAM or the parent process."""
    term_program = os.environ.get("TERM_PROGRAM", "")
    if term_program:
        return term_program

    try:
        import psutil

        return Path(psutil.Process(os.getppid()).name()).name
    except Exception as e:
        logger.debug(f"Parent process lookup failed: {e}")
        return ""


def get_terminal_font() -> str:
    """Terminal font or profile, where the terminal exposes one.

    Most terminals do not publish their font; iTerm2 exports its profile.
    """
    return os.environ.get("ITERM_PROFILE", "")
