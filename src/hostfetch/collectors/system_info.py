"""System information collection."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from functools import partial

from hostfetch.collectors import environment
from hostfetch.hardware import detector
from hostfetch.utils.process import COMMAND_TIMEOUT

logger = logging.getLogger(__name__)

FALLBACK = "Unknown"
NOT_APPLICABLE = "N/A"

# Fields whose absence is normal on some machines rather than a failure
FIELD_FALLBACKS = {
    "battery_charge": NOT_APPLICABLE,
}

FieldSource = Callable[[], str]


@dataclass(frozen=True)
class SystemInfo:
    """Snapshot of system state at time of collection.

    Every field is a non-empty string: real data or a fallback token.
    """

    os_name: str
    os_version: str
    os_build: str
    architecture: str
    host_model: str
    hostname: str
    username: str
    kernel: str
    uptime: str
    packages: str
    shell: str
    resolution: str
    de: str
    wm: str
    wm_theme: str
    terminal: str
    terminal_font: str
    cpu_model: str
    cpu_cores: str
    gpu_model: str
    memory_used: str
    memory_total: str
    load_average_1: str
    load_average_5: str
    load_average_15: str
    disk_used: str
    disk_free: str
    disk_encryption: str
    battery_charge: str

    @property
    def is_empty(self) -> bool:
        """True when none of the identifying fields could be collected."""
        return all(
            getattr(self, name) in (FALLBACK, NOT_APPLICABLE)
            for name in ("os_name", "os_version", "hostname", "username")
        )

    def fields(self) -> list[tuple[str, str]]:
        """Return ``(field_name, value)`` pairs in declaration order."""
        return [(f.name, getattr(self, f.name)) for f in fields(self)]


FIELD_NAMES = tuple(f.name for f in fields(SystemInfo))


def default_sources(timeout: float = COMMAND_TIMEOUT) -> dict[str, FieldSource]:
    """Map every SystemInfo field to its retrieval function.

    Args:
        timeout: Seconds allowed for each helper command.
    """
    return {
        "os_name": detector.detect_os_name,
        "os_version": detector.detect_os_version,
        "os_build": partial(detector.detect_os_build, timeout=timeout),
        "architecture": detector.detect_architecture,
        "host_model": partial(detector.detect_host_model, timeout=timeout),
        "hostname": environment.get_hostname,
        "username": environment.get_username,
        "kernel": detector.detect_kernel,
        "uptime": environment.get_uptime,
        "packages": partial(environment.get_packages, timeout=timeout),
        "shell": partial(environment.get_shell, timeout=timeout),
        "resolution": partial(environment.get_resolution, timeout=timeout),
        "de": environment.get_desktop_environment,
        "wm": partial(environment.get_window_manager, timeout=timeout),
        "wm_theme": partial(environment.get_wm_theme, timeout=timeout),
        "terminal": environment.get_terminal,
        "terminal_font": environment.get_terminal_font,
        "cpu_model": detector.detect_cpu_model,
        "cpu_cores": detector.detect_cpu_cores,
        "gpu_model": partial(detector.detect_gpu_model, timeout=timeout),
        "memory_used": detector.detect_memory_used,
        "memory_total": detector.detect_memory_total,
        "load_average_1": detector.detect_load_average_1,
        "load_average_5": detector.detect_load_average_5,
        "load_average_15": detector.detect_load_average_15,
        "disk_used": detector.detect_disk_used,
        "disk_free": detector.detect_disk_free,
        "disk_encryption": partial(detector.detect_disk_encryption, timeout=timeout),
        "battery_charge": detector.detect_battery_charge,
    }


class SystemInfoCollector:
    """Collect a SystemInfo snapshot from independent field sources."""

    def __init__(
        self,
        sources: Mapping[str, FieldSource] | None = None,
        timeout: float = COMMAND_TIMEOUT,
    ):
        """
        Args:
            sources: Overrides for individual fields, keyed by field name.
                Fields not listed use the default retrieval functions.
            timeout: Seconds allowed for each helper command.

        Raises:
            ValueError: If ``sources`` names a field SystemInfo does not have.
        """
        overrides = dict(sources or {})
        unknown = sorted(set(overrides) - set(FIELD_NAMES))
        if unknown:
            raise ValueError(f"Unknown SystemInfo fields: {', '.join(unknown)}")

        self.sources = default_sources(timeout)
        self.sources.update(overrides)

    def fetch(self, name: str) -> str:
        """Run one field's source; any failure yields an empty string."""
        try:
            value = self.sources[name]()
        except Exception as e:
            logger.debug(f"Source for {name} raised: {e}")
            return ""
        if not isinstance(value, str):
            logger.debug(f"Source for {name} returned {type(value).__name__}, expected str")
            return ""
        return value.strip()

    def collect_all(self) -> SystemInfo:
        """Collect every field, substituting fallbacks for failures.

        Returns:
            SystemInfo with every field populated.
        """
        values = {}
        for name in FIELD_NAMES:
            value = self.fetch(name)
            if not value:
                value = FIELD_FALLBACKS.get(name, FALLBACK)
                logger.debug(f"No value for {name}, using {value!r}")
            values[name] = value
        return SystemInfo(**values)


def collect_all(timeout: float = COMMAND_TIMEOUT) -> SystemInfo:
    """Collect current system information.

    Returns:
        SystemInfo with current system state.
    """
    return SystemInfoCollector(timeout=timeout).collect_all()
