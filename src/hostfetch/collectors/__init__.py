"""System information collection."""

from .system_info import (
    FALLBACK,
    NOT_APPLICABLE,
    SystemInfo,
    SystemInfoCollector,
    collect_all,
)

__all__ = [
    "FALLBACK",
    "NOT_APPLICABLE",
    "SystemInfo",
    "SystemInfoCollector",
    "collect_all",
]
