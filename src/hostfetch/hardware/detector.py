"""Individual hardware and OS detection functions with fallbacks.

Every ``detect_*`` function returns a string and never raises: an empty
string means the value could not be determined on this machine.
"""

import logging
import platform
import re
from pathlib import Path

from hostfetch.utils.process import COMMAND_TIMEOUT, first_line, run_command

logger = logging.getLogger(__name__)

MIB = 1024**2
GIB = 1024**3


def _os_release() -> dict[str, str]:
    """Return /etc/os-release fields, or an empty dict when unavailable."""
    try:
        return platform.freedesktop_os_release()
    except (OSError, AttributeError) as e:
        logger.debug(f"os-release unavailable: {e}")
        return {}


def detect_os_name() -> str:
    """Detect the operating system name (distribution name on Linux)."""
    try:
        system = platform.system()
        if system == "Darwin":
            return "macOS"
        if system == "Linux":
            name = _os_release().get("NAME", "")
            if name:
                return name
        return system
    except Exception as e:
        logger.debug(f"OS name detection failed: {e}")
        return ""


def detect_os_version() -> str:
    """Detect the operating system version number."""
    try:
        system = platform.system()
        if system == "Darwin":
            return platform.mac_ver()[0]
        if system == "Linux":
            return _os_release().get("VERSION_ID", "")
        if system == "Windows":
            return platform.version()
    except Exception as e:
        logger.debug(f"OS version detection failed: {e}")
    return ""


def detect_os_build(timeout: float = COMMAND_TIMEOUT) -> str:
    """Detect the OS build identifier (e.g. 23C71 on macOS)."""
    try:
        system = platform.system()
        if system == "Darwin":
            return first_line(run_command(["sw_vers", "-buildVersion"], timeout=timeout))
        if system == "Linux":
            release = _os_release()
            return release.get("BUILD_ID", "") or release.get("VERSION_CODENAME", "")
    except Exception as e:
        logger.debug(f"OS build detection failed: {e}")
    return ""


def detect_architecture() -> str:
    """Detect the CPU architecture (e.g. x86_64, arm64)."""
    try:
        return platform.machine()
    except Exception as e:
        logger.debug(f"Architecture detection failed: {e}")
        return ""


def detect_kernel() -> str:
    """Detect the kernel release string."""
    try:
        return platform.release()
    except Exception as e:
        logger.debug(f"Kernel detection failed: {e}")
        return ""


def detect_host_model(timeout: float = COMMAND_TIMEOUT) -> str:
    """Detect the machine model identifier.

    Linux: DMI product name, then the device-tree model (ARM boards).
    macOS: ``sysctl hw.model`` (e.g. Mac15,11).
    """
    system = platform.system()

    if system == "Darwin":
        return first_line(run_command(["sysctl", "-n", "hw.model"], timeout=timeout))

    if system == "Linux":
        candidates = [
            Path("/sys/devices/virtual/dmi/id/product_name"),
            Path("/sys/firmware/devicetree/base/model"),
        ]
        for path in candidates:
            try:
                model = path.read_text().replace("\x00", "").strip()
                if model and model.lower() not in ("to be filled by o.e.m.", "system product name"):
                    return model
            except Exception as e:
                logger.debug(f"Host model read failed for {path}: {e}")

    return ""


def detect_cpu_model() -> str:
    """Detect the CPU brand string."""
    try:
        import cpuinfo

        return cpuinfo.get_cpu_info().get("brand_raw", "").strip()
    except Exception as e:
        logger.debug(f"CPU model detection failed: {e}")
        return ""


def format_core_count(physical: int | None, logical: int | None) -> str:
    """Format core counts as ``N cores`` or ``P physical / L logical``."""
    if not physical or not logical:
        return ""
    if physical == logical:
        return f"{physical} core{'' if physical == 1 else 's'}"
    return f"{physical} physical / {logical} logical"


def detect_cpu_cores() -> str:
    """Detect physical and logical core counts."""
    try:
        import psutil

        return format_core_count(
            psutil.cpu_count(logical=False),
            psutil.cpu_count(logical=True),
        )
    except Exception as e:
        logger.debug(f"CPU core detection failed: {e}")
        return ""


def detect_gpu_model(timeout: float = COMMAND_TIMEOUT) -> str:
    """Detect the primary GPU model with multiple fallback methods.

    Linux: pynvml, nvidia-smi, then lspci.
    macOS: system_profiler.
    """
    system = platform.system()

    if system == "Darwin":
        output = run_command(["system_profiler", "SPDisplaysDataType"], timeout=timeout)
        for line in (output or "").splitlines():
            if "Chipset Model:" in line or "Graphics:" in line:
                model = line.split(":", 1)[1].strip()
                if model:
                    return model
        return ""

    # Method 1: pynvml
    try:
        import pynvml

        pynvml.nvmlInit()
        try:
            if pynvml.nvmlDeviceGetCount() > 0:
                name = pynvml.nvmlDeviceGetName(pynvml.nvmlDeviceGetHandleByIndex(0))
                if isinstance(name, bytes):
                    name = name.decode("utf-8")
                return name
        finally:
            pynvml.nvmlShutdown()
    except Exception as e:
        logger.debug(f"pynvml detection failed: {e}")

    # Method 2: nvidia-smi
    name = first_line(
        run_command(["nvidia-smi", "--query-gpu=name", "--format=csv,noheader"], timeout=timeout)
    )
    if name:
        return name

    # Method 3: lspci
    output = run_command(["lspci"], timeout=timeout)
    for line in (output or "").splitlines():
        if any(kind in line for kind in ("VGA compatible controller", "3D controller", "Display controller")):
            # "00:02.0 VGA compatible controller: Intel Corporation UHD Graphics 620 (rev 07)"
            model = line.split(":", 2)[-1].strip()
            return re.sub(r"\s*\(rev [0-9a-f]+\)$", "", model)

    return ""


def detect_memory_used() -> str:
    """Detect used memory in MiB (total minus available)."""
    try:
        import psutil

        mem = psutil.virtual_memory()
        return str((mem.total - mem.available) // MIB)
    except Exception as e:
        logger.debug(f"Memory usage detection failed: {e}")
        return ""


def detect_memory_total() -> str:
    """Detect total memory in MiB."""
    try:
        import psutil

        return str(psutil.virtual_memory().total // MIB)
    except Exception as e:
        logger.debug(f"Memory total detection failed: {e}")
        return ""


def _load_average(index: int) -> str:
    try:
        import psutil

        return f"{psutil.getloadavg()[index]:.2f}"
    except Exception as e:
        logger.debug(f"Load average detection failed: {e}")
        return ""


def detect_load_average_1() -> str:
    return _load_average(0)


def detect_load_average_5() -> str:
    return _load_average(1)


def detect_load_average_15() -> str:
    return _load_average(2)


def detect_disk_used() -> str:
    """Detect used space on the root volume in GiB."""
    try:
        import psutil

        usage = psutil.disk_usage("/")
        return f"{(usage.total - usage.free) / GIB:.2f}"
    except Exception as e:
        logger.debug(f"Disk usage detection failed: {e}")
        return ""


def detect_disk_free() -> str:
    """Detect free space on the root volume in GiB."""
    try:
        import psutil

        return f"{psutil.disk_usage('/').free / GIB:.2f}"
    except Exception as e:
        logger.debug(f"Disk free detection failed: {e}")
        return ""


def detect_disk_encryption(timeout: float = COMMAND_TIMEOUT) -> str:
    """Detect whether disk encryption is enabled.

    Returns "Enabled", "Disabled", or "" when the status cannot be read
    (for example when fdesetup needs elevated privileges).
    """
    system = platform.system()

    if system == "Darwin":
        output = run_command(["fdesetup", "status"], timeout=timeout)
        status = (output or "").strip().lower()
        if "filevault is on" in status or "encryption in progress" in status:
            return "Enabled"
        if "filevault is off" in status:
            return "Disabled"
        return ""

    if system == "Linux":
        output = run_command(["lsblk", "-n", "-o", "TYPE"], timeout=timeout)
        if output is None:
            return ""
        types = {line.strip() for line in output.splitlines()}
        return "Enabled" if "crypt" in types else "Disabled"

    return ""


def detect_battery_charge() -> str:
    """Detect battery charge as ``N%``; empty when there is no battery."""
    try:
        import psutil

        battery = psutil.sensors_battery()
        if battery is None:
            return ""
        return f"{round(battery.percent)}%"
    except Exception as e:
        logger.debug(f"Battery detection failed: {e}")
        return ""
