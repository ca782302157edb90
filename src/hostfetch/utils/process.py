"""Helper command execution with bounded runtime."""

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)

# Seconds a single helper command may run before it is abandoned
COMMAND_TIMEOUT = 5.0


def run_command(args: list[str], timeout: float = COMMAND_TIMEOUT) -> str | None:
    """Run a helper command and return its stdout.

    Args:
        args: Command and arguments. The executable is resolved on PATH
            unless given as an absolute path.
        timeout: Seconds to wait before giving up.

    Returns:
        Captured stdout, or None if the executable is missing, the
        command fails to start, times out, or exits non-zero.
    """
    if not args or shutil.which(args[0]) is None:
        logger.debug(f"Command not available: {args[:1]}")
        return None

    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.debug(f"Command timed out after {timeout}s: {' '.join(args)}")
        return None
    except (OSError, ValueError) as e:
        logger.debug(f"Command failed to start: {' '.join(args)}: {e}")
        return None

    if result.returncode != 0:
        stderr = result.stderr.strip() if result.stderr else ""
        logger.debug(
            f"Command exited {result.returncode}: {' '.join(args)}"
            + (f" ({stderr})" if stderr else "")
        )
        return None

    return result.stdout


def first_line(output: str | None) -> str:
    """Return the first non-blank line of command output, stripped."""
    if not output:
        return ""
    for line in output.splitlines():
        if line.strip():
            return line.strip()
    return ""
