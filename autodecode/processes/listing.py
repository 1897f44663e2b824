"""
Process enumeration through platform listing commands.

Command output is captured as raw bytes and decoded with auto_decode_text,
because tasklist and wmic write in the console code page (or UTF-16LE) of
whatever locale Windows is running in.

Every function degrades to an empty result when the commands are missing,
blocked or fail; failures are logged at DEBUG.
"""

from __future__ import annotations

import logging
import subprocess
import sys

from autodecode.core.decoding import auto_decode_text

from .parsers import (
    parse_powershell_process_paths,
    parse_ps_names,
    parse_tasklist_first_name,
    parse_tasklist_names,
    parse_wmic_process_paths,
    parse_wmic_value,
)

logger = logging.getLogger(__name__)

POWERSHELL_PROCESS_QUERY = (
    "Get-CimInstance Win32_Process | Select-Object -Property Name,ExecutablePath"
    " | ConvertTo-Json -Compress -Depth 2"
)


def _run(args: list[str]) -> bytes:
    """
    Run a command and return its raw stdout.

    Raises:
        OSError: If the command cannot be started
        subprocess.SubprocessError: If it exits non-zero
    """
    completed = subprocess.run(
        args,
        capture_output=True,
        check=True,
        creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0),
    )
    return completed.stdout


def _list_windows_names() -> list[str]:
    stdout = _run(["tasklist", "/FO", "CSV", "/NH"])
    decoded = auto_decode_text(stdout)
    if not decoded:
        return []
    return parse_tasklist_names(decoded)


def _list_unix_names() -> list[str]:
    stdout = _run(["ps", "-A", "-o", "comm="])
    return parse_ps_names(stdout.decode("utf-8", errors="replace"))


def list_running_process_names() -> list[str]:
    """
    List the names of running processes.

    Names are trimmed, blanks dropped and duplicates removed, keeping the
    order in which they were first seen.

    Returns:
        Process names, or [] if the listing command failed
    """
    try:
        if sys.platform == "win32":
            names = _list_windows_names()
        else:
            names = _list_unix_names()
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Process listing failed: %s", e)
        return []

    return list(dict.fromkeys(name.strip() for name in names if name.strip()))


def list_windows_process_paths() -> dict[str, str]:
    """
    Map running process names to executable paths (Windows).

    Tries wmic first and falls back to PowerShell when wmic is missing,
    blocked, or produces nothing usable.

    Returns:
        Mapping of process name to executable path, or {} on failure
    """
    try:
        stdout = _run(["wmic", "process", "get", "Name,ExecutablePath", "/VALUE"])
        decoded = auto_decode_text(stdout) or ""
        if decoded:
            paths = parse_wmic_process_paths(decoded)
            if paths:
                return paths
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("wmic failed, falling back to PowerShell: %s", e)

    try:
        stdout = _run(["powershell", "-NoProfile", "-Command", POWERSHELL_PROCESS_QUERY])
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("PowerShell process query failed: %s", e)
        return {}

    return parse_powershell_process_paths(stdout.decode("utf-8", errors="replace"))


def get_windows_process_name_by_pid(pid: int) -> str:
    """
    Look up the image name of a process by PID (Windows).

    Tries wmic first and falls back to tasklist.

    Returns:
        Image name, or '' if pid is not positive or nothing was found
    """
    if pid <= 0:
        return ""

    try:
        stdout = _run(["wmic", "process", "where", f"processid={pid}", "get", "Name", "/VALUE"])
        decoded = auto_decode_text(stdout) or ""
        if decoded:
            name = parse_wmic_value(decoded, "Name")
            if name:
                return name
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("wmic lookup for pid %d failed, falling back to tasklist: %s", pid, e)

    try:
        stdout = _run(["tasklist", "/FO", "CSV", "/NH", "/FI", f"PID eq {pid}"])
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("tasklist lookup for pid %d failed: %s", pid, e)
        return ""

    decoded = auto_decode_text(stdout) or ""
    if not decoded:
        return ""
    return parse_tasklist_first_name(decoded)
