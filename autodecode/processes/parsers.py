"""
Parsers for process listing command output.

All functions take already-decoded text and never raise on malformed input:
unrecognized lines are skipped.

Supported formats:
- tasklist /FO CSV /NH      -> "name","pid","session",...
- wmic ... /VALUE           -> Key=Value records separated by blank lines
- PowerShell ConvertTo-Json -> object or array of {Name, ExecutablePath}
- ps -A -o comm=            -> one command name per line
"""

from __future__ import annotations

import json
import re
from typing import Any

_NEWLINE = re.compile(r"\r?\n")


def _lines(stdout: str) -> list[str]:
    """Split output into trimmed lines (handles both \\r\\n and \\n)."""
    return [line.strip() for line in _NEWLINE.split(stdout)]


def _split_key_value(line: str) -> tuple[str, str] | None:
    """Split a wmic 'Key=Value' line. Values may contain '='."""
    key_raw, _, value = line.partition("=")
    if not key_raw:
        return None
    return key_raw.strip().lower(), value.strip()


def parse_tasklist_names(stdout: str) -> list[str]:
    """
    Extract image names from tasklist output.

    Quoted CSV lines yield the first field; anything else yields the first
    whitespace-separated token.
    """
    names: list[str] = []
    for line in _lines(stdout):
        if not line:
            continue
        if line.startswith('"'):
            trimmed = line[1:-1] if len(line) >= 2 else line
            name = trimmed.split('","')[0]
        else:
            name = line.split()[0]
        if name:
            names.append(name)
    return names


def parse_tasklist_first_name(stdout: str) -> str:
    """Get the first image name from tasklist output, or ''."""
    names = parse_tasklist_names(stdout)
    return names[0] if names else ""


def parse_wmic_process_paths(stdout: str) -> dict[str, str]:
    """
    Map process names to executable paths from wmic /VALUE output.

    A record contributes only if it has both Name and ExecutablePath.
    The first path seen for a name wins.
    """
    paths: dict[str, str] = {}
    name = ""
    path = ""

    def flush() -> None:
        nonlocal name, path
        if name and path and name not in paths:
            paths[name] = path
        name = ""
        path = ""

    for line in _lines(stdout):
        if not line:
            flush()
            continue
        pair = _split_key_value(line)
        if pair is None:
            continue
        key, value = pair
        if key == "name":
            name = value
        elif key == "executablepath":
            path = value

    flush()
    return paths


def parse_wmic_value(stdout: str, key_name: str) -> str:
    """Get the value of key_name (case-insensitive) from wmic /VALUE output; last wins."""
    result = ""
    wanted = key_name.lower()
    for line in _lines(stdout):
        if not line:
            continue
        pair = _split_key_value(line)
        if pair is not None and pair[0] == wanted:
            result = pair[1]
    return result


def parse_powershell_process_paths(stdout: str) -> dict[str, str]:
    """
    Map process names to executable paths from PowerShell JSON output.

    ConvertTo-Json emits a bare object for a single process and an array
    otherwise. ExecutablePath is preferred, Path is the fallback.
    """
    paths: dict[str, str] = {}
    trimmed = stdout.strip()
    if not trimmed:
        return paths

    try:
        data: Any = json.loads(trimmed)
    except ValueError:
        return paths

    items = data if isinstance(data, list) else [data]
    for item in items:
        if not isinstance(item, dict):
            continue
        name = item.get("Name") if isinstance(item.get("Name"), str) else ""
        if isinstance(item.get("ExecutablePath"), str):
            file_path = item["ExecutablePath"]
        elif isinstance(item.get("Path"), str):
            file_path = item["Path"]
        else:
            file_path = ""
        if name and file_path and name not in paths:
            paths[name] = file_path

    return paths


def parse_ps_names(stdout: str) -> list[str]:
    """Get command names from `ps -A -o comm=` output."""
    return [line for line in _lines(stdout) if line]
