"""
Process enumeration.

Runs platform listing commands and decodes their console output with the
decoding core before parsing it.
"""

from __future__ import annotations

from .listing import (
    get_windows_process_name_by_pid,
    list_running_process_names,
    list_windows_process_paths,
)
from .parsers import (
    parse_powershell_process_paths,
    parse_ps_names,
    parse_tasklist_first_name,
    parse_tasklist_names,
    parse_wmic_process_paths,
    parse_wmic_value,
)

__all__ = [
    "get_windows_process_name_by_pid",
    "list_running_process_names",
    "list_windows_process_paths",
    "parse_powershell_process_paths",
    "parse_ps_names",
    "parse_tasklist_first_name",
    "parse_tasklist_names",
    "parse_wmic_process_paths",
    "parse_wmic_value",
]
