"""
CLI context.

Exit codes and the mapping from decode outcome to exit status.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # Decoded (strict mode: decoded cleanly)
    ERROR = 1  # Strict mode: best decoding still looks garbled
    FATAL = 2  # Input could not be read
    USAGE = 64  # Command line usage error
    CONFIG = 78  # Candidate table invalid


def get_exit_code(penalty: int, strict: bool) -> ExitCode:
    """Determine exit code based on the winning penalty and --strict."""
    if strict and penalty > 0:
        return ExitCode.ERROR
    return ExitCode.SUCCESS
