"""
Output adapter base classes.

Defines the interface for output adapters.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from autodecode.core.decoding.models import CandidateTable, DecodeResult


class OutputFormat(Enum):
    """Supported output formats."""

    TERMINAL = "terminal"
    JSON = "json"


class OutputAdapter(ABC):
    """Base class for output adapters."""

    format: OutputFormat

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        self.stream = stream or sys.stdout
        self.color = color

    @abstractmethod
    def render_result(
        self,
        result: DecodeResult,
        *,
        explain: bool = False,
        reference: str | None = None,
    ) -> str:
        """Render a decode result to string."""
        pass

    @abstractmethod
    def render_candidates(self, table: CandidateTable) -> str:
        """Render the candidate table to string."""
        pass


def get_output_adapter(
    format: OutputFormat | str,
    stream: TextIO | None = None,
    color: bool = True,
) -> OutputAdapter:
    """Get an output adapter by format."""
    if isinstance(format, str):
        format = OutputFormat(format)

    if format == OutputFormat.TERMINAL:
        from autodecode.cli.output.terminal import TerminalOutput

        return TerminalOutput(stream=stream, color=color)
    elif format == OutputFormat.JSON:
        from autodecode.cli.output.json import JsonOutput

        return JsonOutput(stream=stream)
    else:
        raise ValueError(f"Unknown output format: {format}")
