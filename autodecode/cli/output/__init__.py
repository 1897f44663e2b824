"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from autodecode.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from autodecode.cli.output.json import JsonOutput
from autodecode.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
