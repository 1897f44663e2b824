"""
CLI for autodecode.

Command-line interface for decoding console output of unknown encoding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from autodecode.cli.context import ExitCode

if TYPE_CHECKING:
    from typer import Typer

    app: Typer


def __getattr__(name: str) -> Any:
    if name == "app":
        from autodecode.cli.main import app as _app

        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ExitCode",
    "app",
]
