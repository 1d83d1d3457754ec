"""Shared infrastructure: the stdin handle and line reading."""

from __future__ import annotations

from cinputs.core.stream import get_stdin, read_line, reset_stdin, strip_line_terminator

__all__ = [
    "get_stdin",
    "read_line",
    "reset_stdin",
    "strip_line_terminator",
]
