#!/usr/bin/env python3
"""
ALACYCLE CORE MODELS
--------------------
Defines the small data structures shared by the catalog, the cycler
and the engine, plus the line helpers that turn config text into the
line sequence the cycler works on and back again.

Author: Alacycle Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ActiveReference:
    """
    The line that currently selects a color scheme.

    Computed as plain data during the scan; the substitution step uses
    the index to write the replacement into a copy of the lines.
    """
    index: int              # Zero-based position in the line sequence
    anchor: str             # The anchor name captured from the line
    line: str = ""          # The original line content, for diagnostics

    @property
    def line_no(self) -> int:
        """1-based line number for user-facing output."""
        return self.index + 1


def split_lines(text: str) -> List[str]:
    """
    Splits config text into lines without terminators.
    Only '\\n' separates lines; a trailing '\\r' is dropped (CRLF files)
    and a final newline does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def join_lines(lines: List[str]) -> str:
    """Reassembles lines with '\\n' and a single trailing newline."""
    return "\n".join(lines) + "\n"
