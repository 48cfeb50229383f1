#!/usr/bin/env python3
"""
ALACYCLE ERRORS - Failure Taxonomy
----------------------------------
Every stage of the cycle either hands its result to the next stage or
aborts with one of these. The CLI maps them to a non-zero exit status;
the config file is never touched once one has been raised.

Author: Alacycle Team
Date: 2026-10-19
"""

from pathlib import Path
from typing import Iterable


class AlacycleError(Exception):
    """Base class for all alacycle failures."""

    kind = "AlacycleError"


class MalformedDocument(AlacycleError):
    """The config text is not valid YAML. Carries the parser's message verbatim."""

    kind = "MalformedDocument"


class NoActiveSchemeFound(AlacycleError):
    kind = "NoActiveSchemeFound"

    def __init__(self, message: str = "Could not find set colorscheme inside config"):
        super().__init__(message)


class AnchorNotInCatalog(AlacycleError):
    """
    The reference line names an anchor the document never declares.
    The offending line is part of the message to help the user find it.
    """

    kind = "AnchorNotInCatalog"

    def __init__(self, anchor: str, line: str = ""):
        self.anchor = anchor
        self.line = line
        detail = line if line else anchor
        super().__init__(f"Anchor `{anchor}` not found (reference line: `{detail}`)")


class ConfigFileNotFound(AlacycleError):
    kind = "ConfigFileNotFound"

    def __init__(self, searched: Iterable[Path] = ()):
        self.searched = [Path(p) for p in searched]
        message = "Could not find config file"
        if self.searched:
            message += " (searched: " + ", ".join(str(p) for p in self.searched) + ")"
        super().__init__(message)
