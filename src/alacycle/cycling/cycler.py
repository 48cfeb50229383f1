#!/usr/bin/env python3
"""
ALACYCLE SCHEME CYCLER - Phases 2-4 (Locate, Advance, Substitute)
-----------------------------------------------------------------
Finds the `colors: *<anchor>` line, picks the anchor that follows it in
declaration order (wrapping after the last) and writes a fresh
reference line at the same index of a copy of the document.

Author: Alacycle Team
Date: 2026-10-19
"""

from typing import List, Optional, Pattern, Sequence, Tuple

from alacycle.core.errors import AnchorNotInCatalog, NoActiveSchemeFound
from alacycle.core.models import ActiveReference
from alacycle.core.settings import REFERENCE_PATTERN

REFERENCE_TEMPLATE = "colors: *{}"


def render_reference(anchor: str) -> str:
    """The replacement line. Indentation of the old line is not carried over."""
    return REFERENCE_TEMPLATE.format(anchor)


def find_active_reference(lines: Sequence[str],
                          pattern: Pattern = REFERENCE_PATTERN) -> ActiveReference:
    """
    Scans every line; each match replaces the previous one, so the last
    reference in the file is the active one. Commented-out or stale
    references above it are tolerated that way.
    """
    found: Optional[ActiveReference] = None
    for i, line in enumerate(lines):
        for match in pattern.finditer(line):
            found = ActiveReference(index=i, anchor=match.group(1), line=line)

    if found is None:
        raise NoActiveSchemeFound()
    return found


def next_anchor(anchors: Sequence[str], current: str, line: str = "") -> str:
    """
    Successor of the first occurrence of `current`, wrapping to the start.
    A single-anchor list cycles back to itself.
    """
    try:
        position = list(anchors).index(current)
    except ValueError:
        raise AnchorNotInCatalog(current, line) from None
    return anchors[(position + 1) % len(anchors)]


def apply_substitution(lines: Sequence[str], reference: ActiveReference,
                       new_anchor: str) -> List[str]:
    """Returns a copy of `lines` with only `reference.index` replaced."""
    updated = list(lines)
    updated[reference.index] = render_reference(new_anchor)
    return updated


class SchemeCycler:
    """
    Bundles the three line-level phases behind one call.
    The pattern is injectable so other reference syntaxes can be tried.
    """

    def __init__(self, pattern: Pattern = REFERENCE_PATTERN):
        self.pattern = pattern

    def locate(self, lines: Sequence[str]) -> ActiveReference:
        return find_active_reference(lines, self.pattern)

    def advance(self, anchors: Sequence[str], reference: ActiveReference) -> str:
        return next_anchor(anchors, reference.anchor, reference.line)

    def cycle(self, lines: Sequence[str],
              anchors: Sequence[str]) -> Tuple[ActiveReference, str, List[str]]:
        reference = self.locate(lines)
        successor = self.advance(anchors, reference)
        return reference, successor, apply_substitution(lines, reference, successor)
