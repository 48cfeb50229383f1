#!/usr/bin/env python3
"""
ALACYCLE CYCLE PIPELINE
-----------------------
Runs the stages in a fixed order: Parse -> Locate -> Advance -> Substitute.
No retries and no partial results: any stage error propagates to the
caller with the context left as far as it got.

Author: Alacycle Team
Date: 2026-10-19
"""

import logging
from typing import Pattern

from alacycle.core.models import split_lines
from alacycle.core.settings import REFERENCE_PATTERN
from alacycle.cycling.catalog import extract_anchors
from alacycle.cycling.context import CycleContext
from alacycle.cycling.cycler import SchemeCycler, apply_substitution

logger = logging.getLogger("alacycle.pipeline")


class CyclePipeline:

    def __init__(self, pattern: Pattern = REFERENCE_PATTERN):
        self.cycler = SchemeCycler(pattern)

    def inspect(self, input_text: str) -> CycleContext:
        """Parse and Locate only. Used by the read-only commands."""
        context = CycleContext(raw_text=input_text, lines=split_lines(input_text))

        # --- PHASE 1: PARSE ---
        context.anchors = extract_anchors(input_text)
        logger.debug("Discovered %d anchors: %s", len(context.anchors), context.anchors)

        # --- PHASE 2: LOCATE ---
        context.reference = self.cycler.locate(context.lines)
        logger.debug("Active reference `%s` on line %d",
                     context.reference.anchor, context.reference.line_no)
        return context

    def run(self, input_text: str) -> CycleContext:
        context = self.inspect(input_text)

        # --- PHASE 3: ADVANCE ---
        context.next_anchor = self.cycler.advance(context.anchors, context.reference)

        # --- PHASE 4: SUBSTITUTE ---
        context.new_lines = apply_substitution(context.lines, context.reference, context.next_anchor)
        logger.debug("Cycling %s -> %s", context.reference.anchor, context.next_anchor)
        return context
