#!/usr/bin/env python3
"""
ALACYCLE CYCLE CONTEXT
----------------------
The record of a single cycle run. Initialized by the CyclePipeline and
filled in stage by stage.

Author: Alacycle Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import List, Optional
from alacycle.core.models import ActiveReference


@dataclass
class CycleContext:
    raw_text: str                                       # Config text as read from disk
    lines: List[str] = field(default_factory=list)      # Same snapshot, line by line
    anchors: List[str] = field(default_factory=list)    # Declaration order
    reference: Optional[ActiveReference] = None         # The active `colors:` line
    next_anchor: Optional[str] = None                   # The anchor being switched to
    new_lines: List[str] = field(default_factory=list)  # Lines after substitution
