#!/usr/bin/env python3
"""
ALACYCLE SETTINGS
-----------------
Runtime configuration for a cycle run. Values come from defaults,
then the environment (ALACYCLE_*), then CLI flags.

Author: Alacycle Team
Date: 2026-10-19
"""

import os
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional, Pattern

# Captures the anchor name of the active color-scheme line
REFERENCE_PATTERN = re.compile(r"colors: \*(\S+)")

DEFAULT_APP = "alacritty"
BACKUP_SUFFIX = ".alacycle.backup"


@dataclass
class Settings:
    app_name: str = DEFAULT_APP
    config_path: Optional[Path] = None     # Explicit file, bypasses the search
    backup: bool = False
    backup_suffix: str = BACKUP_SUFFIX
    reference_pattern: Pattern = field(default=REFERENCE_PATTERN)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Builds settings from ALACYCLE_APP / ALACYCLE_CONFIG / ALACYCLE_BACKUP."""
        env = os.environ if environ is None else environ
        config = env.get("ALACYCLE_CONFIG")
        return cls(
            app_name=env.get("ALACYCLE_APP") or DEFAULT_APP,
            config_path=Path(config).expanduser() if config else None,
            backup=env.get("ALACYCLE_BACKUP", "").lower() in ("1", "true", "yes"),
        )

    def override(self, **changes) -> "Settings":
        """Returns a copy with every non-None change applied (CLI flags)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
