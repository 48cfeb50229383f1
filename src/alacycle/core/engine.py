#!/usr/bin/env python3
"""
ALACYCLE ENGINE - The Orchestrator
----------------------------------
The CycleEngine manages one run against the config file: locate, read,
run the pipeline, then (and only then) back up and write atomically.
Any failure before the write leaves the file untouched.

Author: Alacycle Team
Date: 2026-10-19
"""

import os
import shutil
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from alacycle.config.locator import ConfigLocator
from alacycle.core.errors import AlacycleError, MalformedDocument
from alacycle.core.models import join_lines
from alacycle.core.settings import Settings
from alacycle.cycling.context import CycleContext
from alacycle.cycling.pipeline import CyclePipeline

logger = logging.getLogger("alacycle.engine")


class CycleEngine:
    """
    Coordinates the locator, the pipeline and disk I/O. Returns plain
    report dicts so the CLI can render them without knowing the internals.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 environ: Optional[Dict[str, str]] = None):
        self.settings = settings or Settings.from_env(environ)
        self.locator = ConfigLocator(self.settings, environ)
        self.pipeline = CyclePipeline(self.settings.reference_pattern)

    def resolve_config(self) -> Path:
        return self.locator.locate()

    def _read(self, path: Path) -> str:
        # newline='' keeps CRLF / CR exactly as stored
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise MalformedDocument(f"{path} is not valid UTF-8: {e}") from e

    def inspect(self) -> CycleContext:
        """Parse and Locate against the resolved config. Never writes."""
        path = self.resolve_config()
        return self.pipeline.inspect(self._read(path))

    def cycle(self, dry_run: bool = False) -> Dict[str, Any]:
        """
        Performs a full cycle on the config file.

        Raises:
            AlacycleError: any stage failed; nothing has been written.
            IOError: the atomic write failed; the original is still in place.
        """
        path = self.resolve_config()
        try:
            raw_text = self._read(path)
            context = self.pipeline.run(raw_text)
        except AlacycleError as e:
            logger.error(f"Cycle aborted for {path}: [{e.kind}] {e}")
            raise

        new_content = join_lines(context.new_lines)
        result = {
            "config_path": str(path),
            "status": "PREVIEW" if dry_run else "CYCLED",
            "success": True,
            "previous": context.reference.anchor,
            "current": context.next_anchor,
            "line_no": context.reference.line_no,
            "anchors": list(context.anchors),
            "written": False,
            "backup_created": None,
            "original_content": raw_text,
            "content": new_content,
        }

        if dry_run:
            return result

        if self.settings.backup:
            backup_path = self._create_unique_backup(path)
            shutil.copy2(path, backup_path)
            result["backup_created"] = str(backup_path)
            logger.info(f"Backup written to {backup_path}")

        self._atomic_write(path, new_content)
        result["written"] = True
        logger.info(f"Switched {path} from {context.reference.anchor} to {context.next_anchor}")
        return result

    def _atomic_write(self, target_path: Path, content: str):
        # Write through symlinks (dotfile managers) instead of replacing them
        target_path = target_path.resolve()
        if not os.access(target_path.parent, os.W_OK):
            raise PermissionError(f"No write access to {target_path.parent}")
        temp_file = target_path.with_name(target_path.name + '.alacycle.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8', newline='\n') as f:
                f.write(content)
            shutil.copymode(target_path, temp_file)
            os.replace(temp_file, target_path)
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise IOError(f"Atomic write failed: {str(e)}") from e

    def _create_unique_backup(self, target_path: Path) -> Path:
        suffix = self.settings.backup_suffix
        backup_path = target_path.with_name(target_path.name + suffix)
        counter = 1
        while backup_path.exists():
            backup_path = target_path.with_name(f"{target_path.name}-{counter}{suffix}")
            counter += 1
        return backup_path
