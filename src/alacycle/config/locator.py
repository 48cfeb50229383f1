#!/usr/bin/env python3
"""
ALACYCLE CONFIG LOCATOR
-----------------------
Resolves which config file to cycle. An explicit path wins; otherwise
the XDG and HOME candidates are tried in order and the first existing
file is used.

Author: Alacycle Team
Date: 2026-10-19
"""

import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional

from alacycle.core.errors import ConfigFileNotFound
from alacycle.core.settings import Settings

logger = logging.getLogger("alacycle.locator")


class ConfigLocator:

    def __init__(self, settings: Settings, environ: Optional[Mapping[str, str]] = None):
        self.settings = settings
        self.environ = os.environ if environ is None else environ

    def candidates(self) -> List[Path]:
        """Search order; entries for unset variables are left out."""
        app = self.settings.app_name
        file_name = f"{app}.yml"
        paths = []

        xdg_config_home = self.environ.get("XDG_CONFIG_HOME")
        if xdg_config_home:
            base = Path(xdg_config_home)
            paths.append(base / app / file_name)
            paths.append(base / file_name)

        home = self.environ.get("HOME")
        if home:
            base = Path(home)
            paths.append(base / ".config" / app / file_name)
            paths.append(base / f".{file_name}")

        return paths

    def locate(self) -> Path:
        explicit = self.settings.config_path
        if explicit is not None:
            if not explicit.is_file():
                raise ConfigFileNotFound([explicit])
            return explicit

        searched = self.candidates()
        for candidate in searched:
            if candidate.is_file():
                logger.debug("Using config file %s", candidate)
                return candidate
            logger.debug("No config at %s", candidate)
        raise ConfigFileNotFound(searched)
